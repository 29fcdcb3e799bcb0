import argparse

from ..daemon.daemon_client import DaemonClient, DaemonError
from .formatting import report


def dispatch_command(args: argparse.Namespace) -> int:
    """Handle merchant dispatch command"""
    try:
        result = DaemonClient().dispatch(args.merchant, args.city)
    except DaemonError as e:
        print(f"❌ Error: {e}")
        return 1
    return report(result)


def setup_navigation_commands(subparsers):
    dispatch = subparsers.add_parser("dispatch", help="Send a merchant to a connected city")
    dispatch.add_argument("merchant", help="Hired, idle merchant")
    dispatch.add_argument("city", help="Destination city ID")
    dispatch.set_defaults(func=dispatch_command)
