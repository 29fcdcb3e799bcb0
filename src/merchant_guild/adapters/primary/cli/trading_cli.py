import argparse

from ..daemon.daemon_client import DaemonClient, DaemonError
from .formatting import report


def trade_command(args: argparse.Namespace) -> int:
    """Handle trade command"""
    try:
        result = DaemonClient().trade(args.action, args.good, args.quantity, args.merchant)
    except DaemonError as e:
        print(f"❌ Error: {e}")
        return 1
    return report(result)


def setup_trading_commands(subparsers):
    trade = subparsers.add_parser("trade", help="Buy or sell goods at a merchant's city")
    trade.add_argument("action", choices=["buy", "sell"], help="Trade direction")
    trade.add_argument("good", help="Good ID, e.g. wheat")
    trade.add_argument("quantity", type=int, help="Number of units")
    trade.add_argument("--merchant", required=True, help="Hired merchant doing the trade")
    trade.set_defaults(func=trade_command)
