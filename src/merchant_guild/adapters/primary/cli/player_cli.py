import argparse

from ..daemon.daemon_client import DaemonClient, DaemonError
from .formatting import format_merchant, print_json, report


def player_info_command(args: argparse.Namespace) -> int:
    """Handle player info command"""
    try:
        result = DaemonClient().get_player()
    except DaemonError as e:
        print(f"❌ Error: {e}")
        return 1

    if args.json:
        print_json(result)
        return 0 if result.get("ok") else 1
    if not result.get("ok"):
        return report(result)

    player = result["data"]
    for event in player["events"]:
        print(f"📣 {event}")
    print(f"{player['name']} - {player['gold']} gold")
    print("Merchants:")
    for merchant in player["merchants"]:
        print(format_merchant(merchant))
    print(f"News: {player['news']['text']}")
    return 0


def hire_merchant_command(args: argparse.Namespace) -> int:
    """Handle merchant hire command"""
    try:
        return report(DaemonClient().hire())
    except DaemonError as e:
        print(f"❌ Error: {e}")
        return 1


def reset_player_command(args: argparse.Namespace) -> int:
    """Handle player reset command"""
    try:
        return report(DaemonClient().reset())
    except DaemonError as e:
        print(f"❌ Error: {e}")
        return 1


def setup_player_commands(subparsers):
    player = subparsers.add_parser("player", help="Show guild gold, merchants and cargo")
    player.add_argument("--json", action="store_true", help="Output as JSON")
    player.set_defaults(func=player_info_command)

    hire = subparsers.add_parser("hire", help="Hire the next available merchant")
    hire.set_defaults(func=hire_merchant_command)

    reset = subparsers.add_parser("reset", help="Restore the starting guild")
    reset.set_defaults(func=reset_player_command)
