#!/usr/bin/env python3
import argparse
import sys
from .daemon_cli import setup_daemon_commands
from .market_cli import setup_market_commands
from .navigation_cli import setup_navigation_commands
from .player_cli import setup_player_commands
from .trading_cli import setup_trading_commands

def main():
    parser = argparse.ArgumentParser(description="Merchant Guild")
    subparsers = parser.add_subparsers(dest="command")

    # Setup subcommands
    setup_daemon_commands(subparsers)
    setup_market_commands(subparsers)
    setup_player_commands(subparsers)
    setup_navigation_commands(subparsers)
    setup_trading_commands(subparsers)

    args = parser.parse_args()

    # Use func attribute set by set_defaults
    if hasattr(args, "func"):
        sys.exit(args.func(args))
    else:
        parser.print_help()
        sys.exit(1)

if __name__ == "__main__":
    main()
