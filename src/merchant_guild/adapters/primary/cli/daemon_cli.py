"""CLI commands for daemon operations"""
import argparse


def daemon_server_command(args: argparse.Namespace) -> int:
    """Start daemon server"""
    from ..daemon.daemon_server import main as daemon_main
    return daemon_main() or 0


def setup_daemon_commands(subparsers):
    """Setup daemon CLI commands

    Args:
        subparsers: Subparsers from main argument parser
    """
    daemon = subparsers.add_parser("daemon", help="Daemon operations")
    daemon_sub = daemon.add_subparsers(dest="daemon_command")

    server = daemon_sub.add_parser("server", help="Start daemon server")
    server.set_defaults(func=daemon_server_command)
