"""Daemon hosting the simulation behind a Unix socket"""
from .daemon_client import DaemonClient, DaemonError
from .daemon_server import DaemonServer

__all__ = ['DaemonClient', 'DaemonError', 'DaemonServer']
