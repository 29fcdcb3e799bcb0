"""Daemon server with Unix socket and JSON-RPC 2.0"""
import asyncio
import json
import logging
import os
import signal
import threading
from pathlib import Path
from typing import Awaitable, Callable, Dict, Optional

from ..gateway import GuildGateway, OperationResult

logger = logging.getLogger(__name__)

INVALID_REQUEST = -32600
INVALID_PARAMS = -32602
METHOD_NOT_FOUND = -32601
INTERNAL_ERROR = -32603


class DaemonServer:
    """Daemon hosting the simulation

    - Unix socket at var/guild.sock (or MERCHANT_GUILD_DAEMON_SOCKET env var)
    - JSON-RPC 2.0 protocol, one request per connection
    - Event scheduler ticking in the background
    - Graceful shutdown on SIGTERM/SIGINT
    """

    def __init__(
        self,
        socket_path: Optional[Path] = None,
        pid_file: Optional[Path] = None,
        gateway: Optional[GuildGateway] = None
    ):
        # Import here to avoid circular dependencies
        from ....configuration.container import get_clock, get_event_scheduler, get_mediator
        from ....configuration.settings import settings

        self.socket_path = Path(socket_path or settings.socket_path)
        self.pid_file = Path(pid_file or settings.pid_path)
        self._tick_seconds = settings.tick_seconds
        self._gateway = gateway or GuildGateway(get_mediator())
        self._scheduler = get_event_scheduler()
        self._clock = get_clock()
        self._server: Optional[asyncio.Server] = None
        self._scheduler_task: Optional[asyncio.Task] = None
        self._stop_event: Optional[asyncio.Event] = None
        self._running = False
        self._owns_pid_file = False

        self._methods: Dict[str, Callable[[Dict], Awaitable[OperationResult]]] = {
            "cities.list": lambda p: self._gateway.get_cities(),
            "goods.list": lambda p: self._gateway.get_goods(),
            "player.get": lambda p: self._gateway.get_player(),
            "player.reset": lambda p: self._gateway.reset(),
            "merchant.hire": lambda p: self._gateway.hire(),
            "merchant.dispatch": lambda p: self._gateway.dispatch(p["merchant"], p["city"]),
            "trade.execute": lambda p: self._gateway.trade(
                p["action"], p["good"], p["quantity"], p["merchant"]
            ),
            "news.get": lambda p: self._gateway.get_news(),
            "market.get": lambda p: self._gateway.get_market(p["city"]),
        }

    def _check_already_running(self) -> bool:
        """Check if another daemon instance is already running

        Returns:
            True if another instance is running, False otherwise
        """
        if not self.pid_file.exists():
            return False

        try:
            pid = int(self.pid_file.read_text().strip())
        except (ValueError, OSError) as e:
            logger.warning(f"Invalid PID file: {e}, cleaning up")
            self.pid_file.unlink(missing_ok=True)
            return False

        try:
            os.kill(pid, 0)  # Signal 0 only checks the process exists
        except OSError:
            logger.warning(f"Stale PID file found (PID {pid}), cleaning up")
            self.pid_file.unlink(missing_ok=True)
            return False

        logger.error(f"Daemon already running with PID {pid}")
        return True

    def _write_pid_file(self):
        self.pid_file.parent.mkdir(parents=True, exist_ok=True)
        self.pid_file.write_text(str(os.getpid()))
        self._owns_pid_file = True
        logger.info(f"Wrote PID {os.getpid()} to {self.pid_file}")

    def _cleanup_pid_file(self):
        if not self._owns_pid_file:
            return
        try:
            if self.pid_file.exists():
                self.pid_file.unlink()
                logger.info("Removed PID file")
            self._owns_pid_file = False
        except OSError as e:
            logger.error(f"Failed to remove PID file: {e}")

    async def start(self):
        """Start daemon server and serve until stopped"""
        if self._check_already_running():
            raise RuntimeError("Daemon is already running. Stop it with SIGTERM first.")

        self._write_pid_file()

        if self.socket_path.exists():
            logger.warning(f"Removing stale socket file: {self.socket_path}")
            self.socket_path.unlink()
        self.socket_path.parent.mkdir(parents=True, exist_ok=True)

        self._server = await asyncio.start_unix_server(
            self._handle_connection,
            path=str(self.socket_path)
        )
        self.socket_path.chmod(0o660)
        self._running = True

        self._stop_event = asyncio.Event()
        self._scheduler_task = asyncio.create_task(
            self._scheduler.run(self._clock, self._stop_event, self._tick_seconds)
        )

        logger.info(f"Daemon server started on {self.socket_path}")

        # Signal handlers only work in the main thread
        if threading.current_thread() is threading.main_thread():
            loop = asyncio.get_running_loop()
            for sig in (signal.SIGTERM, signal.SIGINT):
                loop.add_signal_handler(sig, lambda: asyncio.create_task(self.stop()))
        else:
            logger.debug("Skipping signal handlers (not in main thread)")

        try:
            async with self._server:
                await self._server.serve_forever()
        except asyncio.CancelledError:
            logger.info("Serve loop cancelled")

    async def stop(self):
        """Graceful shutdown"""
        if not self._running:
            return

        logger.info("Shutting down daemon server...")
        self._running = False

        if self._stop_event is not None:
            self._stop_event.set()
        if self._scheduler_task is not None:
            await self._scheduler_task

        if self._server:
            self._server.close()

        if self.socket_path.exists():
            self.socket_path.unlink()
        self._cleanup_pid_file()

        logger.info("Daemon server stopped")

    async def _handle_connection(
        self,
        reader: asyncio.StreamReader,
        writer: asyncio.StreamWriter
    ):
        """Handle client connection"""
        try:
            data = await reader.read(65536)
            try:
                request = json.loads(data.decode())
            except (UnicodeDecodeError, json.JSONDecodeError) as e:
                response = _error_response(None, -32700, f"Parse error: {e}")
            else:
                if isinstance(request, dict):
                    logger.info(f"Received request: {request.get('method')} (id={request.get('id')})")
                response = await self.process_request(request)

            writer.write(json.dumps(response, ensure_ascii=True, separators=(',', ':')).encode('utf-8'))
            await writer.drain()
        except (ConnectionError, OSError) as e:
            logger.error(f"Error handling connection: {e}", exc_info=True)
        finally:
            writer.close()

    async def process_request(self, request: Dict) -> Dict:
        """Process JSON-RPC request

        Args:
            request: JSON-RPC 2.0 request

        Returns:
            JSON-RPC 2.0 response whose result is a serialized OperationResult
        """
        if not isinstance(request, dict):
            return _error_response(None, INVALID_REQUEST, "Invalid Request")

        method = request.get("method")
        params = request.get("params") or {}
        request_id = request.get("id")

        handler = self._methods.get(method)
        if handler is None:
            return _error_response(request_id, METHOD_NOT_FOUND, f"Unknown method: {method}")

        try:
            result = await handler(params)
        except KeyError as e:
            return _error_response(request_id, INVALID_PARAMS, f"Missing parameter: {e.args[0]}")
        except Exception as e:
            logger.error(f"Error processing request {method}: {e}", exc_info=True)
            return _error_response(request_id, INTERNAL_ERROR, str(e))

        return {"jsonrpc": "2.0", "result": result.to_dict(), "id": request_id}


def _error_response(request_id, code: int, message: str) -> Dict:
    return {
        "jsonrpc": "2.0",
        "error": {"code": code, "message": message},
        "id": request_id
    }


def main():
    """Entry point for daemon server"""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Load .env before the container builds the engine and settings are read
    from dotenv import load_dotenv
    from ....configuration.settings import settings

    dotenv_path = Path.cwd() / '.env'
    if dotenv_path.exists():
        load_dotenv(dotenv_path)
        settings.apply_env()
        logger.info(f"Loaded .env from {dotenv_path}")
    else:
        logger.warning(f".env not found at {dotenv_path}")

    server = DaemonServer()

    try:
        asyncio.run(server.start())
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except RuntimeError as e:
        # Daemon already running
        logger.error(str(e))
        return 1
    finally:
        server._cleanup_pid_file()
    return 0


if __name__ == "__main__":
    main()
