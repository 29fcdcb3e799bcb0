"""Daemon client for JSON-RPC communication via Unix socket"""
import json
import socket
from pathlib import Path
from typing import Dict, Optional


class DaemonError(Exception):
    """Daemon unreachable, or it answered with a JSON-RPC error"""


class DaemonClient:
    """Client for daemon communication via Unix socket

    Every operation returns the serialized OperationResult
    ({ok, data, message, error}) produced by the daemon.
    """

    def __init__(self, socket_path: Optional[Path] = None):
        if socket_path is None:
            from ....configuration.settings import settings
            socket_path = settings.socket_path
        self.socket_path = Path(socket_path)
        self._next_id = 0

    def get_cities(self) -> Dict:
        return self._call("cities.list")

    def get_goods(self) -> Dict:
        return self._call("goods.list")

    def get_player(self) -> Dict:
        """Player state; completes any journey due and reports it under data.events"""
        return self._call("player.get")

    def hire(self) -> Dict:
        return self._call("merchant.hire")

    def dispatch(self, merchant_name: str, city_id: str) -> Dict:
        return self._call("merchant.dispatch", {"merchant": merchant_name, "city": city_id})

    def trade(self, action: str, good_id: str, quantity: int, merchant_name: str) -> Dict:
        """Buy or sell at the merchant's current city

        Args:
            action: "buy" or "sell"
            good_id: Good to trade
            quantity: Positive number of units
            merchant_name: Hired, idle merchant doing the trade
        """
        return self._call("trade.execute", {
            "action": action,
            "good": good_id,
            "quantity": quantity,
            "merchant": merchant_name,
        })

    def reset(self) -> Dict:
        return self._call("player.reset")

    def get_news(self) -> Dict:
        return self._call("news.get")

    def get_market(self, city_id: str) -> Dict:
        return self._call("market.get", {"city": city_id})

    def _call(self, method: str, params: Optional[Dict] = None) -> Dict:
        self._next_id += 1
        return self._send_request({
            "jsonrpc": "2.0",
            "method": method,
            "params": params or {},
            "id": self._next_id
        })

    def _send_request(self, request: Dict) -> Dict:
        """Send JSON-RPC request via Unix socket

        Args:
            request: JSON-RPC 2.0 request dict

        Returns:
            Result from response

        Raises:
            DaemonError: If daemon returns error or socket fails
        """
        sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        try:
            try:
                sock.connect(str(self.socket_path))
            except OSError as e:
                raise DaemonError(f"Cannot reach daemon at {self.socket_path}: {e}") from e
            sock.sendall(json.dumps(request).encode())

            # Server closes the connection after sending the complete response
            chunks = []
            while True:
                chunk = sock.recv(65536)
                if not chunk:
                    break
                chunks.append(chunk)
            response_data = b''.join(chunks)

            try:
                response = json.loads(response_data.decode('utf-8'))
            except (UnicodeDecodeError, json.JSONDecodeError) as e:
                raise DaemonError(
                    f"Malformed daemon response ({len(response_data)} bytes): {e}"
                ) from e

            if "error" in response:
                raise DaemonError(response["error"]["message"])

            return response.get("result", {})
        finally:
            sock.close()
