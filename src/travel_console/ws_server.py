"""
WebSocket integration for broadcasting notification counters.

Uses flask-sock to add WebSocket support to the Dash/Flask server on the
same port. No separate server needed.

Usage:
    from travel_console.ws_server import init_websocket, broadcast_counts

    # Initialize with Flask app (call once during app setup)
    init_websocket(app.server)

    # Broadcast the badge counters after a change
    broadcast_counts(counts)
"""

import json
from collections.abc import Set
from threading import Lock

from flask import Flask
from flask_sock import Sock
from simple_websocket import ConnectionClosed
from simple_websocket import Server as WebSocketServer

from travel_console.lib import logs
from travel_console.models.notification import NotificationCounts

LOG = logs.logger(__file__)

WS_PATH = "/ws/notifications"

# WebSocket state
_sock: Sock | None = None
_clients: Set[WebSocketServer] = set()
_clients_lock = Lock()


def init_websocket(flask_app: Flask) -> None:
    """
    Initialize WebSocket support on the Flask server.

    Args:
        flask_app: The Flask app instance (from Dash's app.server).
    """
    global _sock
    _sock = Sock(flask_app)

    @_sock.route(WS_PATH)
    def notifications_ws(ws: WebSocketServer) -> None:
        """Hold a client connection open until it goes away."""
        with _clients_lock:
            _clients.add(ws)
        LOG.info("WebSocket client connected")

        try:
            while True:
                try:
                    ws.receive(timeout=30)
                except ConnectionClosed:
                    break
        finally:
            with _clients_lock:
                _clients.discard(ws)
            LOG.info("WebSocket client disconnected")


def client_count() -> int:
    with _clients_lock:
        return len(_clients)


def broadcast_counts(counts: NotificationCounts) -> int:
    """
    Send the badge counters to every connected client.

    Thread-safe. Clients whose send fails are dropped.

    Returns:
        Number of clients the message reached.
    """
    message = json.dumps({"type": "counts", **counts.to_dict()})
    with _clients_lock:
        if not _clients:
            return 0

        disconnected = []
        for client in _clients:
            try:
                client.send(message)
            except ConnectionClosed:
                disconnected.append(client)

        for client in disconnected:
            _clients.discard(client)
        return len(_clients)
