"""The listening IRC server and its command-line entry point."""

from __future__ import annotations

import logging
import re
import selectors
import socket
import sys
import threading

from .channel_manager import ChannelManager
from .client import Client

MAX_EVENTS = 20
LISTEN_BACKLOG = 100
READ_SIZE = 4096

log = logging.getLogger(__name__)


class Server:
    """Accepts connections on a port and feeds their data to clients."""

    def __init__(self, port: int, password: str) -> None:
        self.port = port
        self._password = password
        self.clients: dict[int, Client] = {}
        self.chan_man = ChannelManager()
        self._stop = threading.Event()

    def is_correct_password(self, password: str) -> bool:
        return self._password == password

    def is_nick_available(self, nick: str) -> bool:
        return all(client.nickname != nick for client in self.clients.values())

    def run(self) -> None:
        """Listen on the configured port and serve clients until stopped."""
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener, \
                selectors.DefaultSelector() as selector:
            listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            listener.bind(("", self.port))
            listener.listen(LISTEN_BACKLOG)
            listener.setblocking(False)
            selector.register(listener, selectors.EVENT_READ)
            log.info("Everything initialized. Listening on port %d.", self.port)
            try:
                while not self._stop.is_set():
                    for key, _ in selector.select(timeout=0.5)[:MAX_EVENTS]:
                        if key.fileobj is listener:
                            self._handle_new_connection(listener, selector)
                        else:
                            self._handle_received_data(key.fileobj, selector)
            finally:
                for client in self.clients.values():
                    client.sock.close()
                self.clients.clear()

    def _handle_new_connection(self, listener: socket.socket, selector: selectors.BaseSelector) -> None:
        try:
            conn, _ = listener.accept()
        except OSError as exc:
            log.error("accept failed: %s", exc)
            return
        conn.setblocking(False)
        selector.register(conn, selectors.EVENT_READ)
        self.clients[conn.fileno()] = Client(conn, self)
        log.info("connection accepted: %d", conn.fileno())

    def _handle_received_data(self, conn: socket.socket, selector: selectors.BaseSelector) -> None:
        fd = conn.fileno()
        while True:
            try:
                data = conn.recv(READ_SIZE)
            except BlockingIOError:
                return
            except OSError as exc:
                log.error("read: %s", exc)
                return
            if not data:
                log.info("Client %d disconnected", fd)
                selector.unregister(conn)
                conn.close()
                self.clients.pop(fd, None)
                return
            log.debug("data received: %r", data)
            self.clients[fd].add_to_buffer(data)


def _parse_port(text: str) -> int:
    """Read a leading decimal integer, yielding 0 when there is none."""
    match = re.match(r"\s*[+-]?\d+", text)
    return int(match.group()) if match else 0


def main(argv: list[str] | None = None) -> int:
    """Start the server from ``<port> <password>`` arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("Usage: ircsrv <port> <password>")
        return 1
    logging.basicConfig(level=logging.INFO)
    server = Server(_parse_port(args[0]), args[1])
    try:
        server.run()
    except OSError as exc:
        print(f"ircserv: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())