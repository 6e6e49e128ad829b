"""A connected IRC client: its line buffer, identity and replies."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .command import parse_message
from .errors import ERR_PASSWDMISMATCH

if TYPE_CHECKING:
    from .server import Server

MESSAGE_BUFFER_SIZE = 512

_NO_PARAMS = ""
_MISMATCH_MESSAGE = "Password incorrect"

log = logging.getLogger(__name__)


class Client:
    """State of one connection, fed with raw bytes as they arrive."""

    def __init__(self, sock: Any, server: Server) -> None:
        self.sock = sock
        self.server = server
        self.fd: int = sock.fileno()
        self.nickname = ""
        self.username = ""
        self.registered = False
        self.correct_password = False
        self._buffer = b""

    def __repr__(self) -> str:
        return f"Client(fd={self.fd}, nickname={self.nickname!r})"

    def add_to_buffer(self, data: bytes | str) -> None:
        """Append received data and execute every complete CRLF-terminated line."""
        if isinstance(data, str):
            data = data.encode()
        self._buffer += data
        while b"\r\n" in self._buffer:
            raw, self._buffer = self._buffer.split(b"\r\n", 1)
            line = raw.decode("utf-8", errors="replace")
            log.debug("Complete message: %s", line)
            try:
                cmd = parse_message(line)
            except ValueError as exc:
                log.warning("Error while parsing command: %s", exc)
                continue
            log.debug("%s", cmd)
            cmd.execute(self, self.server)

    def send_response(self, response: str) -> None:
        """Send one line to the client, appending CRLF."""
        try:
            self.sock.sendall(f"{response}\r\n".encode())
        except OSError as exc:
            log.warning("Could not send to client %d: %s", self.fd, exc)

    def send_numeric_response(self, numeric: int, params: str, message: str) -> None:
        """Send a numeric reply; the nickname (or ``*``) is the first parameter."""
        response = f"{numeric} {self.nickname or '*'}"
        if params:
            response += f" {params}"
        response += f" :{message}"
        self.send_response(response)

    def try_register(self) -> bool:
        """Complete registration once nickname, username and password are in place."""
        if not self.nickname or not self.username:
            return False
        if not self.correct_password:
            mismatch = ERR_PASSWDMISMATCH
            self.send_numeric_response(mismatch, _NO_PARAMS, _MISMATCH_MESSAGE)
            return False
        self.registered = True
        self.send_response(
            f"001 {self.nickname} :Welcome to the Internet Relay Network{self.nickname}!"
        )
        self.send_response(f"002 {self.nickname} :Your host is our.server42.at.")
        self.send_response("003  :This server was created today.")
        return True