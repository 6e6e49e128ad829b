"""Parsing of IRC message lines and dispatch of the commands they carry."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from .errors import (
    ERR_NEEDMOREPARAMS,
    ERR_NICKNAMEINUSE,
    ERR_NONICKNAMEGIVEN,
    IRCError,
)

if TYPE_CHECKING:
    from .client import Client
    from .server import Server

SERVER_NAME = "AmazingServer"

log = logging.getLogger(__name__)


@dataclass
class Command:
    """One parsed IRC message: optional prefix, command word and parameters."""

    command: str
    prefix: str = ""
    parameters: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        text = f"Command: {self.command}"
        if self.prefix:
            text += f" (prefix: {self.prefix})"
        if self.parameters:
            text += " parameters: " + ", ".join(f"'{param}'" for param in self.parameters)
        return text

    def execute(self, client: Client, server: Server) -> None:
        """Run the handler for this command on behalf of ``client``."""
        handler = _HANDLERS.get(self.command)
        if handler is None:
            log.info("Command not found: '%s'", self.command)
            return
        log.info("Command found: %s", self.command)
        handler(self, client, server)

    def _cap(self, client: Client, server: Server) -> None:
        if self.parameters and self.parameters[0] == "LS":
            client.send_response("CAP * LS :")

    def _pass(self, client: Client, server: Server) -> None:
        if not self.parameters:
            client.send_numeric_response(ERR_NEEDMOREPARAMS, "PASS", "Not enough parameters")
            return
        client.correct_password = server.is_correct_password(self.parameters[0])
        log.debug("client.correct_password: %s", client.correct_password)

    def _nick(self, client: Client, server: Server) -> None:
        if not self.parameters:
            client.send_numeric_response(ERR_NONICKNAMEGIVEN, "", "No nickname given")
            return
        nick = self.parameters[0]
        if server.is_nick_available(nick):
            client.nickname = nick
        else:
            client.send_numeric_response(ERR_NICKNAMEINUSE, nick, "Nickname is already in use")
        client.try_register()

    def _user(self, client: Client, server: Server) -> None:
        # Parameters: <username> <hostname> <servername> <realname>
        if len(self.parameters) < 4:
            return
        client.username = self.parameters[0]
        client.try_register()

    def _ping(self, client: Client, server: Server) -> None:
        if self.parameters:
            client.send_response(f"PONG {SERVER_NAME} {self.parameters[-1]}")
        else:
            client.send_response(str(ERR_NEEDMOREPARAMS))

    def _join(self, client: Client, server: Server) -> None:
        if not self.parameters:
            return
        chan_name = self.parameters[0]
        try:
            server.chan_man.join_channel(client, chan_name)
        except IRCError as exc:
            client.send_response(f"{exc.numeric} {exc}")
        except ValueError as exc:
            client.send_response(f"PART fail: {exc}")
        else:
            client.send_response(f"JOIN {chan_name}")

    def _part(self, client: Client, server: Server) -> None:
        if not self.parameters:
            client.send_response(str(ERR_NEEDMOREPARAMS))
            return
        chan_name = self.parameters[0]
        try:
            server.chan_man.leave_channel(client, chan_name)
        except IRCError as exc:
            client.send_response(f"{exc.numeric} {exc}")
        except ValueError as exc:
            client.send_response(f"PART fail: {exc}")
        else:
            client.send_response(f"PART {chan_name}")


_HANDLERS: dict[str, Callable[[Command, "Client", "Server"], None]] = {
    "CAP": Command._cap,
    "PASS": Command._pass,
    "NICK": Command._nick,
    "USER": Command._user,
    "PING": Command._ping,
    "JOIN": Command._join,
    "PART": Command._part,
}


def parse_message(line: str) -> Command:
    """Parse one message line (without CRLF) into a Command.

    Grammar: ``[':' <prefix> <SPACE>] <command> <params>``. Raises ValueError
    when no command word is present.
    """
    rest = line
    prefix = ""
    if rest.startswith(":"):
        prefix, sep, rest = rest[1:].partition(" ")
        if not sep:
            raise ValueError("Missing command after prefix")
        rest = rest.lstrip(" ")

    command, _, rest = rest.partition(" ")
    if not command:
        raise ValueError("Empty Command")

    parameters: list[str] = []
    rest = rest.lstrip(" ")
    while rest:
        if rest.startswith(":"):
            parameters.append(rest[1:])
            break
        middle, _, rest = rest.partition(" ")
        parameters.append(middle)
        rest = rest.lstrip(" ")

    return Command(command=command, prefix=prefix, parameters=parameters)