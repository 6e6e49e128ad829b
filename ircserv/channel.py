"""A single IRC channel and its members."""

from __future__ import annotations

from typing import Any

from .errors import ERR_CHANNELISFULL, ERR_NOTONCHANNEL, IRCError


class Channel:
    """A named channel tracking its members and which of them are operators."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.topic = ""
        self.invite_only = False
        self.topic_needs_op = False
        self.password = ""
        self.user_limit = 0  # 0 means no limit
        self._clients: dict[Any, bool] = {}

    def __repr__(self) -> str:
        return f"Channel({self.name!r})"

    def __len__(self) -> int:
        return len(self._clients)

    def is_full(self) -> bool:
        """Return True when the member count has reached the user limit."""
        return len(self._clients) >= self.user_limit

    def join_client(self, client: Any, is_operator: bool = False) -> None:
        """Add a client, optionally as operator; raise if the channel is full."""
        if client is None:
            raise ValueError("client is null")
        if self.user_limit > 0 and len(self._clients) >= self.user_limit:
            raise IRCError("Channel is full", ERR_CHANNELISFULL)
        self._clients[client] = is_operator

    def leave_client(self, client: Any) -> None:
        """Remove a client; raise if it is not a member."""
        if client is None:
            raise ValueError("client is null")
        try:
            del self._clients[client]
        except KeyError:
            raise IRCError("Not on that channel", ERR_NOTONCHANNEL) from None

    def is_client_in_channel(self, client: Any) -> bool:
        if client is None:
            return False
        return client in self._clients

    def is_client_operator(self, client: Any) -> bool:
        if client is None:
            return False
        return self._clients.get(client, False)