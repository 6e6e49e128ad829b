"""Registry of the server's channels."""

from __future__ import annotations

from typing import Any

from .channel import Channel
from .errors import ERR_NOSUCHCHANNEL, IRCError


class ChannelManager:
    """Creates channels on first join and routes joins and parts to them."""

    def __init__(self) -> None:
        self.channels: list[Channel] = []

    def find_channel(self, name: str) -> Channel | None:
        """Return the channel with this name, or None."""
        return next((chan for chan in self.channels if chan.name == name), None)

    def channel_exists(self, name: str) -> bool:
        return self.find_channel(name) is not None

    def join_channel(self, client: Any, channel_name: str) -> None:
        """Join a channel, creating it with the client as operator if new."""
        channel = self.find_channel(channel_name)
        if channel is not None:
            channel.join_client(client)
            return
        channel = Channel(channel_name)
        self.channels.append(channel)
        channel.join_client(client, True)

    def leave_channel(self, client: Any, channel_name: str) -> None:
        """Leave a channel; raise if the channel does not exist."""
        channel = self.find_channel(channel_name)
        if channel is None:
            raise IRCError("Not such chan", ERR_NOSUCHCHANNEL)
        channel.leave_client(client)