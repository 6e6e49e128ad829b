import pytest

from ircserv.channel_manager import ChannelManager
from ircserv.errors import ERR_NOSUCHCHANNEL, ERR_NOTONCHANNEL, IRCError


class _Member:
    pass


def test_empty_manager_finds_nothing():
    manager = ChannelManager()
    assert manager.find_channel("#room") is None
    assert manager.channel_exists("#room") is False


def test_first_join_creates_channel_with_operator():
    manager = ChannelManager()
    member = _Member()
    manager.join_channel(member, "#room")
    chan = manager.find_channel("#room")
    assert chan.name == "#room"
    assert chan.is_client_in_channel(member)
    assert chan.is_client_operator(member) is True
    assert manager.channel_exists("#room") is True


def test_second_join_is_not_operator():
    manager = ChannelManager()
    first, second = _Member(), _Member()
    manager.join_channel(first, "#room")
    manager.join_channel(second, "#room")
    chan = manager.find_channel("#room")
    assert len(chan) == 2
    assert chan.is_client_operator(second) is False
    assert len(manager.channels) == 1


def test_separate_channels():
    manager = ChannelManager()
    member = _Member()
    manager.join_channel(member, "#a")
    manager.join_channel(member, "#b")
    assert [c.name for c in manager.channels] == ["#a", "#b"]
    assert manager.find_channel("#b").is_client_operator(member) is True


def test_names_are_case_sensitive():
    manager = ChannelManager()
    manager.join_channel(_Member(), "#Room")
    assert manager.channel_exists("#room") is False


def test_leave_channel_removes_member():
    manager = ChannelManager()
    member = _Member()
    manager.join_channel(member, "#room")
    manager.leave_channel(member, "#room")
    chan = manager.find_channel("#room")
    assert not chan.is_client_in_channel(member)
    assert manager.channel_exists("#room") is True


def test_leave_unknown_channel_raises():
    manager = ChannelManager()
    with pytest.raises(IRCError, match="Not such chan") as info:
        manager.leave_channel(_Member(), "#nowhere")
    assert info.value.numeric == ERR_NOSUCHCHANNEL


def test_leave_channel_not_joined_raises():
    manager = ChannelManager()
    manager.join_channel(_Member(), "#room")
    with pytest.raises(IRCError) as info:
        manager.leave_channel(_Member(), "#room")
    assert info.value.numeric == ERR_NOTONCHANNEL


def test_join_none_still_creates_channel():
    manager = ChannelManager()
    with pytest.raises(ValueError, match="client is null"):
        manager.join_channel(None, "#room")
    assert manager.channel_exists("#room") is True
    assert len(manager.find_channel("#room")) == 0