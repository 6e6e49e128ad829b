import pytest

from ircserv.channel import Channel
from ircserv.errors import ERR_CHANNELISFULL, ERR_NOTONCHANNEL, IRCError


class _Member:
    pass


def test_new_channel_is_empty():
    chan = Channel("#room")
    assert chan.name == "#room"
    assert len(chan) == 0
    assert chan.topic == ""


def test_join_adds_member():
    chan = Channel("#room")
    member = _Member()
    chan.join_client(member)
    assert chan.is_client_in_channel(member)
    assert len(chan) == 1
    assert chan.is_client_operator(member) is False


def test_join_as_operator():
    chan = Channel("#room")
    member = _Member()
    chan.join_client(member, True)
    assert chan.is_client_operator(member) is True


def test_join_twice_keeps_single_entry():
    chan = Channel("#room")
    member = _Member()
    chan.join_client(member)
    chan.join_client(member, True)
    assert len(chan) == 1
    assert chan.is_client_operator(member) is True


def test_join_none_raises():
    chan = Channel("#room")
    with pytest.raises(ValueError, match="client is null"):
        chan.join_client(None)


def test_user_limit_enforced():
    chan = Channel("#room")
    chan.user_limit = 1
    chan.join_client(_Member())
    with pytest.raises(IRCError, match="Channel is full") as info:
        chan.join_client(_Member())
    assert info.value.numeric == ERR_CHANNELISFULL
    assert len(chan) == 1


def test_no_limit_allows_many():
    chan = Channel("#room")
    members = [_Member() for _ in range(5)]
    for member in members:
        chan.join_client(member)
    assert len(chan) == len(members)
    assert all(chan.is_client_in_channel(m) for m in members)


def test_leave_removes_member():
    chan = Channel("#room")
    member = _Member()
    chan.join_client(member)
    chan.leave_client(member)
    assert not chan.is_client_in_channel(member)
    assert len(chan) == 0


def test_leave_non_member_raises():
    chan = Channel("#room")
    with pytest.raises(IRCError, match="Not on that channel") as info:
        chan.leave_client(_Member())
    assert info.value.numeric == ERR_NOTONCHANNEL


def test_leave_none_raises():
    chan = Channel("#room")
    with pytest.raises(ValueError, match="client is null"):
        chan.leave_client(None)


def test_queries_with_none_are_false():
    chan = Channel("#room")
    assert chan.is_client_in_channel(None) is False
    assert chan.is_client_operator(None) is False


def test_operator_of_non_member_is_false():
    chan = Channel("#room")
    assert chan.is_client_operator(_Member()) is False


def test_is_full_follows_limit():
    chan = Channel("#room")
    chan.user_limit = 2
    chan.join_client(_Member())
    assert chan.is_full() is False
    chan.join_client(_Member())
    assert chan.is_full() is True


def test_is_full_with_zero_limit():
    chan = Channel("#room")
    assert chan.is_full() is True


def test_topic_can_be_set():
    chan = Channel("#room")
    chan.topic = "hello world"
    assert chan.topic == "hello world"