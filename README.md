# ircserv

A small IRC server. It accepts many clients on one TCP port and serves them
from a single event loop that uses `selectors`. A client registers with a
shared connection password, a nickname and a user name. It can then join and
leave channels.

## Installation

```
pip install .
```

## Running the server

```
ircserv <port> <password>
```

Both arguments are required. If either is missing, the command prints a usage
line and exits with status 1. The port is read as a leading decimal integer.
The server listens on every interface at that port and logs its activity at
INFO level. Press Ctrl+C to stop it.

`python -m ircserv.server <port> <password>` does the same.

## Supported commands

Each line from a client must end in CRLF. A line is parsed as
`[:prefix] COMMAND params...`, and a parameter that starts with `:` takes the
rest of the line. The server logs unknown commands and otherwise ignores them.

| Command | Effect |
|---------|--------|
| `CAP LS` | Replies `CAP * LS :`, an empty capability list |
| `PASS <password>` | Records whether the password matches. With no parameter it replies `461` |
| `NICK <nickname>` | Sets the nickname, or replies `433` if another client already uses it. With no parameter it replies `431`. It then attempts registration |
| `USER <username> <hostname> <servername> <realname>` | Sets the user name and attempts registration. If fewer than four parameters are given, the command is ignored |
| `PING <token>` | Replies `PONG AmazingServer <token>`. With no parameter it replies `461` |
| `JOIN <channel>` | Joins the channel, or creates it with the client as operator. Replies `JOIN <channel>` |
| `PART <channel>` | Leaves the channel. Replies `PART <channel>`, `403` if there is no such channel, or `442` if the client is not a member |

Registration completes once a client has both a nickname and a user name. If
its last `PASS` matched, it receives the welcome replies `001`, `002` and
`003`. Otherwise it receives `464 Password incorrect`.

## Using it as a library

```python
from ircserv.server import Server

password = "password"
server = Server(6667, password)
server.run()  # blocks, serving clients
```

Other parts of the package:

- `ircserv.command.parse_message(line)` turns one line (without CRLF) into a
  `Command` with `prefix`, `command` and `parameters`. It raises `ValueError`
  if there is no command word. `Command.execute(client, server)` runs the
  matching handler.
- `ircserv.client.Client` holds one connection's buffer, nickname, user name
  and registration state. It also provides `send_response` and
  `send_numeric_response`.
- `ircserv.channel.Channel` tracks a channel's members and which of them are
  operators. It honours a `user_limit`, where 0 means no limit.
- `ircserv.channel_manager.ChannelManager` finds, creates, joins and leaves
  channels.
- `ircserv.errors.IRCError` carries an IRC numeric in its `numeric`
  attribute. The `ERR_*` constants are in the same module.

## What it does not do

- It does not relay messages. There is no `PRIVMSG`, `NOTICE` or `QUIT`, and
  joins and parts are not announced to other channel members.
- It has no channel administration commands: no `MODE`, `TOPIC`, `KICK` or
  `INVITE`. `Channel` stores a topic, an invite-only flag, a password and a
  user limit, but clients cannot set any of them.
- Empty channels are kept. A client that disconnects stays listed in the
  channels it had joined.
- `JOIN` and `PART` take one channel each, and their replies are simple
  lines rather than full IRC messages with a source prefix.

## Tests

```
pip install ".[test]"
pytest
```