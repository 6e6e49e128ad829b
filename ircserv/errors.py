"""IRC numeric reply codes and the exception that carries them."""

ERR_NOSUCHCHANNEL = 403
ERR_NONICKNAMEGIVEN = 431
ERR_NICKNAMEINUSE = 433
ERR_NOTONCHANNEL = 442
ERR_NEEDMOREPARAMS = 461
ERR_PASSWDMISMATCH = 464
ERR_CHANNELISFULL = 471


class IRCError(Exception):
    """An error that maps onto an IRC numeric reply."""

    def __init__(self, message: str, numeric: int) -> None:
        super().__init__(message)
        self.message = message
        self.numeric = numeric

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, {self.numeric!r})"