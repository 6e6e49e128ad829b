"""A small IRC server: message parsing, client registration, channels and a selector-based event loop."""

__version__ = "0.1.0"
__all__ = ["channel", "channel_manager", "client", "command", "errors", "server"]