from .command_forwarder import CommandForwarder

__all__ = ["CommandForwarder"]
