from .command_handler import CommandHandler
from .plain_text_handler import NotFoundHandler

__all__ = ["CommandHandler", "NotFoundHandler"]
