"""Services for authentication, password hashing and push alerts."""
from .token_service import TokenService, InvalidToken
from .passwords import PasswordHasher
from .push_sender import PushSenderService, PushConfig
from .alerter import AlerterService

__all__ = [
    "TokenService",
    "InvalidToken",
    "PasswordHasher",
    "PushSenderService",
    "PushConfig",
    "AlerterService",
]
