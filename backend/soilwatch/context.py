"""Application context shared by all request handlers."""
from dataclasses import dataclass
from datetime import timedelta

from .config import Settings
from .database import Database
from .services import (
    AlerterService,
    PasswordHasher,
    PushConfig,
    PushSenderService,
    TokenService,
)


@dataclass
class AppContext:
    """Collaborators built once per application and injected into handlers."""
    settings: Settings
    db: Database
    tokens: TokenService
    passwords: PasswordHasher
    push_sender: PushSenderService
    alerter: AlerterService


def build_context(settings: Settings) -> AppContext:
    """Construct every collaborator from `settings`."""
    db = Database(settings)
    push_sender = PushSenderService(PushConfig(
        enabled=settings.push_enabled,
        url=settings.expo_push_url,
        timeout_seconds=settings.push_timeout_seconds,
    ))
    return AppContext(
        settings=settings,
        db=db,
        tokens=TokenService(settings.jwt_key, ttl=timedelta(hours=settings.token_ttl_hours)),
        passwords=PasswordHasher(rounds=settings.bcrypt_rounds),
        push_sender=push_sender,
        alerter=AlerterService(db.session_factory, push_sender, settings.alert_threshold),
    )
