"""FastAPI dependencies: context lookup, sessions and the auth gates."""
import hmac
import logging
from typing import AsyncIterator, Optional

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from .context import AppContext
from .errors import Forbidden, Unauthenticated
from .services import InvalidToken

logger = logging.getLogger(__name__)


def get_context(request: Request) -> AppContext:
    return request.app.state.ctx


async def get_db(ctx: AppContext = Depends(get_context)) -> AsyncIterator[AsyncSession]:
    """Dependency to get database session."""
    async with ctx.db.session() as session:
        yield session


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token of an `Authorization: Bearer <token>` header, if any."""
    if not authorization or not authorization.startswith("Bearer "):
        return None
    token = authorization[len("Bearer "):].strip()
    return token or None


def get_current_user(
    authorization: Optional[str] = Header(None),
    ctx: AppContext = Depends(get_context),
) -> dict:
    """Verify the bearer token and return its claims.
    
    401 when no token is presented, 403 when it does not verify.
    """
    token = extract_bearer_token(authorization)
    if not token:
        raise Unauthenticated("Token requerido")
    
    try:
        claims = ctx.tokens.verify(token)
    except InvalidToken as e:
        logger.warning(f"Rejected bearer token: {e}")
        raise Forbidden("Token inválido")
    
    if not isinstance(claims.get("id"), int):
        logger.warning("Rejected bearer token without user id")
        raise Forbidden("Token inválido")
    
    return claims


def require_device_key(
    x_device_key: Optional[str] = Header(None),
    ctx: AppContext = Depends(get_context),
):
    """Gate device endpoints behind DEVICE_API_KEY when it is configured."""
    expected = ctx.settings.device_api_key
    if not expected:
        return
    
    if not x_device_key:
        raise Unauthenticated("Clave de dispositivo requerida")
    
    if not hmac.compare_digest(x_device_key.encode("utf-8"), expected.encode("utf-8")):
        logger.warning("Rejected request with invalid device key")
        raise Forbidden("Clave de dispositivo inválida")
