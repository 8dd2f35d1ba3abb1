"""User registration, login and profile endpoints."""
import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy import select, or_
from sqlalchemy.ext.asyncio import AsyncSession

from ..context import AppContext
from ..dependencies import get_context, get_current_user, get_db
from ..errors import Conflict, NotFound, ValidationFailed, WrongPassword
from ..models import Usuario
from ..schemas import (
    TokenResponse,
    UserLogin,
    UserProfile,
    UserProfileResponse,
    UserRegister,
)
from ..services.passwords import MAX_PASSWORD_BYTES
from ..utils.db_utils import commit_unique, retry_on_lock

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/user", tags=["usuarios"])


def user_claims(user: Usuario, token_expo: Optional[str]) -> dict:
    """Identity claims embedded in a user's bearer token."""
    return {
        "id": user.id,
        "username": user.username,
        "gmail": user.gmail,
        "tokenExpo": token_expo,
    }


@router.post("", response_model=TokenResponse)
async def register_user(
    data: UserRegister,
    db: AsyncSession = Depends(get_db),
    ctx: AppContext = Depends(get_context),
):
    """Create an account and return a bearer token valid for 24 hours."""
    if not data.username or not data.gmail or not data.password:
        raise ValidationFailed("Faltan credenciales")
    
    if len(data.password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationFailed("La contraseña es demasiado larga")
    
    result = await db.execute(
        select(Usuario)
        .where(or_(Usuario.username == data.username, Usuario.gmail == data.gmail))
        .limit(1)
    )
    if result.scalar_one_or_none():
        logger.warning(f"Registration rejected, user already exists: {data.username}")
        raise Conflict("El usuario ya existe")
    
    hashed = await asyncio.to_thread(ctx.passwords.hash, data.password)
    user = Usuario(
        username=data.username,
        gmail=data.gmail,
        password=hashed,
        expo_token=data.tokenExpo,
    )
    db.add(user)
    
    await commit_unique(db, "El usuario ya existe")
    
    logger.info(f"User registered: {user.username} (id={user.id})")
    token = ctx.tokens.issue(user_claims(user, data.tokenExpo))
    return TokenResponse(message="Registro exitoso", token=token)


@router.put("", response_model=TokenResponse)
async def login_user(
    data: UserLogin,
    db: AsyncSession = Depends(get_db),
    ctx: AppContext = Depends(get_context),
):
    """Authenticate a user, refreshing the stored push token if it changed."""
    if not data.username or not data.password or not data.tokenExpo:
        raise ValidationFailed("Faltan credenciales")
    
    result = await db.execute(select(Usuario).where(Usuario.username == data.username))
    user = result.scalar_one_or_none()
    
    if not user:
        raise NotFound("Usuario no encontrado")
    
    if not await asyncio.to_thread(ctx.passwords.verify, data.password, user.password):
        logger.warning(f"Login rejected, incorrect password for {data.username}")
        raise WrongPassword("Password incorrecta")
    
    if user.expo_token != data.tokenExpo:
        user.expo_token = data.tokenExpo
        await retry_on_lock(db.commit)
        logger.info(f"Push token updated for {user.username}")
    
    logger.info(f"User logged in: {user.username}")
    token = ctx.tokens.issue(user_claims(user, data.tokenExpo))
    return TokenResponse(message="Login exitoso", token=token)


@router.get("", response_model=UserProfileResponse)
async def get_profile(
    claims: dict = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Get the authenticated user's profile."""
    user = await db.get(Usuario, claims["id"])
    
    if not user:
        raise NotFound("No se pudo obtener el usuario")
    
    return UserProfileResponse(
        message="usuario obtenido exitosamente",
        usuario=UserProfile(
            id=user.id,
            username=user.username,
            gmail=user.gmail,
            createdAt=user.created_at,
        ),
        token=None,
    )
