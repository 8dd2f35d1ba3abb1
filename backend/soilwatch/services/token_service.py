"""Signed bearer tokens carrying user identity claims."""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

logger = logging.getLogger(__name__)

# Claims added by the service itself and stripped on verify
RESERVED_CLAIMS = ("iat", "exp")


class InvalidToken(Exception):
    """Token is malformed, has a bad signature, or has expired."""


class TokenService:
    """Issues and verifies HS256 JSON Web Tokens.
    
    Verification is stateless: claims are never checked against the store.
    """
    
    algorithm = "HS256"
    
    def __init__(self, secret: str, ttl: timedelta = timedelta(hours=24)):
        if not secret:
            raise ValueError("Token signing secret is not configured")
        self._secret = secret
        self.ttl = ttl
    
    def issue(self, claims: dict, ttl: Optional[timedelta] = None) -> str:
        """Sign `claims` into a token valid for `ttl` (defaults to the service ttl)."""
        now = datetime.now(timezone.utc)
        payload = dict(claims)
        payload["iat"] = now
        payload["exp"] = now + (ttl if ttl is not None else self.ttl)
        
        token = jwt.encode(payload, self._secret, algorithm=self.algorithm)
        if isinstance(token, bytes):
            token = token.decode("utf-8")
        return token
    
    def verify(self, token: str) -> dict:
        """Return the claims embedded in `token`.
        
        Raises:
            InvalidToken: for any decoding, signature or expiry failure
        """
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self.algorithm])
        except jwt.InvalidTokenError as e:
            raise InvalidToken(str(e)) from e
        
        return {k: v for k, v in payload.items() if k not in RESERVED_CLAIMS}
