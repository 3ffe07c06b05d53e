"""
API Dependencies

FastAPI dependency injection for authentication and external services.

Bearer tokens are Supabase-issued JWTs, verified against the project's
JWKS (ES256) first and the shared JWT secret (HS256) second.
"""

import logging
from typing import Optional

import jwt
from jwt import PyJWKClient
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from smartadmit.config.settings import get_settings
from smartadmit.infrastructure.services.college_scorecard_service import (
    CollegeScorecardService,
)


logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)

AUDIENCE = "authenticated"
REQUIRED_CLAIMS = ["exp", "sub", "iss"]

_jwks_client: Optional[PyJWKClient] = None


def _get_jwks_client() -> PyJWKClient:
    """Return a singleton PyJWKClient for the Supabase JWKS endpoint."""
    global _jwks_client
    if _jwks_client is None:
        jwks_url = f"{get_settings().supabase_url}/auth/v1/.well-known/jwks.json"
        _jwks_client = PyJWKClient(jwks_url, cache_keys=True)
    return _jwks_client


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def verify_supabase_token(token: str) -> dict:
    """
    Verify a Supabase access token and return its claims.
    
    Raises:
        HTTPException 401: token expired, invalid, or unverifiable.
    """
    settings = get_settings()
    issuer = f"{settings.supabase_url}/auth/v1"
    
    try:
        signing_key = _get_jwks_client().get_signing_key_from_jwt(token)
        return jwt.decode(
            token,
            signing_key.key,
            algorithms=["ES256"],
            issuer=issuer,
            audience=AUDIENCE,
            options={"require": REQUIRED_CLAIMS},
        )
    except (jwt.exceptions.PyJWKClientError, jwt.InvalidTokenError) as jwks_err:
        logger.debug("JWKS verification failed, trying HS256 fallback: %s", jwks_err)
    
    if not settings.supabase_jwt_secret:
        raise _unauthorized("Invalid or unverifiable token")
    
    try:
        return jwt.decode(
            token,
            settings.supabase_jwt_secret,
            algorithms=["HS256"],
            issuer=issuer,
            audience=AUDIENCE,
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError:
        raise _unauthorized("Token has expired")
    except jwt.InvalidTokenError as e:
        logger.warning("HS256 JWT verification failed: %s", e)
        raise _unauthorized("Invalid or unverifiable token")


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> str:
    """
    Authenticated user ID (``sub`` claim) from the bearer token.

    Raises:
        HTTPException 401: token missing, expired, or invalid.
    """
    if not credentials or not credentials.credentials:
        raise _unauthorized("Missing authorization token")

    payload = verify_supabase_token(credentials.credentials)

    user_id = payload.get("sub")
    if not user_id:
        raise _unauthorized("Invalid token: missing user ID")
    return user_id


def get_scorecard_service() -> CollegeScorecardService:
    """College Scorecard client configured from settings."""
    return CollegeScorecardService()
