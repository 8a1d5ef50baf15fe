"""
Authentication Dependency for FastAPI.

Validates the Supabase access token (HS256 JWT) from the Authorization
header and returns the calling user. The token's ``sub`` claim is the
user's id in the data service.

Config needed (from unimatch.config.settings):
- SUPABASE_JWT_SECRET
- SUPABASE_JWT_AUDIENCE
"""

from dataclasses import dataclass
from typing import Optional

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from unimatch.config.settings import Config
from unimatch.domain.value_objects.user_id import UserId


@dataclass
class AuthUser:
    id: UserId
    email: Optional[str] = None


security = HTTPBearer()


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> AuthUser:
    """
    Extract and validate user from JWT token.

    Raises:
        HTTPException 401 if token is invalid, expired, or missing required claims
    """
    try:
        claims = jwt.decode(
            credentials.credentials,
            Config.SUPABASE_JWT_SECRET,
            algorithms=["HS256"],
            audience=Config.SUPABASE_JWT_AUDIENCE,
            options={"require": ["exp", "sub", "aud"]},
        )
    except jwt.ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired",
        )
    except jwt.InvalidTokenError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid token: {str(e)}",
        )

    try:
        user_id = UserId(claims["sub"])
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid subject claim in token",
        )

    return AuthUser(id=user_id, email=claims.get("email"))
