import hashlib
import json
import logging
import time
import urllib.request
from typing import Any, Dict, NamedTuple

from fastapi import Depends, HTTPException, status, Request
from jose import jwt
from jose.exceptions import JWTError, ExpiredSignatureError, JWTClaimsError
from sqlalchemy.orm import Session

import os
from dotenv import load_dotenv

from database import get_db
from models.revoked_token import RevokedToken
import crud.profile as crud_profile
from schemas.session import CurrentUser

load_dotenv()

logger = logging.getLogger(__name__)

# === Auth provider configuration ===
# Tokens are either HS256-signed with a shared secret (AUTH_JWT_SECRET) or
# RS256-signed with keys published at AUTH_JWKS_URL. The JWKS URL wins when both are set.
AUTH_JWT_SECRET = os.getenv("AUTH_JWT_SECRET")
AUTH_JWKS_URL = os.getenv("AUTH_JWKS_URL")
AUTH_AUDIENCE = os.getenv("AUTH_AUDIENCE", "authenticated") or None
AUTH_ISSUER = os.getenv("AUTH_ISSUER") or None

JWKS_CACHE_SECONDS = 60 * 60 * 24

# Cache for the provider's public keys (JWKS)
# This avoids fetching the keys on every single request.
jwks_cache = {
    "keys": [],
    "expiration_time": 0,
}


class SessionToken(NamedTuple):
    payload: Dict[str, Any]
    token_id: str


def get_jwks():
    """
    Retrieves the JSON Web Key Set (JWKS) from the auth provider.
    Caches the keys for a day.
    """
    global jwks_cache
    if jwks_cache["keys"] and jwks_cache["expiration_time"] > time.time():
        return jwks_cache["keys"]

    logger.info("Fetching JWKS from: %s", AUTH_JWKS_URL)
    try:
        with urllib.request.urlopen(AUTH_JWKS_URL) as response:
            jwks_data = json.loads(response.read().decode("utf-8"))

        jwks_cache = {
            "keys": jwks_data["keys"],
            "expiration_time": time.time() + JWKS_CACHE_SECONDS,
        }
        return jwks_cache["keys"]
    except Exception as e:
        logger.error("Error fetching JWKS: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not fetch auth provider public keys for token validation."
        )


def _signing_key(token: str):
    """Pick the key and algorithm that should verify this token."""
    if not AUTH_JWKS_URL:
        if not AUTH_JWT_SECRET:
            logger.error("Neither AUTH_JWKS_URL nor AUTH_JWT_SECRET is configured")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Authentication is not configured."
            )
        return AUTH_JWT_SECRET, ["HS256"]

    try:
        unverified_header = jwt.get_unverified_header(token)
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token header"
        )

    for key in get_jwks():
        if key["kid"] == unverified_header.get("kid"):
            return {
                "kty": key["kty"],
                "kid": key["kid"],
                "use": key.get("use", "sig"),
                "n": key["n"],
                "e": key["e"],
            }, ["RS256"]

    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unable to find a matching public key to verify the token",
    )


def decode_token(token: str) -> Dict[str, Any]:
    """Verify signature, expiry, audience and issuer; return the claims."""
    key, algorithms = _signing_key(token)
    options = {"verify_aud": AUTH_AUDIENCE is not None}
    try:
        return jwt.decode(
            token,
            key,
            algorithms=algorithms,
            audience=AUTH_AUDIENCE,
            issuer=AUTH_ISSUER,
            options=options,
        )
    except ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired"
        )
    except JWTClaimsError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid token claims: {e}"
        )
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Token validation failed: {e}"
        )


def token_identifier(token: str, payload: Dict[str, Any]) -> str:
    return payload.get("jti") or hashlib.sha256(token.encode("utf-8")).hexdigest()


def get_session(request: Request, db: Session = Depends(get_db)) -> SessionToken:
    """
    FastAPI dependency that validates the bearer token from the Authorization header
    and rejects tokens that were signed out.
    """
    auth_header = request.headers.get("Authorization")
    if not auth_header:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization header is missing",
        )

    # The token is expected to be in the format "Bearer <token>"
    parts = auth_header.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authorization header format",
        )

    token = parts[1]
    payload = decode_token(token)
    if not payload.get("sub"):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has no subject",
        )

    token_id = token_identifier(token, payload)
    revoked = db.query(RevokedToken).filter(RevokedToken.token_id == token_id).first()
    if revoked:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Session has been signed out",
        )
    return SessionToken(payload=payload, token_id=token_id)


def get_current_user(
    session: SessionToken = Depends(get_session),
    db: Session = Depends(get_db),
) -> CurrentUser:
    """
    FastAPI dependency returning the explicit identity passed to every accessor.

    The profile row is created on the first authenticated request so every
    owned row has a profile to point at.

    Usage:
        @router.get("/", dependencies=[Depends(get_current_user)])
    """
    user = CurrentUser(id=session.payload["sub"], email=session.payload.get("email"))
    if crud_profile.get_profile(db, user) is None:
        crud_profile.sync_profile(db, user)
        logger.info("Created profile for user %s", get_user_identifier(user))
    return user


def get_user_identifier(user: CurrentUser) -> str:
    """Human-readable identifier for log lines."""
    return user.email or user.id
