# Standard library imports
import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError

# Local application imports
from ..domain.exceptions import HashingError, MalformedTokenError, TokenExpiredError


class PasswordHasher:
    """bcrypt password hashing with a configurable work factor"""

    # Digest of a throwaway value, compared against when the email is unknown
    _DUMMY_PLAINTEXT = b"unknown-account-placeholder"

    def __init__(self, rounds: int = 12) -> None:
        self.rounds = rounds
        self._dummy_hash: Optional[bytes] = None

    def hash(self, plain_password: str) -> str:
        """
        Hash a plain password using bcrypt

        Args:
            plain_password: The plain text password to hash

        Returns:
            Hashed password string

        Raises:
            HashingError: If the bcrypt primitive fails
        """
        try:
            salt = bcrypt.gensalt(rounds=self.rounds)
            hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
        except (ValueError, TypeError) as exception:
            raise HashingError(f"Password hashing failed: {type(exception).__name__}") from exception
        return hashed.decode("utf-8")

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a plain password against a hashed password

        Args:
            plain_password: The plain text password to verify
            hashed_password: The hashed password to compare against

        Returns:
            True if passwords match, False otherwise
        """
        try:
            return bcrypt.checkpw(
                plain_password.encode("utf-8"),
                hashed_password.encode("utf-8")
            )
        except (ValueError, TypeError):
            return False

    def verify_dummy(self, plain_password: str) -> bool:
        """Run one comparison against a fixed digest and report no match."""
        if self._dummy_hash is None:
            self._dummy_hash = bcrypt.hashpw(self._DUMMY_PLAINTEXT, bcrypt.gensalt(rounds=self.rounds))
        self.verify(plain_password, self._dummy_hash.decode("utf-8"))
        return False


@dataclass(frozen=True)
class SessionClaims:
    """Identity claims carried by a verified session token"""
    user_id: str
    email: str
    issued_at: datetime
    expires_at: datetime


class SessionTokenIssuer:
    """
    Issues and verifies signed, time-bounded session tokens (JWT).

    There is no refresh or revocation: an expired token requires a new login,
    and rotating the secret key invalidates every outstanding token.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(days=1),
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.ttl = ttl
        self._clock = clock

    def issue(self, user_id: str, email: str, ttl: Optional[timedelta] = None) -> str:
        """
        Create a JWT token with expiration

        Args:
            user_id: ID of the user, stored as the "sub" claim
            email: Email of the user
            ttl: Lifetime override; the configured default when omitted

        Returns:
            Encoded JWT token string
        """
        lifetime = ttl if ttl is not None else self.ttl
        issued_at = int(self._clock())
        expires_at = issued_at + int(lifetime.total_seconds())

        token_payload = {
            "sub": user_id,
            "email": email,
            "iat": issued_at,
            "exp": expires_at,
        }

        return jwt.encode(token_payload, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> SessionClaims:
        """
        Decode and validate a JWT token

        Args:
            token: The JWT token string to decode

        Returns:
            SessionClaims decoded from the token

        Raises:
            MalformedTokenError: If signature or structure is invalid
            TokenExpiredError: If the current time is at or past the expiry
        """
        if not token:
            raise MalformedTokenError("Invalid token")

        try:
            # Time claims are checked below against the injected clock
            decoded = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "require": ["sub", "iat", "exp"],
                },
            )
        except InvalidTokenError as exception:
            raise MalformedTokenError(f"Invalid token: {type(exception).__name__}") from exception

        user_id = decoded.get("sub")
        email = decoded.get("email")
        issued_at = decoded.get("iat")
        expires_at = decoded.get("exp")
        if not isinstance(user_id, str) or not user_id or not isinstance(email, str):
            raise MalformedTokenError("Invalid token: missing identity claims")
        if not isinstance(issued_at, int) or not isinstance(expires_at, int):
            raise MalformedTokenError("Invalid token: bad time claims")

        if self._clock() >= expires_at:
            raise TokenExpiredError("Token has expired")

        return SessionClaims(
            user_id=user_id,
            email=email,
            issued_at=datetime.fromtimestamp(issued_at, tz=timezone.utc),
            expires_at=datetime.fromtimestamp(expires_at, tz=timezone.utc),
        )
