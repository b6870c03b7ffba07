from .config import Settings, get_settings
from .security import PasswordHasher, SessionClaims, SessionTokenIssuer

__all__ = [
    "Settings",
    "get_settings",
    "PasswordHasher",
    "SessionClaims",
    "SessionTokenIssuer",
]
