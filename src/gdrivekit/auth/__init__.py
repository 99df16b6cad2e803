"""Public auth exports for gdrivekit."""

from __future__ import annotations

from .auth_info import AuthInfo
from .manager import DEFAULT_SCOPES, AuthManager
from .oauth_client import OAuthClient
from .service_account import ServiceAccountClient
from .session import DriveSession
from .token_store import Token, TokenStore

__all__ = [
    "AuthInfo",
    "AuthManager",
    "DEFAULT_SCOPES",
    "DriveSession",
    "OAuthClient",
    "ServiceAccountClient",
    "Token",
    "TokenStore",
]
