"""
Authentication module for the NAV connector

Supplies httpx auth flows for Basic, Bearer and Azure AD credentials.
"""

from .interface import IAuthProvider, AuthenticationError
from .providers import (
    BearerTokenAuth,
    BasicAuthProvider,
    StaticTokenAuthProvider,
    AzureADAuthProvider,
    AmbientAuthProvider,
)

__all__ = [
    "IAuthProvider",
    "AuthenticationError",
    "BearerTokenAuth",
    "BasicAuthProvider",
    "StaticTokenAuthProvider",
    "AzureADAuthProvider",
    "AmbientAuthProvider",
]
