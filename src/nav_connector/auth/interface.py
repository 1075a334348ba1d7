"""
Authentication Provider Interface

Defines contract for NAV credential providers (Basic, Bearer, Azure AD, ambient)
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional

import httpx


class IAuthProvider(ABC):
    """Interface for authentication providers"""

    @abstractmethod
    async def validate_credentials(self) -> bool:
        """
        Validate that credentials are properly configured and working.

        Returns:
            True if credentials are valid and can authenticate
        """
        pass

    @abstractmethod
    async def get_token(self, context: Dict[str, Any]) -> Optional[str]:
        """
        Get bearer token for NAV requests.

        Args:
            context: Authentication context (user_id, scopes, etc.)

        Returns:
            Bearer token, or None for providers that do not use tokens

        Raises:
            AuthenticationError: If authentication fails
        """
        pass

    @abstractmethod
    def get_auth(self) -> Optional[httpx.Auth]:
        """
        Get the httpx auth flow to attach to the HTTP client.

        Returns:
            Auth flow, or None to send requests without credentials
        """
        pass

    @abstractmethod
    def get_provider_info(self) -> Dict[str, Any]:
        """
        Get information about the auth provider.

        Returns:
            Provider metadata (type, settings, etc.), never secrets
        """
        pass

    async def close(self) -> None:
        """Release resources held by the provider (network sessions, caches)"""
        pass


class AuthenticationError(Exception):
    """Authentication related errors"""
    pass
