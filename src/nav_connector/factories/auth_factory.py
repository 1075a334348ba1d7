"""
Authentication Provider Factory

Creates auth provider instances based on configuration.
"""

import structlog

from ..config import Settings
from ..auth import (
    IAuthProvider,
    AuthenticationError,
    BasicAuthProvider,
    StaticTokenAuthProvider,
    AzureADAuthProvider,
    AmbientAuthProvider,
)

logger = structlog.get_logger(__name__)


class AuthProviderFactory:
    """Factory for creating authentication providers"""

    @staticmethod
    def create(settings: Settings) -> IAuthProvider:
        """
        Create auth provider based on configuration.

        Args:
            settings: Connector settings

        Returns:
            Configured auth provider instance

        Raises:
            AuthenticationError: If the selected mode lacks its credentials
            ValueError: If provider type is not supported
        """
        provider_type = settings.auth_mode.lower()

        logger.info("Creating auth provider", provider_type=provider_type)

        if provider_type == "basic":
            return BasicAuthProvider(settings.username or "", settings.password or "")
        elif provider_type == "bearer":
            return StaticTokenAuthProvider(settings.bearer_token or "")
        elif provider_type == "azure_ad":
            if not (settings.azure_tenant_id and settings.azure_client_id and settings.azure_client_secret):
                raise AuthenticationError("Azure AD authentication requires tenant id, client id and client secret")
            return AzureADAuthProvider(
                tenant_id=settings.azure_tenant_id,
                client_id=settings.azure_client_id,
                client_secret=settings.azure_client_secret,
                scope=settings.azure_scope,
            )
        elif provider_type == "none":
            return AmbientAuthProvider()
        else:
            raise ValueError(f"Unsupported auth provider: {provider_type}")

    @staticmethod
    def get_available_providers() -> list[str]:
        """Get list of available auth provider types"""
        return ["basic", "bearer", "azure_ad", "none"]
