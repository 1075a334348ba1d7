"""
Dependency Injection Container

Centralized dependency resolution for the NAV connector.
"""

from typing import Dict, Any, Optional

import httpx
import structlog

from .config import Settings, get_settings
from .auth import IAuthProvider
from .factories import (
    AuthProviderFactory,
    ClientFactory,
    INavODataServiceFactory,
    INavSoapServiceFactory,
    NavODataServiceFactory,
    NavSoapServiceFactory,
)

logger = structlog.get_logger(__name__)


class DIContainer:
    """
    Dependency Injection Container for the connector's shared collaborators.

    Lazily creates and caches the auth provider, one HTTP client per protocol
    and the service factories built on them. Use as an async context manager
    or call close() to release the HTTP clients.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._services: Dict[str, Any] = {}

        logger.info("DI Container initialized",
                    host=self.settings.host,
                    company=self.settings.company,
                    auth_mode=self.settings.auth_mode)

    async def __aenter__(self) -> "DIContainer":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP clients and the auth provider owned by the container"""
        for name in ("odata_client", "soap_client"):
            client = self._services.pop(name, None)
            if client is not None:
                await client.aclose()
        auth_provider = self._services.pop("auth_provider", None)
        if auth_provider is not None:
            await auth_provider.close()
        self._services.clear()
        logger.info("DI Container closed")

    # Core Dependencies
    def get_auth_provider(self) -> IAuthProvider:
        """Get auth provider instance (lazy initialization)"""
        if "auth_provider" not in self._services:
            self._services["auth_provider"] = AuthProviderFactory.create(self.settings)
            logger.debug("Auth provider created", type=self.settings.auth_mode)
        return self._services["auth_provider"]

    def get_odata_client(self) -> httpx.AsyncClient:
        """Get the shared OData HTTP client (lazy initialization)"""
        if "odata_client" not in self._services:
            self._services["odata_client"] = ClientFactory.create_odata_client(
                self.settings.endpoints().odata_base_url,
                self.get_auth_provider(),
                self.settings.request_timeout_seconds,
            )
            logger.debug("OData client created")
        return self._services["odata_client"]

    def get_soap_client(self) -> httpx.AsyncClient:
        """Get the shared SOAP HTTP client (lazy initialization)"""
        if "soap_client" not in self._services:
            self._services["soap_client"] = ClientFactory.create_soap_client(
                self.settings.endpoints().soap_base_url,
                self.get_auth_provider(),
                self.settings.request_timeout_seconds,
            )
            logger.debug("SOAP client created")
        return self._services["soap_client"]

    # Service factories
    def get_odata_service_factory(self) -> INavODataServiceFactory:
        if "odata_service_factory" not in self._services:
            self._services["odata_service_factory"] = NavODataServiceFactory(self.get_odata_client())
        return self._services["odata_service_factory"]

    def get_soap_service_factory(self) -> INavSoapServiceFactory:
        if "soap_service_factory" not in self._services:
            self._services["soap_service_factory"] = NavSoapServiceFactory(self.get_soap_client())
        return self._services["soap_service_factory"]

    # Container Info
    def get_container_info(self) -> Dict[str, Any]:
        """Get container status and dependency information"""
        endpoints = self.settings.endpoints()
        return {
            "cached_services": list(self._services.keys()),
            "settings": {
                "auth_mode": self.settings.auth_mode,
                "odata_base_url": endpoints.odata_base_url,
                "soap_base_url": endpoints.soap_base_url,
                "company": self.settings.company,
            },
        }
