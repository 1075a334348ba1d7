"""
HTTP Client Factory

Creates the httpx clients shared by all services of one protocol.
"""

from typing import Dict, Optional

import httpx
import structlog

from ..auth import IAuthProvider

logger = structlog.get_logger(__name__)

ODATA_HEADERS: Dict[str, str] = {
    "Accept": "application/json",
    "OData-MaxVersion": "4.0",
    "OData-Version": "4.0",
}

SOAP_HEADERS: Dict[str, str] = {
    "Accept": "text/xml",
}


class ClientFactory:
    """Factory for creating NAV HTTP clients"""

    @staticmethod
    def create(
        base_url: str,
        auth_provider: IAuthProvider,
        timeout: float = 30.0,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> httpx.AsyncClient:
        """
        Create an HTTP client bound to one NAV base address.

        Args:
            base_url: OData or SOAP base address
            auth_provider: Supplies the auth flow attached to every request
            timeout: Request timeout in seconds
            headers: Default headers for every request
            transport: Custom transport (mainly for tests)

        Returns:
            Configured async HTTP client; the caller owns and closes it
        """
        if not base_url:
            raise ValueError("base_url must be provided.")
        if not base_url.endswith("/"):
            base_url += "/"

        logger.info("Creating NAV HTTP client", base_url=base_url, auth=auth_provider.get_provider_info().get("type"))

        return httpx.AsyncClient(
            base_url=base_url,
            auth=auth_provider.get_auth(),
            headers=headers or {},
            timeout=timeout,
            transport=transport,
        )

    @staticmethod
    def create_odata_client(base_url: str, auth_provider: IAuthProvider, timeout: float = 30.0) -> httpx.AsyncClient:
        return ClientFactory.create(base_url, auth_provider, timeout, headers=ODATA_HEADERS)

    @staticmethod
    def create_soap_client(base_url: str, auth_provider: IAuthProvider, timeout: float = 30.0) -> httpx.AsyncClient:
        return ClientFactory.create(base_url, auth_provider, timeout, headers=SOAP_HEADERS)
