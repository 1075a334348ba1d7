"""
NAV credential providers

Basic and static bearer credentials for on-premises NAV, Azure AD client
credentials for Business Central online, and an ambient provider that sends
no Authorization header.
"""

import time
from typing import Any, AsyncGenerator, Dict, Optional

import httpx
import structlog
from azure.identity.aio import ClientSecretCredential

from .interface import IAuthProvider, AuthenticationError

logger = structlog.get_logger(__name__)


class BearerTokenAuth(httpx.Auth):
    """httpx auth flow that asks a provider for a bearer token per request"""

    def __init__(self, provider: IAuthProvider):
        self.provider = provider

    async def async_auth_flow(self, request: httpx.Request) -> AsyncGenerator[httpx.Request, httpx.Response]:
        token = await self.provider.get_token({"user_id": "system"})
        if token:
            request.headers["Authorization"] = f"Bearer {token}"
        yield request


class BasicAuthProvider(IAuthProvider):
    """NAV user name / web service access key"""

    def __init__(self, username: str, password: str):
        if not username:
            raise AuthenticationError("Basic authentication requires a username")
        self.username = username
        self.password = password or ""

    async def validate_credentials(self) -> bool:
        return bool(self.username)

    async def get_token(self, context: Dict[str, Any]) -> Optional[str]:
        return None

    def get_auth(self) -> Optional[httpx.Auth]:
        return httpx.BasicAuth(self.username, self.password)

    def get_provider_info(self) -> Dict[str, Any]:
        return {"type": "basic", "username": self.username}


class StaticTokenAuthProvider(IAuthProvider):
    """Pre-issued bearer token supplied by configuration"""

    def __init__(self, token: str):
        if not token:
            raise AuthenticationError("Bearer authentication requires a token")
        self.token = token

    async def validate_credentials(self) -> bool:
        return bool(self.token)

    async def get_token(self, context: Dict[str, Any]) -> Optional[str]:
        return self.token

    def get_auth(self) -> Optional[httpx.Auth]:
        return BearerTokenAuth(self)

    def get_provider_info(self) -> Dict[str, Any]:
        return {"type": "bearer", "token_configured": True}


class AzureADAuthProvider(IAuthProvider):
    """Client-credentials flow against Azure AD for Business Central online"""

    def __init__(self, tenant_id: str, client_id: str, client_secret: str, scope: str):
        self.tenant_id = tenant_id
        self.client_id = client_id
        self.scope = scope
        self.token_cache: Dict[str, Dict[str, Any]] = {}

        self.credential = ClientSecretCredential(
            tenant_id=tenant_id,
            client_id=client_id,
            client_secret=client_secret,
        )

        logger.info("Azure AD auth provider initialized", tenant_id=tenant_id, client_id=client_id, scope=scope)

    async def get_token(self, context: Dict[str, Any]) -> Optional[str]:
        """
        Get an access token, reusing the cached one until a minute before expiry

        Raises:
            AuthenticationError: If Azure AD refuses the credentials
        """
        cache_key = f"nav_{context.get('user_id', 'system')}"

        if cache_key in self.token_cache:
            token_data = self.token_cache[cache_key]
            if token_data["expires_at"] > time.time() + 60:  # 60 second buffer
                logger.debug("Using cached token", cache_key=cache_key)
                return str(token_data["token"])

        try:
            logger.debug("Requesting new token", scope=self.scope)
            token = await self.credential.get_token(self.scope)
        except Exception as e:
            logger.error("Failed to acquire token", error=str(e), tenant_id=self.tenant_id, client_id=self.client_id)
            raise AuthenticationError(f"Failed to acquire Business Central token: {e}") from e

        self.token_cache[cache_key] = {"token": token.token, "expires_at": token.expires_on}
        logger.info("Token acquired successfully", cache_key=cache_key, expires_at=token.expires_on)
        return str(token.token)

    def clear_token_cache(self) -> None:
        """Clear the token cache"""
        self.token_cache.clear()
        logger.info("Token cache cleared")

    async def close(self) -> None:
        """Close the credential's HTTP session and drop cached tokens"""
        await self.credential.close()
        self.token_cache.clear()
        logger.debug("Azure AD credential closed")

    async def validate_credentials(self) -> bool:
        try:
            token = await self.get_token({"user_id": "validation_test"})
            return bool(token)
        except AuthenticationError as e:
            logger.error("Credential validation failed", error=str(e))
            return False

    def get_auth(self) -> Optional[httpx.Auth]:
        return BearerTokenAuth(self)

    def get_provider_info(self) -> Dict[str, Any]:
        return {
            "type": "azure_ad",
            "tenant_id": self.tenant_id,
            "client_id": self.client_id,
            "scope": self.scope,
            "cache_size": len(self.token_cache),
        }


class AmbientAuthProvider(IAuthProvider):
    """No Authorization header; the network or a proxy authenticates"""

    async def validate_credentials(self) -> bool:
        return True

    async def get_token(self, context: Dict[str, Any]) -> Optional[str]:
        return None

    def get_auth(self) -> Optional[httpx.Auth]:
        return None

    def get_provider_info(self) -> Dict[str, Any]:
        return {"type": "none"}
