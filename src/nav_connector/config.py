"""
Configuration management for the NAV / Business Central connector
"""

import os
from pathlib import Path
from typing import Optional, Literal
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict
import structlog

logger = structlog.get_logger(__name__)


class NavServiceConfig(BaseModel):
    """Immutable endpoint descriptor for one NAV web service protocol"""

    model_config = ConfigDict(frozen=True)

    host: str
    port: int
    server_instance: str
    company: str
    object_type: str = ""
    service_type: str = "ODataV4"

    # Auth
    username: Optional[str] = None
    password: Optional[str] = None
    bearer_token: Optional[str] = None

    @property
    def base_url(self) -> str:
        """
        Base address every request of this protocol is resolved against.

        Raises:
            ValueError: If the service type is not OData V4 or SOAP
        """
        kind = self.service_type.upper()
        if kind == "ODATAV4":
            return f"{self.host}:{self.port}/{self.server_instance}/ODataV4/Company('{self.company}')/"
        if kind == "SOAP":
            object_type = self.object_type.strip() or "Page"
            return f"{self.host}:{self.port}/{self.server_instance}/WS/{self.company}/{object_type}/"
        raise ValueError(f"Unknown service type: {self.service_type}")


class NavEndpointsConfig(BaseModel):
    """Explicit base URLs, used instead of descriptor-derived ones when set"""

    model_config = ConfigDict(frozen=True)

    odata_base_url: str = ""
    soap_base_url: str = ""
    username: str = ""
    password: str = ""
    company: str = ""


class Settings(BaseSettings):
    """Connector settings loaded from NAV_* environment variables"""

    # NAV server (Required)
    host: str
    port: int
    server_instance: str
    company: str

    # Optional Configuration
    soap_object_type: str = "Page"
    request_timeout_seconds: float = 30.0
    log_level: str = "info"

    # Authentication
    auth_mode: Literal["basic", "bearer", "azure_ad", "none"] = "basic"
    username: Optional[str] = None
    password: Optional[str] = None
    bearer_token: Optional[str] = None

    # Azure AD (Business Central online)
    azure_tenant_id: Optional[str] = None
    azure_client_id: Optional[str] = None
    azure_client_secret: Optional[str] = None
    azure_scope: str = "https://api.businesscentral.dynamics.com/.default"

    # Base URL overrides
    odata_base_url: Optional[str] = None
    soap_base_url: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="NAV_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def _service_config(self, service_type: str, object_type: str = "") -> NavServiceConfig:
        return NavServiceConfig(
            host=self.host,
            port=self.port,
            server_instance=self.server_instance,
            company=self.company,
            object_type=object_type,
            service_type=service_type,
            username=self.username,
            password=self.password,
            bearer_token=self.bearer_token,
        )

    def odata_service_config(self) -> NavServiceConfig:
        """Descriptor for the OData V4 endpoint"""
        return self._service_config("ODataV4")

    def soap_service_config(self) -> NavServiceConfig:
        """Descriptor for the SOAP endpoint"""
        return self._service_config("SOAP", self.soap_object_type)

    def endpoints(self) -> NavEndpointsConfig:
        """Resolved base URLs for both protocols, overrides taking precedence"""
        return NavEndpointsConfig(
            odata_base_url=self.odata_base_url or self.odata_service_config().base_url,
            soap_base_url=self.soap_base_url or self.soap_service_config().base_url,
            username=self.username or "",
            password=self.password or "",
            company=self.company,
        )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get connector settings singleton"""
    global _settings
    if _settings is None:
        load_dotenv_if_exists()

        logger.debug("Loading settings", nav_host=os.getenv("NAV_HOST"), cwd=os.getcwd())

        try:
            _settings = Settings()  # type: ignore[call-arg]
        except ValidationError as e:
            missing = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
            raise ValueError(
                f"Invalid NAV connector configuration ({missing}). Check your NAV_* variables or .env file."
            ) from e
        logger.info("Settings loaded", host=_settings.host, company=_settings.company, auth_mode=_settings.auth_mode)
    return _settings


def reset_settings() -> None:
    """Forget the cached settings so the next get_settings() reloads them"""
    global _settings
    _settings = None


def load_dotenv_if_exists() -> None:
    """Load .env file if it exists"""
    from dotenv import load_dotenv

    env_path = Path(".env")
    if env_path.exists():
        load_dotenv(env_path)
    else:
        # Try to load from parent directories
        current = Path.cwd()
        for parent in [current] + list(current.parents):
            env_path = parent / ".env"
            if env_path.exists():
                load_dotenv(env_path)
                break
