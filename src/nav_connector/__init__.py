"""
NAV Connector

Generic OData V4 and SOAP CRUD client for Microsoft Dynamics NAV and
Business Central, with codeunit invocation over SOAP.
"""

__version__ = "0.1.0"

from .config import Settings, NavServiceConfig, NavEndpointsConfig, get_settings
from .errors import (
    NavClientError,
    NavTransportError,
    NavSoapFaultError,
    NavNotFoundError,
    NavResponseError,
)
from .models import NavModel, HasConcurrencyToken, SoapResult
from .services import INavODataService, GenericODataService, INavSoapService, GenericSoapService
from .factories import NavODataServiceFactory, NavSoapServiceFactory
from .di_container import DIContainer
from .logging_setup import configure_logging

__all__ = [
    "Settings",
    "NavServiceConfig",
    "NavEndpointsConfig",
    "get_settings",
    "NavClientError",
    "NavTransportError",
    "NavSoapFaultError",
    "NavNotFoundError",
    "NavResponseError",
    "NavModel",
    "HasConcurrencyToken",
    "SoapResult",
    "INavODataService",
    "GenericODataService",
    "INavSoapService",
    "GenericSoapService",
    "NavODataServiceFactory",
    "NavSoapServiceFactory",
    "DIContainer",
    "configure_logging",
]
