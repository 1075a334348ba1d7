"""
Factory classes for Dependency Injection

Provides factory methods to create implementations based on configuration.
"""

from .auth_factory import AuthProviderFactory
from .client_factory import ClientFactory
from .service_factory import (
    INavODataServiceFactory,
    INavSoapServiceFactory,
    NavODataServiceFactory,
    NavSoapServiceFactory,
)

__all__ = [
    "AuthProviderFactory",
    "ClientFactory",
    "INavODataServiceFactory",
    "INavSoapServiceFactory",
    "NavODataServiceFactory",
    "NavSoapServiceFactory",
]
