"""
Services module

Generic OData and SOAP services bound to one NAV entity type.
"""

from .odata import INavODataService, GenericODataService
from .soap import INavSoapService, GenericSoapService

__all__ = [
    "INavODataService",
    "GenericODataService",
    "INavSoapService",
    "GenericSoapService",
]
