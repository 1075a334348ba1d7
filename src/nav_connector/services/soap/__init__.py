"""
SOAP service module

Page CRUD and codeunit invocation over NAV SOAP web services.
"""

from .interface import INavSoapService
from .service import GenericSoapService, DEFAULT_SET_SIZE

__all__ = [
    "INavSoapService",
    "GenericSoapService",
    "DEFAULT_SET_SIZE",
]
