"""
Record and result models shared by the OData and SOAP services.
"""

from .base import NavModel, HasConcurrencyToken, entity_name_of
from .odata import ODataResponse
from .soap_result import SoapResult

__all__ = [
    "NavModel",
    "HasConcurrencyToken",
    "entity_name_of",
    "ODataResponse",
    "SoapResult",
]
