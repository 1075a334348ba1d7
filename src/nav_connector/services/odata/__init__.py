"""
OData service module

CRUD over NAV OData V4 entity sets.
"""

from .interface import INavODataService
from .service import GenericODataService, combine_filters, filter_query

__all__ = [
    "INavODataService",
    "GenericODataService",
    "combine_filters",
    "filter_query",
]
