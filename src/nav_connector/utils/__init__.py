"""
SOAP helpers

Envelope construction, fault extraction, record binding and response parsing
for NAV SOAP web services.
"""

from .namespaces import page_namespace, codeunit_namespace, soap_action, codeunit_url
from .envelope import build_envelope, envelope_to_string
from .faults import try_extract_soap_fault, contains_fault_marker
from .serialization import (
    serialize_entity,
    serialize_entity_to_string,
    deserialize_entity,
    build_operation,
    build_filter,
)
from .response_parser import (
    parse_read_multiple,
    parse_read,
    parse_create_or_update,
    parse_delete,
    parse_read_codeunit,
)
from .dates import format_date, parse_date

__all__ = [
    "page_namespace",
    "codeunit_namespace",
    "soap_action",
    "codeunit_url",
    "build_envelope",
    "envelope_to_string",
    "try_extract_soap_fault",
    "contains_fault_marker",
    "serialize_entity",
    "serialize_entity_to_string",
    "deserialize_entity",
    "build_operation",
    "build_filter",
    "parse_read_multiple",
    "parse_read",
    "parse_create_or_update",
    "parse_delete",
    "parse_read_codeunit",
    "format_date",
    "parse_date",
]
