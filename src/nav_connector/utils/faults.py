"""
SOAP fault detection
"""

import xml.etree.ElementTree as ET
from typing import Optional

from .namespaces import namespace_of, qualified

FAULT_MARKERS = ("<faultcode>", "<Fault>")


def contains_fault_marker(content: str) -> bool:
    """True when a response body carries a SOAP fault, whatever its status"""
    return any(marker in content for marker in FAULT_MARKERS)


def try_extract_soap_fault(content: str) -> Optional[str]:
    """
    Best-effort extraction of a human-readable fault message.

    Looks for ``faultstring`` then ``detail``, each first in the document's
    root namespace and then unqualified. Unparseable input yields None.
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError:
        return None

    root_ns = namespace_of(root.tag)

    def first_text(name: str) -> Optional[str]:
        candidates = [qualified(root_ns, name)] if root_ns else []
        candidates.append(name)
        for tag in candidates:
            element = next(root.iter(tag), None)
            if element is not None:
                return "".join(element.itertext())
        return None

    fault_string = first_text("faultstring")
    if fault_string is not None:
        return fault_string
    return first_text("detail")
