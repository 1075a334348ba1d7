"""
SOAP 1.1 envelope construction
"""

import xml.etree.ElementTree as ET

from .namespaces import SOAP_ENVELOPE_NS, local_name, qualified

SOAP_PREFIX = "soap"


def build_envelope(body: ET.Element) -> ET.Element:
    """
    Wrap ``body`` in a SOAP envelope with an empty header.

    The body element is nested as-is; its contents are not validated.
    """
    envelope = ET.Element(qualified(SOAP_ENVELOPE_NS, "Envelope"))
    ET.SubElement(envelope, qualified(SOAP_ENVELOPE_NS, "Header"))
    soap_body = ET.SubElement(envelope, qualified(SOAP_ENVELOPE_NS, "Body"))
    soap_body.append(body)
    return envelope


def _section_to_string(section: ET.Element) -> str:
    tag = f"{SOAP_PREFIX}:{local_name(section.tag)}"
    inner = "".join(ET.tostring(child, encoding="unicode") for child in section)
    return f"<{tag}>{inner}</{tag}>" if inner else f"<{tag} />"


def envelope_to_string(envelope: ET.Element) -> str:
    """
    Serialize an envelope with an explicit ``soap`` prefix.

    Header and Body contents are written as standalone fragments, so no
    prefix is registered in ElementTree's global namespace map.
    """
    sections = "".join(_section_to_string(section) for section in envelope)
    return f'<{SOAP_PREFIX}:Envelope xmlns:{SOAP_PREFIX}="{SOAP_ENVELOPE_NS}">{sections}</{SOAP_PREFIX}:Envelope>'
