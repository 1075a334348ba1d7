"""
Naming conventions of NAV SOAP web services

NAV publishes every page under a lower-cased namespace and every codeunit
under a namespace that keeps the codeunit's own casing.
"""

SCHEMA_PREFIX = "urn:microsoft-dynamics-schemas/"
SOAP_ENVELOPE_NS = "http://schemas.xmlsoap.org/soap/envelope/"


def page_namespace(name: str) -> str:
    """Namespace of a page service or entity, e.g. ``.../page/customer``"""
    return f"{SCHEMA_PREFIX}page/{name.lower()}"


def codeunit_namespace(name: str) -> str:
    """Namespace of a codeunit service, e.g. ``.../codeunit/SalesPosting``"""
    return f"{SCHEMA_PREFIX}codeunit/{name}"


def soap_action(path: str) -> str:
    """SOAPAction header value for ``page/<Verb>`` or ``codeunit/<Service>``"""
    return f"{SCHEMA_PREFIX}{path}"


def codeunit_url(page_url: str) -> str:
    """Rewrite a page service URL into the matching codeunit URL"""
    return page_url.replace("/Page/", "/Codeunit/")


def qualified(namespace: str, local_name: str) -> str:
    """ElementTree tag for ``local_name`` in ``namespace``"""
    return f"{{{namespace}}}{local_name}" if namespace else local_name


def local_name(tag: str) -> str:
    """Strip the ``{namespace}`` part from an ElementTree tag"""
    return tag.rsplit("}", 1)[-1]


def namespace_of(tag: str) -> str:
    """Namespace part of an ElementTree tag, empty when unqualified"""
    if tag.startswith("{"):
        return tag[1:].split("}", 1)[0]
    return ""
