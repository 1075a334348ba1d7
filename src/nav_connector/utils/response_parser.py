"""
SOAP response parsing for NAV page and codeunit services

Results sit under the SOAP Body in a ``<Verb>_Result`` wrapper. Page results
are qualified by the entity's page namespace, codeunit results by the
codeunit namespace.
"""

import xml.etree.ElementTree as ET
from typing import List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError
import structlog

from ..errors import NavResponseError
from ..models.base import entity_name_of
from ..models.soap_result import SoapResult
from .namespaces import SOAP_ENVELOPE_NS, codeunit_namespace, page_namespace, qualified
from .serialization import deserialize_entity

logger = structlog.get_logger(__name__)

M = TypeVar("M", bound=BaseModel)

RETURN_VALUE = "return_value"


def _parse_document(soap_response: str) -> ET.Element:
    try:
        return ET.fromstring(soap_response)
    except ET.ParseError as e:
        raise NavResponseError(f"Malformed SOAP response: {e}") from e


def _find_result(root: ET.Element, namespace: str, result_name: str) -> Optional[ET.Element]:
    """First ``result_name`` element anywhere under the SOAP Body"""
    result_tag = qualified(namespace, result_name)
    for body in root.iter(qualified(SOAP_ENVELOPE_NS, "Body")):
        found = next(body.iter(result_tag), None)
        if found is not None:
            return found
    return None


def _bind(element: ET.Element, model_cls: Type[M], namespace: str) -> M:
    try:
        return deserialize_entity(element, model_cls, namespace)
    except ValidationError as e:
        raise NavResponseError(f"Could not bind {entity_name_of(model_cls)} from SOAP response: {e}") from e


def parse_read_multiple(soap_response: str, model_cls: Type[M]) -> List[M]:
    """
    Records of a ReadMultiple response.

    The entities live in the inner ``ReadMultiple_Result`` nested inside the
    outer one. A missing wrapper or an empty one yields an empty list.
    """
    entity_name = entity_name_of(model_cls)
    namespace = page_namespace(entity_name)
    root = _parse_document(soap_response)

    outer = _find_result(root, namespace, "ReadMultiple_Result")
    inner = outer.find(qualified(namespace, "ReadMultiple_Result")) if outer is not None else None
    if inner is None:
        return []

    return [_bind(item, model_cls, namespace) for item in inner.findall(qualified(namespace, entity_name))]


def parse_result_by_tag(soap_response: str, model_cls: Type[M], tag_name: str) -> Optional[M]:
    """Entity nested directly under the first ``tag_name`` result, or None"""
    entity_name = entity_name_of(model_cls)
    namespace = page_namespace(entity_name)
    root = _parse_document(soap_response)

    result = _find_result(root, namespace, tag_name)
    entity = result.find(qualified(namespace, entity_name)) if result is not None else None
    if entity is None:
        return None
    return _bind(entity, model_cls, namespace)


def parse_read(soap_response: str, model_cls: Type[M]) -> Optional[M]:
    return parse_result_by_tag(soap_response, model_cls, "Read_Result")


def parse_create_or_update(soap_response: str, model_cls: Type[M]) -> Optional[M]:
    """Entity echoed by either ``Create_Result`` or ``Update_Result``"""
    created = parse_result_by_tag(soap_response, model_cls, "Create_Result")
    if created is not None:
        return created
    return parse_result_by_tag(soap_response, model_cls, "Update_Result")


def parse_delete(soap_response: str) -> bool:
    # Presence check only; NAV answers an empty Delete_Result on success.
    return "Delete_Result" in soap_response


def parse_read_codeunit(soap_response: str, method_name: str, codeunit_name: str) -> SoapResult:
    """
    Outcome of a codeunit call.

    Never raises: a missing ``return_value`` or an unparseable body yields a
    failed SoapResult with an explanatory message.
    """
    namespace = codeunit_namespace(codeunit_name)
    try:
        root = ET.fromstring(soap_response)
    except ET.ParseError as e:
        logger.warning("Codeunit response could not be parsed", codeunit=codeunit_name, method=method_name, error=str(e))
        return SoapResult(success=False, message=f"Error parsing response: {e}")

    result = _find_result(root, namespace, f"{method_name}_Result")
    return_value = result.find(qualified(namespace, RETURN_VALUE)) if result is not None else None
    if return_value is None:
        return SoapResult(success=False, message=f"{RETURN_VALUE} element not found.")

    return SoapResult(success=True, message="Success", return_value="".join(return_value.itertext()))
