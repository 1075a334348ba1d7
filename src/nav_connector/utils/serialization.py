"""
Record <-> XML binding for NAV page services

Fields map to child elements by alias (falling back to the field name) in
the page namespace. ``etag`` never travels over SOAP.
"""

import xml.etree.ElementTree as ET
from datetime import date, datetime
from enum import Enum
from types import UnionType
from typing import Any, Dict, Optional, Tuple, Type, TypeVar, Union, get_args, get_origin

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from .dates import format_date, parse_date
from .namespaces import local_name, namespace_of, page_namespace, qualified

M = TypeVar("M", bound=BaseModel)

XML_EXCLUDED_FIELDS = frozenset({"etag"})


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return format_date(value) or ""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _append_value(parent: ET.Element, tag: str, value: Any, namespace: str) -> None:
    if value is None:
        return
    if isinstance(value, BaseModel):
        parent.append(_model_element(tag, value, namespace))
    elif isinstance(value, (list, tuple)):
        for item in value:
            _append_value(parent, tag, item, namespace)
    else:
        ET.SubElement(parent, qualified(namespace, tag)).text = _format_value(value)


def _model_element(tag: str, entity: BaseModel, namespace: str) -> ET.Element:
    element = ET.Element(qualified(namespace, tag))
    for name, field in type(entity).model_fields.items():
        if name in XML_EXCLUDED_FIELDS:
            continue
        _append_value(element, field.alias or name, getattr(entity, name), namespace)
    return element


def serialize_entity(wrapper_name: str, entity: BaseModel, service_namespace: str) -> ET.Element:
    """
    Serialize ``entity`` as ``<wrapper_name>`` in the page namespace of
    ``service_namespace``. None-valued fields are omitted.
    """
    return _model_element(wrapper_name, entity, page_namespace(service_namespace))


def serialize_entity_to_string(wrapper_name: str, entity: BaseModel, service_namespace: str) -> str:
    return ET.tostring(serialize_entity(wrapper_name, entity, service_namespace), encoding="unicode")


def build_operation(verb: str, namespace: str, *children: ET.Element, **fields: Any) -> ET.Element:
    """
    Request body element ``<verb>`` in ``namespace``.

    Keyword arguments become simple text children, e.g. key fields for Read
    or method parameters for a codeunit call.
    """
    operation = ET.Element(qualified(namespace, verb))
    for child in children:
        operation.append(child)
    for name, value in fields.items():
        _append_value(operation, name, value, namespace)
    return operation


def build_filter(field: str, criteria: str, namespace: str) -> ET.Element:
    """ReadMultiple filter: ``<filter><Field/><Criteria/></filter>``"""
    element = ET.Element(qualified(namespace, "filter"))
    ET.SubElement(element, qualified(namespace, "Field")).text = field
    ET.SubElement(element, qualified(namespace, "Criteria")).text = criteria
    return element


def _unwrap_optional(annotation: Any) -> Any:
    if get_origin(annotation) in (Union, UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _is_model(annotation: Any) -> bool:
    return isinstance(annotation, type) and issubclass(annotation, BaseModel)


def _field_shape(field: FieldInfo) -> Tuple[bool, Any]:
    """(repeated, item type) of a field, with Optional stripped"""
    annotation = _unwrap_optional(field.annotation)
    if get_origin(annotation) in (list, tuple):
        args = get_args(annotation)
        return True, _unwrap_optional(args[0]) if args else str
    return False, annotation


def _child_value(child: ET.Element, item_type: Any, namespace: str) -> Any:
    if _is_model(item_type):
        return element_values(child, item_type, namespace)
    if child.text is None:
        return None
    if item_type is date:
        return parse_date(child.text)
    return child.text


def _field_lookup(model_cls: Type[BaseModel]) -> Dict[str, str]:
    lookup: Dict[str, str] = {}
    for name, field in model_cls.model_fields.items():
        if name in XML_EXCLUDED_FIELDS:
            continue
        lookup[name] = name
        if field.alias:
            lookup[field.alias] = name
    return lookup


def element_values(element: ET.Element, model_cls: Type[BaseModel], namespace: Optional[str] = None) -> Dict[str, Any]:
    """
    Map child elements of ``element`` onto validation keys of ``model_cls``.

    Nested record fields recurse into their element. List fields collect
    every repeated child element of the same name.
    """
    namespace = namespace if namespace is not None else namespace_of(element.tag)
    lookup = _field_lookup(model_cls)
    fields = model_cls.model_fields
    values: Dict[str, Any] = {}

    for child in element:
        child_ns = namespace_of(child.tag)
        if child_ns and child_ns != namespace:
            continue
        name = lookup.get(local_name(child.tag))
        if name is None:
            continue
        field = fields[name]
        repeated, item_type = _field_shape(field)
        value = _child_value(child, item_type, namespace)
        if value is None:
            continue
        key = field.alias or name
        if repeated:
            values.setdefault(key, []).append(value)
        else:
            values[key] = value

    return values


def deserialize_entity(element: ET.Element, model_cls: Type[M], namespace: Optional[str] = None) -> M:
    """
    Bind ``element`` to a new ``model_cls`` instance.

    Unknown children are ignored; absent or empty children leave defaults.

    Raises:
        pydantic.ValidationError: If a value cannot be coerced to its field type
    """
    return model_cls.model_validate(element_values(element, model_cls, namespace))
