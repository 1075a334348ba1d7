"""
Generic SOAP Service

Page CRUD and codeunit invocation against NAV SOAP web services. The shared
httpx client's base URL is the company's ``WS/<company>/Page/`` root.
"""

import xml.etree.ElementTree as ET
from typing import Iterable, List, Optional, Type, TypeVar

import httpx
import structlog
from pydantic import BaseModel

from ...errors import NavSoapFaultError, NavTransportError
from ...models import SoapResult
from ...utils.envelope import build_envelope, envelope_to_string
from ...utils.faults import contains_fault_marker, try_extract_soap_fault
from ...utils.namespaces import codeunit_url, page_namespace, soap_action
from ...utils.response_parser import (
    parse_create_or_update,
    parse_delete,
    parse_read,
    parse_read_codeunit,
    parse_read_multiple,
)
from ...utils.serialization import build_operation
from .interface import INavSoapService

logger = structlog.get_logger(__name__)

T = TypeVar("T", bound=BaseModel)

DEFAULT_SET_SIZE = 1000


class GenericSoapService(INavSoapService[T]):
    """SOAP page service for records of one model type"""

    def __init__(self, http: httpx.AsyncClient, service_name: str, model_cls: Type[T]):
        self.http = http
        self.service_name = service_name
        self.model_cls = model_cls
        self.log = logger.bind(service=service_name)

    @property
    def namespace(self) -> str:
        """Page namespace of this service"""
        return page_namespace(self.service_name)

    def _service_url(self, service_name: str) -> str:
        return f"{self.http.base_url}{service_name}"

    def _envelope(self, body: ET.Element) -> str:
        envelope = envelope_to_string(build_envelope(body))
        self.log.debug("Envelope content", envelope=envelope)
        return envelope

    async def read_all(
        self,
        filters: Optional[Iterable[ET.Element]] = None,
        bookmark_key: Optional[str] = None,
        set_size: int = 0,
    ) -> List[T]:
        self.log.info("Reading all records")

        body = build_operation(
            "ReadMultiple",
            self.namespace,
            *(filters or []),
            bookmarkKey=bookmark_key,
            setSize=set_size if set_size > 0 else DEFAULT_SET_SIZE,
        )
        response = await self._send_page_request(self._envelope(body), "page/ReadMultiple")
        return parse_read_multiple(response, self.model_cls)

    async def read(self, key_fields: ET.Element) -> Optional[T]:
        self.log.info("Reading single record")

        response = await self._send_page_request(self._envelope(key_fields), "page/Read")
        return parse_read(response, self.model_cls)

    async def create(self, payload: ET.Element) -> Optional[T]:
        self.log.info("Creating record")

        response = await self._send_page_request(self._envelope(payload), "page/Create")
        return parse_create_or_update(response, self.model_cls)

    async def update(self, payload: ET.Element) -> Optional[T]:
        self.log.info("Updating record")

        response = await self._send_page_request(self._envelope(payload), "page/Update")
        return parse_create_or_update(response, self.model_cls)

    async def delete(self, key_fields: ET.Element) -> bool:
        self.log.warning("Deleting record")

        response = await self._send_page_request(self._envelope(key_fields), "page/Delete")
        return parse_delete(response)

    async def invoke_codeunit(self, service_name: str, method_name: str, parameters: ET.Element) -> SoapResult:
        self.log.debug("Invoking codeunit", codeunit=service_name, method=method_name)

        url = codeunit_url(self._service_url(service_name))
        response = await self._dispatch(url, self._envelope(parameters), f"codeunit/{service_name}", service_name)
        return parse_read_codeunit(response, method_name, service_name)

    async def _send_page_request(self, envelope: str, action: str) -> str:
        return await self._dispatch(self._service_url(self.service_name), envelope, action, self.service_name)

    async def _dispatch(self, url: str, envelope: str, action: str, target: str) -> str:
        """
        POST one envelope and return the raw response body.

        Raises:
            NavTransportError: On network failure or a non-success status
            NavSoapFaultError: When a successful response carries a SOAP fault
        """
        headers = {
            "SOAPAction": soap_action(action),
            "Content-Type": "text/xml; charset=utf-8",
        }
        self.log.debug("Sending SOAP request", action=action, url=url)

        try:
            response = await self.http.post(url, content=envelope.encode("utf-8"), headers=headers)
        except httpx.HTTPError as e:
            self.log.error("HTTP request failed", target=target, error=str(e))
            raise NavTransportError(f"HTTP Request failed: {e}") from e

        content = response.text

        if not response.is_success:
            fault = try_extract_soap_fault(content)
            self.log.error("SOAP error", status_code=response.status_code, fault=fault if fault is not None else content)
            raise NavTransportError(
                f"SOAP Error: HTTP {response.status_code} - {fault if fault is not None else content}",
                status_code=response.status_code,
                fault=fault,
                response_text=content,
            )

        if contains_fault_marker(content):
            fault = try_extract_soap_fault(content)
            self.log.error("SOAP fault", target=target, fault=fault)
            raise NavSoapFaultError(fault)

        self.log.debug("SOAP response received successfully", target=target)
        return content
