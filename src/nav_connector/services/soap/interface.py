"""
SOAP Service Interface

Defines contract for CRUD and codeunit access to NAV SOAP web services
"""

import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from typing import Generic, Iterable, List, Optional, TypeVar

from ...models import SoapResult

T = TypeVar("T")


class INavSoapService(ABC, Generic[T]):
    """Interface for NAV SOAP page services with codeunit invocation"""

    @abstractmethod
    async def read_all(
        self,
        filters: Optional[Iterable[ET.Element]] = None,
        bookmark_key: Optional[str] = None,
        set_size: int = 0,
    ) -> List[T]:
        """
        Read the records matching the given filters.

        Args:
            filters: ``<filter>`` elements, each with ``Field`` and ``Criteria`` children
            bookmark_key: Bookmark of the last record of a previous page
            set_size: Maximum number of records; 0 uses the default page size

        Returns:
            Matching records; empty when nothing matches
        """
        pass

    @abstractmethod
    async def read(self, key_fields: ET.Element) -> Optional[T]:
        """
        Read a single record by its key fields.

        Args:
            key_fields: ``<Read>`` body element with the key fields

        Returns:
            The record, or None if not found
        """
        pass

    @abstractmethod
    async def create(self, payload: ET.Element) -> Optional[T]:
        """
        Create a new record.

        Args:
            payload: ``<Create>`` body element with the new record

        Returns:
            The created record as echoed by NAV, or None
        """
        pass

    @abstractmethod
    async def update(self, payload: ET.Element) -> Optional[T]:
        """
        Update an existing record.

        Args:
            payload: ``<Update>`` body element with the key and changed fields

        Returns:
            The updated record as echoed by NAV, or None
        """
        pass

    @abstractmethod
    async def delete(self, key_fields: ET.Element) -> bool:
        """
        Delete a record by its key.

        Args:
            key_fields: ``<Delete>`` body element with the record key

        Returns:
            True if NAV acknowledged the deletion
        """
        pass

    @abstractmethod
    async def invoke_codeunit(self, service_name: str, method_name: str, parameters: ET.Element) -> SoapResult:
        """
        Invoke a codeunit method.

        Args:
            service_name: Published codeunit service name
            method_name: Codeunit method to call
            parameters: Method body element with the parameters

        Returns:
            Outcome with the method's return value; never raises for a missing value
        """
        pass
