"""
Shared record shape for NAV page entities
"""

from typing import Any, ClassVar, Optional, Protocol, Type, runtime_checkable
from pydantic import BaseModel, ConfigDict, Field


@runtime_checkable
class HasConcurrencyToken(Protocol):
    """Records that carry an optimistic-concurrency ETag"""

    etag: Optional[str]


class NavModel(BaseModel):
    """
    Base class for entity records exchanged with NAV page services.

    The class name is the entity element name and the source of the page
    namespace unless ``nav_entity_name`` is set. ``etag`` travels only over
    OData (``@odata.etag``), ``key`` only over SOAP (``<Key>``).
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    nav_entity_name: ClassVar[Optional[str]] = None

    etag: Optional[str] = Field(default=None, alias="@odata.etag")
    key: Optional[str] = Field(default=None, alias="Key")

    def to_odata_payload(self) -> dict[str, Any]:
        """JSON body for OData writes; key and ETag are addressed separately"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True, exclude={"etag", "key"})


def entity_name_of(model_cls: Type[BaseModel]) -> str:
    """Element name NAV uses for records of this type"""
    return getattr(model_cls, "nav_entity_name", None) or model_cls.__name__
