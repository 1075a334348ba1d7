"""
OData V4 collection envelope
"""

from typing import Generic, List, Optional, TypeVar
from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class ODataResponse(BaseModel, Generic[T]):
    """Wrapper for ``{"@odata.context": ..., "value": [...]}`` payloads"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    context: Optional[str] = Field(default=None, alias="@odata.context")
    value: Optional[List[T]] = None

    @property
    def items(self) -> List[T]:
        return self.value or []
