from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class SoapResult:
    """Outcome of a codeunit invocation"""

    success: bool
    message: Optional[str] = None
    return_value: Optional[Any] = None
