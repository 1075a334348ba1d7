"""
Connector exceptions

Every failure surfaced by the OData and SOAP services derives from NavClientError.
"""

from typing import Optional


class NavClientError(Exception):
    """Base error for connector failures"""
    pass


class NavTransportError(NavClientError):
    """Network failure or non-success HTTP status"""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        fault: Optional[str] = None,
        response_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.fault = fault
        self.response_text = response_text


class NavSoapFaultError(NavClientError):
    """SOAP fault returned inside an otherwise successful response"""

    def __init__(self, fault: Optional[str]):
        super().__init__(f"SOAP Fault: {fault}")
        self.fault = fault


class NavNotFoundError(NavClientError):
    """No entity matched a lookup that requires one"""
    pass


class NavResponseError(NavClientError):
    """Response body was empty or could not be decoded"""
    pass
