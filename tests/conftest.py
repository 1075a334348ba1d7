"""
Pytest configuration and fixtures for NAV connector tests
"""

from datetime import date
from decimal import Decimal
from typing import Callable, Optional

import httpx
import pytest
from pydantic import Field

from nav_connector.config import Settings
from nav_connector.models import NavModel

ODATA_BASE = "http://nav.local:7048/BC/ODataV4/Company('CRONUS')/"
SOAP_BASE = "http://nav.local:7047/BC/WS/CRONUS/Page/"
SOAP_ENV = "http://schemas.xmlsoap.org/soap/envelope/"
CUSTOMER_NS = "urn:microsoft-dynamics-schemas/page/customer"


class Customer(NavModel):
    number: str = Field(alias="No")
    Name: Optional[str] = None
    Balance: Optional[Decimal] = None
    Blocked: Optional[bool] = None
    Last_Date_Modified: Optional[date] = None


class SalesLine(NavModel):
    nav_entity_name = "Sales_Line"

    Document_No: str
    Quantity: Optional[int] = None


@pytest.fixture
def customer_cls():
    return Customer


@pytest.fixture
def sales_line_cls():
    return SalesLine


@pytest.fixture
def sample_customer():
    """Customer with every field populated"""
    return Customer(
        No="10000",
        Name="Adatum Corporation",
        Balance=Decimal("1250.50"),
        Blocked=False,
        Last_Date_Modified=date(2024, 3, 1),
        Key="32;EgAAAAJ7/zEAMAAwADAAMA==8;3417010;",
    )


@pytest.fixture
def soap_envelope() -> Callable[[str], str]:
    """Wrap a body fragment in a SOAP response envelope"""

    def wrap(body: str) -> str:
        return (
            f'<?xml version="1.0" encoding="utf-8"?>'
            f'<Soap:Envelope xmlns:Soap="{SOAP_ENV}"><Soap:Body>{body}</Soap:Body></Soap:Envelope>'
        )

    return wrap


@pytest.fixture
def read_multiple_response(soap_envelope):
    return soap_envelope(
        f'<ReadMultiple_Result xmlns="{CUSTOMER_NS}"><ReadMultiple_Result>'
        "<Customer><Key>1;abc</Key><No>10000</No><Name>Adatum Corporation</Name><Balance>1250.50</Balance></Customer>"
        "<Customer><Key>2;def</Key><No>20000</No><Name>Trey Research</Name><Blocked>true</Blocked></Customer>"
        "</ReadMultiple_Result></ReadMultiple_Result>"
    )


@pytest.fixture
def fault_response():
    return (
        f'<s:Envelope xmlns:s="{SOAP_ENV}"><s:Body><s:Fault>'
        "<faultcode>a:Microsoft.Dynamics.Nav.Service.WebServices.ServiceBrokerException</faultcode>"
        '<faultstring xml:lang="en-US">The Customer does not exist. Identification fields and values: No.=\'99999\'</faultstring>'
        "<detail><string>The Customer does not exist.</string></detail>"
        "</s:Fault></s:Body></s:Envelope>"
    )


@pytest.fixture
def mock_settings():
    """Settings for testing"""
    return Settings(
        host="http://nav.local",
        port=7048,
        server_instance="BC",
        company="CRONUS",
        auth_mode="basic",
        username="WEBUSER",
        password="access-key",
    )


@pytest.fixture
async def odata_http():
    client = httpx.AsyncClient(base_url=ODATA_BASE)
    yield client
    await client.aclose()


@pytest.fixture
async def soap_http():
    client = httpx.AsyncClient(base_url=SOAP_BASE)
    yield client
    await client.aclose()
