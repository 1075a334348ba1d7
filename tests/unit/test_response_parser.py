"""
Tests for SOAP response parsing
"""

import xml.etree.ElementTree as ET
from datetime import date
from decimal import Decimal
from typing import List, Optional

import pytest

from nav_connector.errors import NavResponseError
from nav_connector.models import NavModel
from nav_connector.utils.envelope import build_envelope, envelope_to_string
from nav_connector.utils.namespaces import page_namespace
from nav_connector.utils.response_parser import (
    parse_create_or_update,
    parse_delete,
    parse_read,
    parse_read_codeunit,
    parse_read_multiple,
)
from nav_connector.utils.serialization import serialize_entity

CUSTOMER_NS = "urn:microsoft-dynamics-schemas/page/customer"
CODEUNIT_NS = "urn:microsoft-dynamics-schemas/codeunit/SalesTools"


class OrderLine(NavModel):
    No: Optional[str] = None
    Quantity: Optional[int] = None


class SalesOrderLines(NavModel):
    Sales_Order_Line: Optional[List[OrderLine]] = None


class SalesOrder(NavModel):
    No: Optional[str] = None
    SalesLines: Optional[SalesOrderLines] = None
    Tags: Optional[List[str]] = None
    Shipment_Dates: Optional[List[date]] = None


def create_response(entity_name: str, entity: NavModel) -> str:
    result = ET.Element(f"{{{page_namespace(entity_name)}}}Create_Result")
    result.append(serialize_entity(entity_name, entity, entity_name))
    return envelope_to_string(build_envelope(result))


@pytest.mark.unit
class TestParseReadMultiple:
    def test_returns_every_entity(self, read_multiple_response, customer_cls):
        customers = parse_read_multiple(read_multiple_response, customer_cls)

        assert [c.number for c in customers] == ["10000", "20000"]
        assert customers[0].Balance == Decimal("1250.50")
        assert customers[0].key == "1;abc"
        assert customers[1].Blocked is True
        assert customers[1].Balance is None

    def test_empty_inner_result(self, soap_envelope, customer_cls):
        """A ReadMultiple_Result without entities yields an empty list"""
        response = soap_envelope(
            f'<ReadMultiple_Result xmlns="{CUSTOMER_NS}"><ReadMultiple_Result/></ReadMultiple_Result>'
        )
        assert parse_read_multiple(response, customer_cls) == []

    def test_missing_result_wrapper(self, soap_envelope, customer_cls):
        """No ReadMultiple_Result at all still yields an empty list"""
        response = soap_envelope(f'<ReadMultiple_Result xmlns="{CUSTOMER_NS}"/>')
        assert parse_read_multiple(response, customer_cls) == []
        assert parse_read_multiple(soap_envelope(""), customer_cls) == []

    def test_ignores_other_namespaces(self, soap_envelope, customer_cls):
        response = soap_envelope(
            '<ReadMultiple_Result xmlns="urn:microsoft-dynamics-schemas/page/vendor">'
            "<ReadMultiple_Result><Customer><No>1</No></Customer></ReadMultiple_Result>"
            "</ReadMultiple_Result>"
        )
        assert parse_read_multiple(response, customer_cls) == []

    def test_unknown_fields_are_ignored(self, soap_envelope, customer_cls):
        response = soap_envelope(
            f'<ReadMultiple_Result xmlns="{CUSTOMER_NS}"><ReadMultiple_Result>'
            "<Customer><No>10000</No><Shipping_Advice>Partial</Shipping_Advice></Customer>"
            "</ReadMultiple_Result></ReadMultiple_Result>"
        )
        (customer,) = parse_read_multiple(response, customer_cls)
        assert customer.number == "10000"
        assert customer.Name is None

    def test_uses_explicit_entity_name(self, soap_envelope, sales_line_cls):
        response = soap_envelope(
            '<ReadMultiple_Result xmlns="urn:microsoft-dynamics-schemas/page/sales_line"><ReadMultiple_Result>'
            "<Sales_Line><Document_No>SO-1</Document_No><Quantity>3</Quantity></Sales_Line>"
            "</ReadMultiple_Result></ReadMultiple_Result>"
        )
        (line,) = parse_read_multiple(response, sales_line_cls)
        assert line.Document_No == "SO-1"
        assert line.Quantity == 3

    def test_malformed_xml_raises(self, customer_cls):
        with pytest.raises(NavResponseError, match="Malformed SOAP response"):
            parse_read_multiple("<Soap:Envelope", customer_cls)


@pytest.mark.unit
class TestParseRead:
    def test_reads_single_entity(self, soap_envelope, customer_cls):
        response = soap_envelope(
            f'<Read_Result xmlns="{CUSTOMER_NS}"><Customer><No>10000</No><Name>Adatum</Name></Customer></Read_Result>'
        )
        customer = parse_read(response, customer_cls)
        assert customer.number == "10000"
        assert customer.Name == "Adatum"

    def test_absent_entity_returns_none(self, soap_envelope, customer_cls):
        """Read of a missing record is an absent value, not an error"""
        assert parse_read(soap_envelope(f'<Read_Result xmlns="{CUSTOMER_NS}"/>'), customer_cls) is None

    def test_invalid_value_raises(self, soap_envelope, sales_line_cls):
        response = soap_envelope(
            '<Read_Result xmlns="urn:microsoft-dynamics-schemas/page/sales_line">'
            "<Sales_Line><Document_No>SO-1</Document_No><Quantity>many</Quantity></Sales_Line></Read_Result>"
        )
        with pytest.raises(NavResponseError, match="Sales_Line"):
            parse_read(response, sales_line_cls)


@pytest.mark.unit
class TestParseCreateOrUpdate:
    def test_create_round_trip(self, sample_customer, customer_cls):
        """A record echoed back through Create_Result equals the record sent"""
        result = ET.Element(f"{{{page_namespace('Customer')}}}Create_Result")
        result.append(serialize_entity("Customer", sample_customer, "Customer"))
        response = envelope_to_string(build_envelope(result))

        assert parse_create_or_update(response, customer_cls) == sample_customer

    def test_update_result(self, soap_envelope, customer_cls):
        response = soap_envelope(
            f'<Update_Result xmlns="{CUSTOMER_NS}"><Customer><No>10000</No><Name>Renamed</Name></Customer></Update_Result>'
        )
        assert parse_create_or_update(response, customer_cls).Name == "Renamed"

    def test_neither_result_returns_none(self, soap_envelope, customer_cls):
        assert parse_create_or_update(soap_envelope(f'<Create_Result xmlns="{CUSTOMER_NS}"/>'), customer_cls) is None

    def test_nested_record_round_trip(self):
        """Sub-records such as order lines survive a Create_Result echo"""
        order = SalesOrder(
            No="SO-1",
            SalesLines=SalesOrderLines(Sales_Order_Line=[OrderLine(No="1", Quantity=2), OrderLine(No="2", Quantity=5)]),
        )

        parsed = parse_create_or_update(create_response("SalesOrder", order), SalesOrder)

        assert parsed == order
        assert [line.Quantity for line in parsed.SalesLines.Sales_Order_Line] == [2, 5]

    def test_single_nested_line_is_still_a_list(self):
        order = SalesOrder(No="SO-2", SalesLines=SalesOrderLines(Sales_Order_Line=[OrderLine(No="1")]))

        parsed = parse_create_or_update(create_response("SalesOrder", order), SalesOrder)

        assert parsed.SalesLines.Sales_Order_Line == [OrderLine(No="1")]

    def test_repeated_scalar_fields_round_trip(self):
        order = SalesOrder(No="SO-3", Tags=["a", "b"], Shipment_Dates=[date(2024, 1, 5), date(2024, 2, 1)])

        assert parse_create_or_update(create_response("SalesOrder", order), SalesOrder) == order


@pytest.mark.unit
class TestParseDelete:
    def test_delete_result_present(self, soap_envelope):
        assert parse_delete(soap_envelope(f'<Delete_Result xmlns="{CUSTOMER_NS}"/>')) is True

    def test_delete_result_absent(self, soap_envelope):
        assert parse_delete(soap_envelope(f'<Read_Result xmlns="{CUSTOMER_NS}"/>')) is False

    def test_substring_match_ignores_well_formedness(self):
        assert parse_delete("not xml but Delete_Result anyway") is True
        assert parse_delete("<broken") is False


@pytest.mark.unit
class TestParseReadCodeunit:
    def test_return_value(self, soap_envelope):
        response = soap_envelope(
            f'<CalcTotal_Result xmlns="{CODEUNIT_NS}"><return_value>42.5</return_value></CalcTotal_Result>'
        )
        result = parse_read_codeunit(response, "CalcTotal", "SalesTools")

        assert result.success is True
        assert result.message == "Success"
        assert result.return_value == "42.5"

    def test_missing_return_value_is_a_failed_result(self, soap_envelope):
        """A missing return_value never raises"""
        response = soap_envelope(f'<CalcTotal_Result xmlns="{CODEUNIT_NS}"/>')
        result = parse_read_codeunit(response, "CalcTotal", "SalesTools")

        assert result.success is False
        assert "return_value" in result.message
        assert result.return_value is None

    def test_namespace_comes_from_codeunit_name(self, soap_envelope):
        response = soap_envelope(
            '<CalcTotal_Result xmlns="urn:microsoft-dynamics-schemas/page/salestools">'
            "<return_value>1</return_value></CalcTotal_Result>"
        )
        assert parse_read_codeunit(response, "CalcTotal", "SalesTools").success is False

    def test_unparseable_response(self):
        result = parse_read_codeunit("<<<", "CalcTotal", "SalesTools")

        assert result.success is False
        assert result.message.startswith("Error parsing response")
