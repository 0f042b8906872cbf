"""Unit tests for identifier validators and monetary helpers."""

from datetime import datetime, timezone

import pytest

from ibms.domain.calculations import (
    calculate_gst,
    calculate_total,
    generate_order_number,
    paginate,
    total_pages,
)
from ibms.domain.validators import (
    validate_email,
    validate_gst,
    validate_hex_color,
    validate_ifsc,
    validate_pan,
    validate_phone,
    validate_pincode,
    validate_tan,
    validate_upi,
)


# ── Validators ──


@pytest.mark.parametrize("phone", ["9876543210", "6000000000"])
def test_validate_phone_accepts_indian_mobiles(phone: str):
    assert validate_phone(phone)


@pytest.mark.parametrize("phone", ["5876543210", "987654321", "98765432101", "+919876543210", ""])
def test_validate_phone_rejects_bad_numbers(phone: str):
    assert not validate_phone(phone)


def test_validate_gst():
    assert validate_gst("29ABCDE1234F1Z5")
    assert not validate_gst("29ABCDE1234F0Z5")  # entity number cannot be 0
    assert not validate_gst("29abcde1234f1z5")
    assert not validate_gst("29ABCDE1234F1X5")


def test_validate_pan_and_tan():
    assert validate_pan("ABCDE1234F")
    assert not validate_pan("ABCD1234F")
    assert validate_tan("ABCD12345E")
    assert not validate_tan("ABCDE1234F")


def test_validate_email():
    assert validate_email("contact@acme.com")
    assert not validate_email("contact@acme")
    assert not validate_email("contact acme@x.com")


def test_validate_banking_identifiers():
    assert validate_ifsc("HDFC0001234")
    assert not validate_ifsc("HDFC1001234")
    assert validate_upi("acme.pay@okhdfc")
    assert not validate_upi("a@okhdfc")
    assert validate_pincode("560001")
    assert not validate_pincode("060001")


def test_validate_hex_color():
    assert validate_hex_color("#0ea5e9")
    assert validate_hex_color("#0EA5E9")
    assert not validate_hex_color("#fff")
    assert not validate_hex_color("0ea5e9")


def test_validators_reject_non_strings():
    assert not validate_phone(9876543210)  # type: ignore[arg-type]
    assert not validate_email(None)  # type: ignore[arg-type]


# ── Calculations ──


def test_gst_and_total():
    assert calculate_gst(1000, 18) == 180.0
    assert calculate_total(1000, 18) == 1180.0
    assert calculate_gst(2500, 12) == 300.0


def test_generate_order_number_format():
    number = generate_order_number(datetime(2024, 6, 1, tzinfo=timezone.utc))
    prefix, year, digits = number.split("-")
    assert (prefix, year) == ("ORD", "2024")
    assert len(digits) == 6 and digits.isdigit()


def test_paginate_last_partial_page():
    page = paginate(list(range(25)), page=3, limit=10)
    assert page["data"] == [20, 21, 22, 23, 24]
    assert page["total"] == 25
    assert page["totalPages"] == 3


def test_paginate_past_the_end_is_empty():
    page = paginate(list(range(5)), page=4, limit=2)
    assert page["data"] == []
    assert page["totalPages"] == 3


def test_paginate_clamps_page_below_one():
    assert paginate([1, 2, 3], page=0, limit=2)["data"] == [1, 2]


def test_total_pages_with_zero_limit():
    assert total_pages(10, 0) == 0
