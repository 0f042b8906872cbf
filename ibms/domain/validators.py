"""Fixed-format validators for Indian business identifiers and contact fields.

These are format checks only; no checksums are verified. All validators
return ``False`` for empty or non-string input.
"""

import re

_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_PHONE_RE = re.compile(r"[6-9]\d{9}")
_GST_RE = re.compile(r"[0-9]{2}[A-Z]{5}[0-9]{4}[A-Z][1-9A-Z]Z[0-9A-Z]")
_PAN_RE = re.compile(r"[A-Z]{5}[0-9]{4}[A-Z]")
_PINCODE_RE = re.compile(r"[1-9][0-9]{5}")
_IFSC_RE = re.compile(r"[A-Z]{4}0[A-Z0-9]{6}")
_UPI_RE = re.compile(r"[a-zA-Z0-9.\-_]{2,256}@[a-zA-Z]{2,64}")
_TAN_RE = re.compile(r"[A-Z]{4}[0-9]{5}[A-Z]")
_HEX_COLOR_RE = re.compile(r"#[0-9A-Fa-f]{6}")


def _matches(pattern: re.Pattern[str], value: object) -> bool:
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def validate_email(email: str) -> bool:
    return _matches(_EMAIL_RE, email)


def validate_phone(phone: str) -> bool:
    """Ten-digit Indian mobile number starting with 6-9."""
    return _matches(_PHONE_RE, phone)


def validate_gst(gst: str) -> bool:
    """GSTIN: state code, PAN, entity number, literal Z, check character."""
    return _matches(_GST_RE, gst)


def validate_pan(pan: str) -> bool:
    return _matches(_PAN_RE, pan)


def validate_pincode(pincode: str) -> bool:
    return _matches(_PINCODE_RE, pincode)


def validate_ifsc(ifsc: str) -> bool:
    return _matches(_IFSC_RE, ifsc)


def validate_upi(upi: str) -> bool:
    return _matches(_UPI_RE, upi)


def validate_tan(tan: str) -> bool:
    return _matches(_TAN_RE, tan)


def validate_hex_color(color: str) -> bool:
    """Six-digit ``#RRGGBB`` colour, case-insensitive."""
    return _matches(_HEX_COLOR_RE, color)
