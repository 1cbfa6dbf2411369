"""
Checkers for the string `format` keyword.

Each checker takes the target string and returns True when it is well formed.
The set is closed: unknown format names are rejected at compile time.
"""

from __future__ import annotations

import ipaddress
import re
import uuid
from datetime import date, datetime, time
from email.utils import parseaddr
from types import MappingProxyType
from typing import Callable, Mapping
from urllib.parse import urlsplit

FormatChecker = Callable[[str], bool]

_DATE_TIME_RE = re.compile(
    r"^\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})$"
)
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIME_RE = re.compile(r"^\d{2}:\d{2}:\d{2}$")
_DURATION_RE = re.compile(
    r"^P(?!$)(\d+Y)?(\d+M)?(\d+W)?(\d+D)?(T(?=\d)(\d+H)?(\d+M)?(\d+(\.\d+)?S)?)?$"
)
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_ADDR_SPEC_RE = re.compile(r"^[^\s@<>()\[\]\\,;:\"]+@[^\s@<>()\[\]\\,;:\"]+$")


def is_date_time(value: str) -> bool:
    if not _DATE_TIME_RE.match(value):
        return False
    normalized = value.upper().replace("Z", "+00:00")
    try:
        datetime.fromisoformat(normalized)
    except ValueError:
        return False
    return True


def is_date(value: str) -> bool:
    if not _DATE_RE.match(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def is_time(value: str) -> bool:
    if not _TIME_RE.match(value):
        return False
    try:
        time.fromisoformat(value)
    except ValueError:
        return False
    return True


def is_duration(value: str) -> bool:
    return _DURATION_RE.match(value) is not None


def is_regex(value: str) -> bool:
    try:
        re.compile(value)
    except re.error:
        return False
    return True


def is_email(value: str) -> bool:
    # Accepts a bare addr-spec or a "Display Name <addr-spec>" form.
    name, address = parseaddr(value)
    if not address:
        return False
    if not name and address != value.strip():
        return False
    return _ADDR_SPEC_RE.match(address) is not None


def is_uri(value: str) -> bool:
    """Lenient parse, shared by `uri` and `hostname`."""
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in value):
        return False
    if _BAD_ESCAPE_RE.search(value):
        return False
    try:
        parts = urlsplit(value)
        # Accessing port validates the authority's port section.
        _ = parts.port
    except ValueError:
        return False
    if not parts.scheme and value.split("/", 1)[0].count(":"):
        # ":x" or "1a:x": colon in the first segment but no valid scheme.
        return False
    return True


def is_ip(value: str) -> bool:
    """Generic IP literal parse, shared by `ipv4` and `ipv6`."""
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def is_uuid(value: str) -> bool:
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True


FORMAT_CHECKERS: Mapping[str, FormatChecker] = MappingProxyType(
    {
        "date-time": is_date_time,
        "date": is_date,
        "time": is_time,
        "duration": is_duration,
        "regex": is_regex,
        "email": is_email,
        "hostname": is_uri,
        "uri": is_uri,
        "ipv4": is_ip,
        "ipv6": is_ip,
        "uuid": is_uuid,
    }
)
