"""Display labels for string format names reported by invalid_format issues."""

from __future__ import annotations

import re

FORMAT_LABELS: dict[str, str] = {
    "email": "an email address",
    "url": "a URL",
    "emoji": "an emoji",
    "uuid": "a UUID",
    "uuidv4": "a UUID v4",
    "uuidv6": "a UUID v6",
    "uuidv7": "a UUID v7",
    "guid": "a GUID",
    "nanoid": "a nanoid",
    "cuid": "a CUID",
    "cuid2": "a CUID2",
    "ulid": "a ULID",
    "xid": "a XID",
    "ksuid": "a KSUID",
    "datetime": "an ISO datetime",
    "date": "an ISO date",
    "time": "an ISO time",
    "duration": "an ISO duration",
    "ipv4": "an IPv4 address",
    "ipv6": "an IPv6 address",
    "cidrv4": "a CIDRv4 address range",
    "cidrv6": "a CIDRv6 address range",
    "base64": "a base64 encoded string",
    "base64url": "a base64url encoded string",
    "e164": "an E.164 formatted phone number",
    "hostname": "a hostname",
    "json_string": "a JSON string",
}

CASE_FORMATS: frozenset[str] = frozenset({"lowercase", "uppercase"})

HASH_FORMAT_PATTERN: re.Pattern[str] = re.compile(
    r"^(?P<algorithm>md5|sha1|sha256|sha384|sha512)_(?P<encoding>hex|base64|base64url)$"
)
