# -*- coding: utf-8 -*-
# MinIO Python Library for Amazon S3 Compatible Cloud Storage,
# (C) 2015-2025 MinIO, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Time formatting and parsing used by signing and response parsing."""

from __future__ import annotations

from datetime import datetime, timezone
from email.utils import format_datetime, parsedate_to_datetime

_ISO8601_FORMATS = ("%Y-%m-%dT%H:%M:%S.%fZ", "%Y-%m-%dT%H:%M:%SZ")


def _as_utc(value: datetime) -> datetime:
    """Return aware UTC datetime; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utcnow() -> datetime:
    """Current time as timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def from_iso8601utc(value: str | None) -> datetime | None:
    """Parse UTC ISO-8601 formatted string like 2015-05-05T02:21:15.716Z."""
    if value is None:
        return None

    for fmt in _ISO8601_FORMATS:
        try:
            return datetime.strptime(value, fmt).replace(tzinfo=timezone.utc)
        except ValueError:
            continue
    raise ValueError(f"time data {value} does not match ISO-8601 UTC format")


def to_iso8601utc(value: datetime) -> str:
    """Format datetime as UTC ISO-8601 with millisecond precision."""
    value = _as_utc(value)
    millis = value.microsecond // 1000
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{millis:03d}Z"


def from_http_header(value: str) -> datetime:
    """Parse RFC 7231 date like 'Fri, 26 Jun 2015 19:05:37 GMT'."""
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(
            f"time data {value} does not match HTTP header format",
        ) from exc
    return _as_utc(parsed)


def to_http_header(value: datetime) -> str:
    """Format datetime as RFC 7231 HTTP date."""
    return format_datetime(_as_utc(value), usegmt=True)


def to_amz_date(value: datetime) -> str:
    """Format datetime as X-Amz-Date value."""
    return _as_utc(value).strftime("%Y%m%dT%H%M%SZ")


def to_signer_date(value: datetime) -> str:
    """Format datetime as credential scope date."""
    return _as_utc(value).strftime("%Y%m%d")
