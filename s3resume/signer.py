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

"""
s3resume.signer
~~~~~~~~~~~~~~~

AWS Signature Version 4 for S3 in its three forms: Authorization header,
presigned URL query string and browser POST policy.

:copyright: (c) 2015-2025 by MinIO, Inc.
:license: Apache 2.0, see LICENSE for more details.

"""

from __future__ import annotations

import hashlib
import hmac
import re
from datetime import datetime
from typing import Mapping
from urllib.parse import SplitResult

from . import time
from .credentials import Credentials
from .hashing import UNSIGNED_PAYLOAD, sha256_hash
from .helpers import DictType, queryencode, url_replace

SIGN_V4_ALGORITHM = "AWS4-HMAC-SHA256"
_SERVICE_NAME = "s3"
_MULTI_SPACE_REGEX = re.compile(r"( +)")
_UNSIGNED_HEADERS = ("authorization", "user-agent")


def _hmac_hash(key: bytes, data: bytes) -> bytes:
    """Return HMAC-SHA256 digest of given key and data."""
    return hmac.new(key, data, hashlib.sha256).digest()


def get_scope(date: datetime, region: str) -> str:
    """Credential scope date/region/s3/aws4_request."""
    return (
        f"{time.to_signer_date(date)}/{region}/{_SERVICE_NAME}/aws4_request"
    )


def get_credential_string(access_key: str, date: datetime, region: str) -> str:
    """Get credential string of given access key, date and region."""
    return f"{access_key}/{get_scope(date, region)}"


def get_signing_key(secret_key: str, date: datetime, region: str) -> bytes:
    """Derive signing key by HMAC chain over date, region and service."""
    key = ("AWS4" + secret_key).encode()
    for data in (
            time.to_signer_date(date), region, _SERVICE_NAME, "aws4_request",
    ):
        key = _hmac_hash(key, data.encode())
    return key


def _get_signature(signing_key: bytes, string_to_sign: str) -> str:
    return hmac.new(
        signing_key, string_to_sign.encode(), hashlib.sha256,
    ).hexdigest()


def _get_canonical_headers(
        headers: Mapping[str, str | list[str] | tuple[str, ...]],
) -> tuple[str, str]:
    """Get canonical headers and signed headers list."""
    canonical = {}
    for key, values in headers.items():
        key = key.lower()
        if key in _UNSIGNED_HEADERS:
            continue
        if not isinstance(values, (list, tuple)):
            values = [values]
        canonical[key] = ",".join(
            _MULTI_SPACE_REGEX.sub(" ", str(value).strip())
            for value in values
        )

    names = sorted(canonical)
    return (
        "\n".join(f"{name}:{canonical[name]}" for name in names),
        ";".join(names),
    )


def _get_canonical_query_string(query: str) -> str:
    """Sort encoded query parameters by name, then by value."""
    if not query:
        return ""
    pairs = sorted(param.partition("=")[::2] for param in query.split("&"))
    return "&".join(f"{key}={value}" for key, value in pairs)


def get_canonical_request(
        method: str,
        url: SplitResult,
        canonical_headers: str,
        signed_headers: str,
        content_sha256: str,
) -> str:
    """Get canonical request string."""
    # CanonicalRequest =
    #   HTTPRequestMethod + '\n' +
    #   CanonicalURI + '\n' +
    #   CanonicalQueryString + '\n' +
    #   CanonicalHeaders + '\n\n' +
    #   SignedHeaders + '\n' +
    #   HexEncode(Hash(RequestPayload))
    return "\n".join([
        method,
        url.path or "/",
        _get_canonical_query_string(url.query),
        canonical_headers + "\n",
        signed_headers,
        content_sha256,
    ])


def get_string_to_sign(
        date: datetime, scope: str, canonical_request: str,
) -> str:
    """Get string-to-sign of canonical request."""
    return "\n".join([
        SIGN_V4_ALGORITHM,
        time.to_amz_date(date),
        scope,
        sha256_hash(canonical_request),
    ])


def sign_v4_s3(
        method: str,
        url: SplitResult,
        region: str,
        headers: DictType,
        credentials: Credentials,
        content_sha256: str,
        date: datetime,
) -> DictType:
    """Add SignatureV4 Authorization header to headers of the request."""
    scope = get_scope(date, region)
    canonical_headers, signed_headers = _get_canonical_headers(headers)
    canonical_request = get_canonical_request(
        method, url, canonical_headers, signed_headers, content_sha256,
    )
    signature = _get_signature(
        get_signing_key(credentials.secret_key, date, region),
        get_string_to_sign(date, scope, canonical_request),
    )
    headers["Authorization"] = (
        f"{SIGN_V4_ALGORITHM} Credential={credentials.access_key}/{scope}, "
        f"SignedHeaders={signed_headers}, Signature={signature}"
    )
    return headers


def presign_v4(
        method: str,
        url: SplitResult,
        region: str,
        credentials: Credentials,
        date: datetime,
        expires: int,
) -> SplitResult:
    """
    Return URL carrying SignatureV4 in its query string. Only host header is
    signed and payload is never hashed.
    """
    scope = get_scope(date, region)
    params = [
        ("X-Amz-Algorithm", SIGN_V4_ALGORITHM),
        ("X-Amz-Credential", f"{credentials.access_key}/{scope}"),
        ("X-Amz-Date", time.to_amz_date(date)),
        ("X-Amz-Expires", str(expires)),
    ]
    if credentials.session_token:
        params.append(("X-Amz-Security-Token", credentials.session_token))
    params.append(("X-Amz-SignedHeaders", "host"))

    query = "&".join(
        f"{queryencode(key)}={queryencode(value)}" for key, value in params
    )
    url = url_replace(
        url, query=f"{url.query}&{query}" if url.query else query,
    )

    canonical_request = get_canonical_request(
        method, url, "host:" + url.netloc, "host", UNSIGNED_PAYLOAD,
    )
    signature = _get_signature(
        get_signing_key(credentials.secret_key, date, region),
        get_string_to_sign(date, scope, canonical_request),
    )
    return url_replace(url, query=f"{url.query}&X-Amz-Signature={signature}")


def post_presign_v4(
        data: str,
        secret_key: str,
        date: datetime,
        region: str,
) -> str:
    """Sign base64 encoded POST policy."""
    return _get_signature(get_signing_key(secret_key, date, region), data)
