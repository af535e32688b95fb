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

"""Digest helpers over buffers, seekable file ranges and bounded streams."""

from __future__ import annotations

import base64
import hashlib
from typing import BinaryIO

# SHA-256 hash of zero length byte array.
ZERO_SHA256_HASH = (
    "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
)
# MD5 hash of zero length byte array.
ZERO_MD5_HASH = "1B2M2Y8AsgTpgAmY7PhCfg=="
UNSIGNED_PAYLOAD = "UNSIGNED-PAYLOAD"

_CHUNK_SIZE = 64 * 1024


def new_md5():
    """MD5 hasher, not used in a security context."""
    return hashlib.new("md5", usedforsecurity=False)


def _as_bytes(data: str | bytes | None) -> bytes:
    if data is None:
        return b""
    return data.encode() if isinstance(data, str) else data


def sha256_hash(data: str | bytes | None) -> str:
    """Compute SHA-256 of data and return hash as hex encoded value."""
    return hashlib.sha256(_as_bytes(data)).hexdigest()


def md5sum_hash(data: str | bytes | None) -> str:
    """Compute MD5 of data and return hash as Base64 encoded value."""
    hasher = new_md5()
    hasher.update(_as_bytes(data))
    return base64.b64encode(hasher.digest()).decode("ascii")


def md5_hex(data: str | bytes | None) -> str:
    """Compute MD5 of data and return hash as hex encoded value."""
    hasher = new_md5()
    hasher.update(_as_bytes(data))
    return hasher.hexdigest()


def hash_stream(stream: BinaryIO, size: int, *hashers) -> int:
    """
    Read at most size bytes from stream into every hasher and return the
    number of bytes actually read. Reading stops early at EOF.
    """
    remaining = size
    while remaining > 0:
        data = stream.read(min(remaining, _CHUNK_SIZE))
        if not data:
            break
        for hasher in hashers:
            hasher.update(data)
        remaining -= len(data)
    return size - remaining


def file_range_md5_hex(fileobj: BinaryIO, size: int) -> tuple[str, int]:
    """
    MD5 hex of the next size bytes of a seekable file, leaving the file
    position unchanged. Returns the digest and the number of bytes hashed.
    """
    position = fileobj.tell()
    hasher = new_md5()
    try:
        count = hash_stream(fileobj, size, hasher)
    finally:
        fileobj.seek(position)
    return hasher.hexdigest(), count
