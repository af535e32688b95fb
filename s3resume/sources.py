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
Upload sources. Resuming a multipart upload needs to look at the bytes of
a part before deciding whether to send them or move past them; seekable
files and plain streams do this differently.
"""

from __future__ import annotations

from abc import ABCMeta, abstractmethod
from typing import BinaryIO, Optional

from .error import InsufficientDataError
from .hashing import file_range_md5_hex, md5_hex

_CHUNK_SIZE = 64 * 1024


def read_exactly(stream: BinaryIO, size: int) -> bytes:
    """Read size bytes from stream; fewer are returned only at EOF."""
    chunks = []
    remaining = size
    while remaining > 0:
        data = stream.read(remaining)
        if not data:
            break
        if not isinstance(data, bytes):
            raise ValueError("read() must return 'bytes' object")
        chunks.append(data)
        remaining -= len(data)
    return b"".join(chunks)


class UploadSource(metaclass=ABCMeta):
    """Forward-only reader of upload data."""

    @abstractmethod
    def md5_hex(self, size: int) -> str:
        """MD5 hex digest of the next size bytes without consuming them."""

    @abstractmethod
    def skip(self, size: int):
        """Move past the next size bytes."""

    @abstractmethod
    def read(self, size: int) -> bytes:
        """Read up to size bytes."""


class SeekableSource(UploadSource):
    """Source over a seekable file; skipping is a seek."""

    def __init__(self, fileobj: BinaryIO):
        self._file = fileobj

    def md5_hex(self, size: int) -> str:
        return file_range_md5_hex(self._file, size)[0]

    def skip(self, size: int):
        self._file.seek(size, 1)

    def read(self, size: int) -> bytes:
        return read_exactly(self._file, size)


class StreamSource(UploadSource):
    """
    Source over a non-seekable stream. Bytes read for hashing are kept
    until the next skip() or read(); skipping otherwise reads and drops
    data.
    """

    def __init__(self, stream: BinaryIO):
        self._stream = stream
        self._pending: Optional[bytes] = None

    def _take_pending(self, size: int) -> bytes:
        data = self._pending or b""
        self._pending = None
        if len(data) > size:
            self._pending = data[size:]
            data = data[:size]
        return data

    def md5_hex(self, size: int) -> str:
        data = self._take_pending(size)
        data += read_exactly(self._stream, size - len(data))
        self._pending = data + (self._pending or b"")
        return md5_hex(data)

    def skip(self, size: int):
        skipped = len(self._take_pending(size))
        while skipped < size:
            data = self._stream.read(min(size - skipped, _CHUNK_SIZE))
            if not data:
                raise InsufficientDataError(size, skipped)
            skipped += len(data)

    def read(self, size: int) -> bytes:
        data = self._take_pending(size)
        return data + read_exactly(self._stream, size - len(data))


def make_source(data: BinaryIO) -> UploadSource:
    """Pick seekable or stream source for given file-like object."""
    if not callable(getattr(data, "read", None)):
        raise ValueError("input data must have callable read()")
    seekable = getattr(data, "seekable", None)
    if callable(seekable) and seekable():
        return SeekableSource(data)
    return StreamSource(data)
