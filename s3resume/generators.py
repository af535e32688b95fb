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
s3resume.generators
~~~~~~~~~~~~~~~~~~~

Lazy iterators over paginated listings. Each item is a :class:`Result`
holding either a value or the error which ended the listing; a failed
page fetch is yielded once as an error result and ends the iteration.

    >>> for result in client.list_objects("my-bucket", recursive=True):
    ...     if result.error:
    ...         print("listing failed:", result.error)
    ...         break
    ...     print(result.value.object_name)

:copyright: (c) 2015-2025 by MinIO, Inc.
:license: Apache 2.0, see LICENSE for more details.

"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Generic, Iterator, Optional, TypeVar

from .datatypes import Object, Part, Upload
from .error import InvalidResponseError
from .helpers import MAX_PAGE_SIZE

if TYPE_CHECKING:
    from .api import S3Client

T = TypeVar("T")


class Result(Generic[T]):
    """Value or error of one listing item."""

    __slots__ = ("_value", "_error")

    def __init__(
            self,
            value: Optional[T] = None,
            error: Optional[Exception] = None,
    ):
        if (value is None) == (error is None):
            raise ValueError("exactly one of value or error must be set")
        self._value = value
        self._error = error

    @property
    def value(self) -> Optional[T]:
        """Get value; None for error result."""
        return self._value

    @property
    def error(self) -> Optional[Exception]:
        """Get error; None for value result."""
        return self._error

    def get(self) -> T:
        """Return value or raise the captured error."""
        if self._error is not None:
            raise self._error
        return self._value  # type: ignore[return-value]

    def __repr__(self):
        if self._error is not None:
            return f"Result(error={self._error!r})"
        return f"Result(value={self._value!r})"


def _stalled(api: str) -> InvalidResponseError:
    return InvalidResponseError(
        200, "application/xml",
        f"truncated {api} response without a usable continuation marker",
    )


def _check_page_size(max_keys: int):
    if not 0 < max_keys <= MAX_PAGE_SIZE:
        raise ValueError(
            f"page size {max_keys} must be between 1 and {MAX_PAGE_SIZE}",
        )


class PagedIterator(Generic[T]):
    """
    Base of paginated listings. Subclasses implement _fetch() returning
    items of next page and whether more pages exist, updating their own
    continuation markers.
    """

    def __init__(self):
        self._buffer: deque[T] = deque()
        self._is_truncated = True
        self._done = False

    def __iter__(self) -> Iterator[Result[T]]:
        return self

    def __next__(self) -> Result[T]:
        while not self._buffer:
            if self._done or not self._is_truncated:
                self._done = True
                raise StopIteration

            try:
                items, self._is_truncated = self._fetch()
            except Exception as exc:  # pylint: disable=broad-except
                self._done = True
                return Result(error=exc)

            if not items:
                self._done = True
            self._buffer.extend(items)

        return Result(self._buffer.popleft())

    def _fetch(self) -> tuple[list[T], bool]:
        raise NotImplementedError()


class ListObjectsIterator(PagedIterator[Object]):
    """
    Objects of a bucket. Without recursive, '/' is used as delimiter and
    common prefixes are yielded as directory objects after the objects of
    the same page.
    """

    def __init__(
            self,
            client: S3Client,
            bucket_name: str,
            prefix: Optional[str] = None,
            recursive: bool = False,
            max_keys: int = MAX_PAGE_SIZE,
    ):
        super().__init__()
        _check_page_size(max_keys)
        self._client = client
        self._bucket_name = bucket_name
        self._prefix = prefix
        self._delimiter = None if recursive else "/"
        self._max_keys = max_keys
        self._marker: Optional[str] = None

    def _fetch(self) -> tuple[list[Object], bool]:
        # pylint: disable=protected-access
        result = self._client._list_objects(
            self._bucket_name,
            delimiter=self._delimiter,
            marker=self._marker,
            max_keys=self._max_keys,
            prefix=self._prefix,
        )
        items = result.objects + result.prefixes
        if result.is_truncated:
            if self._delimiter and result.next_marker:
                self._marker = result.next_marker
            elif items:
                self._marker = max(item.object_name for item in items)
        return items, result.is_truncated


class ListIncompleteUploadsIterator(PagedIterator[Upload]):
    """Incomplete multipart uploads of a bucket."""

    def __init__(
            self,
            client: S3Client,
            bucket_name: str,
            prefix: Optional[str] = None,
            recursive: bool = False,
            max_uploads: int = MAX_PAGE_SIZE,
    ):
        super().__init__()
        _check_page_size(max_uploads)
        self._client = client
        self._bucket_name = bucket_name
        self._prefix = prefix
        self._delimiter = None if recursive else "/"
        self._max_uploads = max_uploads
        self._key_marker: Optional[str] = None
        self._upload_id_marker: Optional[str] = None

    def _fetch(self) -> tuple[list[Upload], bool]:
        # pylint: disable=protected-access
        result = self._client._list_multipart_uploads(
            self._bucket_name,
            delimiter=self._delimiter,
            key_marker=self._key_marker,
            upload_id_marker=self._upload_id_marker,
            max_uploads=self._max_uploads,
            prefix=self._prefix,
        )
        if result.is_truncated:
            marker = (result.next_key_marker, result.next_upload_id_marker)
            if not marker[0] and result.uploads:
                last = result.uploads[-1]
                marker = (last.object_name, last.upload_id)
            if not marker[0] or marker == (
                    self._key_marker, self._upload_id_marker,
            ):
                raise _stalled("ListMultipartUploads")
            self._key_marker, self._upload_id_marker = marker
        return result.uploads, result.is_truncated


class ListPartsIterator(PagedIterator[Part]):
    """Uploaded parts of a multipart upload in part number order."""

    def __init__(
            self,
            client: S3Client,
            bucket_name: str,
            object_name: str,
            upload_id: str,
            max_parts: int = MAX_PAGE_SIZE,
    ):
        super().__init__()
        _check_page_size(max_parts)
        self._client = client
        self._bucket_name = bucket_name
        self._object_name = object_name
        self._upload_id = upload_id
        self._max_parts = max_parts
        self._part_number_marker: Optional[int] = None

    def _fetch(self) -> tuple[list[Part], bool]:
        # pylint: disable=protected-access
        result = self._client._list_parts(
            self._bucket_name,
            self._object_name,
            self._upload_id,
            part_number_marker=self._part_number_marker,
            max_parts=self._max_parts,
        )
        if result.is_truncated:
            marker = result.next_part_number_marker
            if not marker and result.parts:
                marker = result.parts[-1].part_number
            if not marker or (
                    self._part_number_marker is not None
                    and marker <= self._part_number_marker
            ):
                raise _stalled("ListParts")
            self._part_number_marker = marker
        return result.parts, result.is_truncated
