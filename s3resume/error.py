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
s3resume.error
~~~~~~~~~~~~~~

Exceptions raised by s3resume. Every exception derives from
:class:`S3ResumeException`; argument validation failures are plain
:class:`ValueError` or :class:`TypeError`.

:copyright: (c) 2015-2025 by MinIO, Inc.
:license: Apache 2.0, see LICENSE for more details.

"""

from __future__ import annotations

from typing import Optional, Type, TypeVar
from xml.etree import ElementTree as ET

from urllib3.response import BaseHTTPResponse

from .xml import findtext


class S3ResumeException(Exception):
    """Base s3resume exception."""


class InvalidResponseError(S3ResumeException):
    """Raised to indicate that server response cannot be parsed."""

    def __init__(
            self, code: int, content_type: Optional[str], body: Optional[str],
    ):
        self._code = code
        self._content_type = content_type
        self._body = body
        super().__init__(
            f"invalid response from server; Response code: {code}, "
            f"Content-Type: {content_type}, Body: {body}"
        )

    def __reduce__(self):
        return type(self), (self._code, self._content_type, self._body)


class ServerError(S3ResumeException):
    """
    Raised when server fails with an HTTP status code which has no error
    body and no known meaning.
    """

    def __init__(self, message: str, status_code: int):
        self._status_code = status_code
        super().__init__(message)

    @property
    def status_code(self) -> int:
        """Get HTTP status code."""
        return self._status_code

    def __reduce__(self):
        return type(self), (str(self), self._status_code)


class NoResponseError(S3ResumeException):
    """Raised when a request got no HTTP response at all."""

    def __init__(self, method: str, url: str, reason: str):
        self._method = method
        self._url = url
        self._reason = reason
        super().__init__(f"no response for {method} {url}; {reason}")

    @property
    def method(self) -> str:
        """Get HTTP method of failed request."""
        return self._method

    @property
    def url(self) -> str:
        """Get URL of failed request."""
        return self._url

    def __reduce__(self):
        return type(self), (self._method, self._url, self._reason)


class _SizeError(S3ResumeException):
    """Carrier of expected and actual byte counts."""

    _what = ""

    def __init__(self, expected: int, got: int):
        self._expected = expected
        self._got = got
        super().__init__(
            f"{self._what}; expected: {expected} bytes, got: {got} bytes",
        )

    @property
    def expected(self) -> int:
        """Get expected byte count."""
        return self._expected

    @property
    def got(self) -> int:
        """Get actual byte count."""
        return self._got

    def __reduce__(self):
        return type(self), (self._expected, self._got)


class InsufficientDataError(_SizeError):
    """Raised when skipping over stream data reaches EOF early."""

    _what = "stream ended while skipping already uploaded data"


class InputSizeMismatchError(_SizeError):
    """
    Raised when a source produces fewer bytes than declared, or a download
    receives a different number of bytes than requested.
    """

    _what = "data size mismatch"


A = TypeVar("A", bound="S3Error")


class S3Error(S3ResumeException):
    """
    Raised to indicate that error response is received
    when executing S3 operation.
    """
    response: Optional[BaseHTTPResponse]
    code: Optional[str]
    message: Optional[str]
    resource: Optional[str]
    request_id: Optional[str]
    host_id: Optional[str]
    bucket_name: Optional[str]
    object_name: Optional[str]

    _EXC_MUTABLES = {"__traceback__", "__context__", "__cause__"}

    def __init__(  # pylint: disable=too-many-positional-arguments
        self,
        response: Optional[BaseHTTPResponse],
        code: Optional[str],
        message: Optional[str],
        resource: Optional[str],
        request_id: Optional[str],
        host_id: Optional[str],
        bucket_name: Optional[str] = None,
        object_name: Optional[str] = None,
    ):
        for name, value in (
                ("response", response),
                ("code", code),
                ("message", message),
                ("resource", resource),
                ("request_id", request_id),
                ("host_id", host_id),
                ("bucket_name", bucket_name),
                ("object_name", object_name),
        ):
            object.__setattr__(self, name, value)

        bucket_message = f", bucket_name: {bucket_name}" if bucket_name else ""
        object_message = f", object_name: {object_name}" if object_name else ""
        super().__init__(
            f"S3 operation failed; code: {code}, message: {message}, "
            f"resource: {resource}, request_id: {request_id}, "
            f"host_id: {host_id}{bucket_message}{object_message}"
        )

        object.__setattr__(self, "_is_frozen", True)

    def __setattr__(self, name, value):
        if name not in self._EXC_MUTABLES and getattr(
                self, "_is_frozen", False,
        ):
            raise AttributeError(
                f"{self.__class__.__name__} is frozen and "
                "does not allow attribute assignment"
            )
        object.__setattr__(self, name, value)

    def __delattr__(self, name):
        if name not in self._EXC_MUTABLES and getattr(
                self, "_is_frozen", False,
        ):
            raise AttributeError(
                f"{self.__class__.__name__} is frozen and "
                "does not allow attribute deletion"
            )
        object.__delattr__(self, name)

    def __reduce__(self):
        return type(self), (
            None, self.code, self.message, self.resource, self.request_id,
            self.host_id, self.bucket_name, self.object_name,
        )

    @classmethod
    def fromxml(
            cls: Type[A],
            response: BaseHTTPResponse,
            bucket_name: Optional[str] = None,
            object_name: Optional[str] = None,
    ) -> A:
        """
        Create error from XML error body of response. Bucket and object
        names missing in the body are taken from request context.
        """
        element = ET.fromstring(response.data.decode())
        return cls(
            response=response,
            code=findtext(element, "Code"),
            message=findtext(element, "Message"),
            resource=findtext(element, "Resource"),
            request_id=findtext(element, "RequestId"),
            host_id=findtext(element, "HostId"),
            bucket_name=findtext(element, "BucketName") or bucket_name,
            object_name=findtext(element, "Key") or object_name,
        )

    def __repr__(self):
        return (
            f"S3Error(code={self.code!r}, message={self.message!r}, "
            f"resource={self.resource!r}, request_id={self.request_id!r}, "
            f"host_id={self.host_id!r}, bucket_name={self.bucket_name!r}, "
            f"object_name={self.object_name!r})"
        )

    def __eq__(self, other):
        if not isinstance(other, S3Error):
            return NotImplemented
        return (
            self.code, self.message, self.resource, self.request_id,
            self.host_id, self.bucket_name, self.object_name,
        ) == (
            other.code, other.message, other.resource, other.request_id,
            other.host_id, other.bucket_name, other.object_name,
        )

    __hash__ = Exception.__hash__
