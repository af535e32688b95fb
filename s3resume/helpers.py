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

"""Helper functions."""

from __future__ import annotations

import os
import platform
import re
import urllib.parse
from typing import Dict, List, Mapping, Optional, Tuple, Union

from . import __title__, __version__

_DEFAULT_USER_AGENT = (
    f"s3resume ({platform.system()}; {platform.machine()}) "
    f"{__title__}/{__version__}"
)

MAX_MULTIPART_COUNT = 10000  # 10000 parts
MAX_MULTIPART_OBJECT_SIZE = 5 * 1024 * 1024 * 1024 * 1024  # 5TiB
MIN_PART_SIZE = 5 * 1024 * 1024  # 5MiB
MAX_PAGE_SIZE = 1000

_BUCKET_NAME_REGEX = re.compile(r'^[a-z0-9][a-z0-9_\.\-\:]{1,61}[a-z0-9]$',
                                re.IGNORECASE)
_IPV4_REGEX = re.compile(
    r'^((25[0-5]|2[0-4][0-9]|1[0-9][0-9]|[1-9][0-9]|[0-9])\.){3}'
    r'(25[0-5]|2[0-4][0-9]|1[0-9][0-9]|[1-9][0-9]|[0-9])$')
_AWS_HOST_REGEX = re.compile(r'^(.+\.)?amazonaws\.com(\.cn)?$', re.IGNORECASE)
_AWS_REGION_HOST_REGEX = re.compile(
    r'^s3[.-](?:dualstack\.)?([a-z]{2}(?:-gov)?-[a-z]+-\d)\.amazonaws\.com'
    r'(\.cn)?$',
    re.IGNORECASE,
)
_AWS_GLOBAL_HOSTS = ("s3.amazonaws.com", "s3-external-1.amazonaws.com")
_REGION_REGEX = re.compile(r'^((?!_)(?!-)[a-z_\d-]{1,63}(?<!-)(?<!_))$',
                           re.IGNORECASE)

QueryType = Mapping[str, Union[str, List[str], Tuple[str, ...]]]
DictType = Dict[str, Union[str, List[str], Tuple[str, ...]]]


def quote(resource: str, safe: str = "/") -> str:
    """URI encode resource keeping '~' unescaped as SigV4 requires."""
    return urllib.parse.quote(resource, safe=safe).replace("%7E", "~")


def queryencode(query: str) -> str:
    """Encode query parameter name or value."""
    return quote(query, safe="")


def headers_to_strings(
        headers: Mapping[str, str | list[str] | tuple[str, ...]],
        titled_key: bool = False,
) -> str:
    """
    Convert HTTP headers to multi-line string. Request headers (titled
    keys) have credential and signature values redacted.
    """
    lines = []
    for key, values in headers.items():
        key = key.title() if titled_key else key
        if not isinstance(values, (list, tuple)):
            values = [values]
        for value in values:
            value = str(value)
            if titled_key:
                value = re.sub(r"Signature=([0-9a-f]+)",
                               "Signature=*REDACTED*", value)
                value = re.sub(r"Credential=([^/]+)",
                               "Credential=*REDACTED*", value)
            lines.append(f"{key}: {value}")
    return "\n".join(lines)


def _ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


def get_part_info(object_size: int) -> tuple[int, int, int]:
    """
    Compute part size, part count and last part size for an upload of
    object_size bytes. Part size is the smallest multiple of 5MiB which
    keeps part count within 10000.
    """
    if object_size < 0:
        raise ValueError(f"object size {object_size} must not be negative")
    if object_size > MAX_MULTIPART_OBJECT_SIZE:
        raise ValueError(
            f"object size {object_size} is not supported; "
            f"maximum allowed 5TiB"
        )
    if object_size == 0:
        return 0, 1, 0

    part_size = _ceil_div(
        _ceil_div(object_size, MAX_MULTIPART_COUNT), MIN_PART_SIZE,
    ) * MIN_PART_SIZE
    part_count = _ceil_div(object_size, part_size)
    last_part_size = object_size - (part_count - 1) * part_size
    return part_size, part_count, last_part_size


def makedirs(path: str):
    """Create directory tree; an existing non-directory raises ValueError."""
    if not path:
        return
    try:
        os.makedirs(path, exist_ok=True)
    except FileExistsError as exc:
        raise ValueError(f"path {path} is not a directory") from exc


def check_non_empty_string(string: str | bytes):
    """Check whether given string is not empty."""
    try:
        if not string.strip():
            raise ValueError()
    except AttributeError as exc:
        raise TypeError() from exc


def check_bucket_name(bucket_name: str):
    """Check whether bucket name is valid."""
    check_non_empty_string(bucket_name)

    if not _BUCKET_NAME_REGEX.match(bucket_name):
        raise ValueError(f'invalid bucket name {bucket_name}')

    if _IPV4_REGEX.match(bucket_name):
        raise ValueError(f'bucket name {bucket_name} must not be formatted '
                         'as an IP address')

    if any(x in bucket_name for x in ('..', '.-', '-.')):
        raise ValueError(f'bucket name {bucket_name} contains invalid '
                         'successive characters')


def check_object_name(object_name: str):
    """Check whether object name is a non-empty string."""
    check_non_empty_string(object_name)


def url_replace(
        url: urllib.parse.SplitResult,
        scheme: Optional[str] = None,
        netloc: Optional[str] = None,
        path: Optional[str] = None,
        query: Optional[str] = None,
) -> urllib.parse.SplitResult:
    """Return new URL with replaced properties in given URL."""
    return urllib.parse.SplitResult(
        scheme if scheme is not None else url.scheme,
        netloc if netloc is not None else url.netloc,
        path if path is not None else url.path,
        query if query is not None else url.query,
        url.fragment,
    )


def encode_query(query_params: Optional[QueryType]) -> str:
    """Encode query parameters sorted by name, then by value."""
    query = []
    for key, values in sorted((query_params or {}).items()):
        if not isinstance(values, (list, tuple)):
            values = [values]
        query += [
            f"{queryencode(key)}={queryencode(value)}"
            for value in sorted(values)
        ]
    return "&".join(query)


class BaseURL:
    """
    Base URL of S3 endpoint. Amazon S3 hosts use virtual host style
    addressing, any other host uses path style.
    """

    def __init__(self, endpoint: str, secure: bool, region: Optional[str]):
        url = urllib.parse.urlsplit(
            ("https://" if secure else "http://") + endpoint,
        )
        if url.path or url.query or url.fragment or url.username:
            raise ValueError(f"endpoint {endpoint} must be host[:port]")
        try:
            port = url.port
        except ValueError as exc:
            raise ValueError("invalid port") from exc
        if region and not _REGION_REGEX.match(region):
            raise ValueError(f"invalid region {region}")

        host = (url.hostname or "").lower()
        if not host:
            raise ValueError(f"endpoint {endpoint} has no host")
        if (secure and port == 443) or (not secure and port == 80):
            url = url_replace(url, netloc=host)
        self._url = url
        self._host = host
        self._is_aws = bool(_AWS_HOST_REGEX.match(host))

        if not region and self._is_aws:
            match = _AWS_REGION_HOST_REGEX.match(host)
            if match:
                region = match.group(1).lower()
        self._region = region

    @property
    def region(self) -> Optional[str]:
        """Get region fixed by constructor or endpoint host."""
        return self._region

    @property
    def is_https(self) -> bool:
        """Check if scheme is HTTPS."""
        return self._url.scheme == "https"

    @property
    def host(self) -> str:
        """Get host with port if any."""
        return self._url.netloc

    @property
    def is_aws_host(self) -> bool:
        """Check if URL points to Amazon S3."""
        return self._is_aws

    @property
    def is_aws_global_host(self) -> bool:
        """Check if URL points to Amazon S3 global endpoint."""
        return self._host in _AWS_GLOBAL_HOSTS

    def _aws_netloc(self, region: str) -> str:
        suffix = ".cn" if self._host.endswith(".cn") else ""
        return f"s3.{region}.amazonaws.com{suffix}"

    def build(
            self,
            method: str,
            region: str,
            bucket_name: Optional[str] = None,
            object_name: Optional[str] = None,
            query_params: Optional[QueryType] = None,
    ) -> urllib.parse.SplitResult:
        """Build URL for given information."""
        if not bucket_name and object_name:
            raise ValueError(
                f"empty bucket name for object name {object_name}",
            )

        url = url_replace(
            self._url, path="/", query=encode_query(query_params),
        )
        if self._is_aws:
            url = url_replace(url, netloc=self._aws_netloc(region))

        if not bucket_name:
            return url

        enforce_path_style = (
            # CreateBucket API requires path style in Amazon AWS S3.
            (method == "PUT" and not object_name and not query_params) or

            # GetBucketLocation API requires path style in Amazon AWS S3.
            bool(query_params and "location" in query_params) or

            # Use path style for bucket name containing '.' which causes
            # SSL certificate validation error.
            ("." in bucket_name and self.is_https)
        )

        netloc = url.netloc
        if enforce_path_style or not self._is_aws:
            path = f"/{bucket_name}"
        else:
            netloc = f"{bucket_name}.{netloc}"
            path = ""
        if object_name:
            path += "/" + quote(object_name)

        return url_replace(url, netloc=netloc, path=path or "/")
