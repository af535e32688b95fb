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
Data types of bucket, object, part and upload listings and of results
returned by object write APIs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Type, TypeVar, cast
from xml.etree import ElementTree as ET

from urllib3._collections import HTTPHeaderDict

from .region import normalize_location
from .time import from_http_header, from_iso8601utc
from .xml import find, findall, findtext


def _strip_etag(etag: Optional[str]) -> Optional[str]:
    return etag.replace('"', "") if etag is not None else None


def _to_int(value: Optional[str]) -> Optional[int]:
    return int(value) if value else None


def _to_bool(value: Optional[str]) -> bool:
    return (value or "").lower() == "true"


@dataclass(frozen=True)
class Bucket:
    """Bucket information."""
    name: str
    creation_date: Optional[datetime]


A = TypeVar("A", bound="ListAllMyBucketsResult")


@dataclass(frozen=True)
class ListAllMyBucketsResult:
    """ListBuckets API result."""
    buckets: list[Bucket]

    @classmethod
    def fromxml(cls: Type[A], element: ET.Element) -> A:
        """Create new object with values from XML element."""
        element = cast(ET.Element, find(element, "Buckets", True))
        return cls([
            Bucket(
                cast(str, findtext(tag, "Name", True)),
                from_iso8601utc(findtext(tag, "CreationDate")),
            )
            for tag in findall(element, "Bucket")
        ])


B = TypeVar("B", bound="Object")


@dataclass(frozen=True)
class Object:
    """
    Object information. Common prefixes of a delimited listing are
    represented as objects having only bucket and object name, with
    is_dir set.
    """
    bucket_name: str
    object_name: str
    last_modified: Optional[datetime] = None
    etag: Optional[str] = None
    size: Optional[int] = None
    content_type: Optional[str] = None
    storage_class: Optional[str] = None
    metadata: dict[str, str] = field(default_factory=dict)
    is_dir: bool = field(default=False, init=False)

    def __post_init__(self):
        object.__setattr__(self, "is_dir", self.object_name.endswith("/"))

    @classmethod
    def fromxml(cls: Type[B], element: ET.Element, bucket_name: str) -> B:
        """Create new object with values from <Contents> element."""
        return cls(
            bucket_name=bucket_name,
            object_name=cast(str, findtext(element, "Key", True)),
            last_modified=from_iso8601utc(findtext(element, "LastModified")),
            etag=_strip_etag(findtext(element, "ETag")),
            size=_to_int(findtext(element, "Size")),
            storage_class=findtext(element, "StorageClass"),
        )

    @classmethod
    def from_headers(
            cls: Type[B],
            headers: HTTPHeaderDict,
            bucket_name: str,
            object_name: str,
    ) -> B:
        """Create new object from HeadObject response headers."""
        last_modified = headers.get("last-modified")
        metadata = {
            key[len("x-amz-meta-"):]: value
            for key, value in headers.items()
            if key.lower().startswith("x-amz-meta-")
        }
        return cls(
            bucket_name=bucket_name,
            object_name=object_name,
            last_modified=(
                from_http_header(last_modified) if last_modified else None
            ),
            etag=_strip_etag(headers.get("etag")),
            size=_to_int(headers.get("content-length")),
            content_type=headers.get("content-type"),
            metadata=metadata,
        )


@dataclass(frozen=True)
class ListObjectsResult:
    """One page of ListObjects (version 1) API result."""
    objects: list[Object]
    prefixes: list[Object]
    is_truncated: bool
    next_marker: Optional[str]

    @classmethod
    def fromxml(cls, element: ET.Element) -> ListObjectsResult:
        """Create new object with values from XML element."""
        bucket_name = cast(str, findtext(element, "Name", True))
        return cls(
            objects=[
                Object.fromxml(tag, bucket_name)
                for tag in findall(element, "Contents")
            ],
            prefixes=[
                Object(bucket_name, cast(str, findtext(tag, "Prefix", True)))
                for tag in findall(element, "CommonPrefixes")
            ],
            is_truncated=_to_bool(findtext(element, "IsTruncated")),
            next_marker=findtext(element, "NextMarker"),
        )


C = TypeVar("C", bound="Part")


@dataclass(frozen=True)
class Part:
    """Part information of a multipart upload."""
    part_number: int
    etag: str
    last_modified: Optional[datetime] = None
    size: Optional[int] = None

    @classmethod
    def fromxml(cls: Type[C], element: ET.Element) -> C:
        """Create new object with values from XML element."""
        return cls(
            part_number=int(cast(str, findtext(element, "PartNumber", True))),
            etag=cast(str, _strip_etag(findtext(element, "ETag", True))),
            last_modified=from_iso8601utc(findtext(element, "LastModified")),
            size=_to_int(findtext(element, "Size")),
        )


@dataclass(frozen=True)
class ListPartsResult:
    """One page of ListParts API result."""
    parts: list[Part]
    is_truncated: bool
    next_part_number_marker: Optional[int]

    @classmethod
    def fromxml(cls, element: ET.Element) -> ListPartsResult:
        """Create new object with values from XML element."""
        return cls(
            parts=[Part.fromxml(tag) for tag in findall(element, "Part")],
            is_truncated=_to_bool(findtext(element, "IsTruncated")),
            next_part_number_marker=_to_int(
                findtext(element, "NextPartNumberMarker"),
            ),
        )


D = TypeVar("D", bound="Upload")


@dataclass(frozen=True)
class Upload:
    """Incomplete multipart upload information."""
    bucket_name: str
    object_name: str
    upload_id: str
    initiated_time: Optional[datetime] = None
    storage_class: Optional[str] = None

    @classmethod
    def fromxml(cls: Type[D], element: ET.Element, bucket_name: str) -> D:
        """Create new object with values from <Upload> element."""
        return cls(
            bucket_name=bucket_name,
            object_name=cast(str, findtext(element, "Key", True)),
            upload_id=cast(str, findtext(element, "UploadId", True)),
            initiated_time=from_iso8601utc(findtext(element, "Initiated")),
            storage_class=findtext(element, "StorageClass"),
        )


@dataclass(frozen=True)
class ListMultipartUploadsResult:
    """One page of ListMultipartUploads API result."""
    uploads: list[Upload]
    is_truncated: bool
    next_key_marker: Optional[str]
    next_upload_id_marker: Optional[str]

    @classmethod
    def fromxml(cls, element: ET.Element) -> ListMultipartUploadsResult:
        """Create new object with values from XML element."""
        bucket_name = findtext(element, "Bucket") or ""
        return cls(
            uploads=[
                Upload.fromxml(tag, bucket_name)
                for tag in findall(element, "Upload")
            ],
            is_truncated=_to_bool(findtext(element, "IsTruncated")),
            next_key_marker=findtext(element, "NextKeyMarker"),
            next_upload_id_marker=findtext(element, "NextUploadIdMarker"),
        )


@dataclass(frozen=True)
class CompleteMultipartUploadResult:
    """CompleteMultipartUpload API result."""
    bucket_name: Optional[str]
    object_name: Optional[str]
    location: Optional[str]
    etag: Optional[str]

    @classmethod
    def fromxml(cls, element: ET.Element) -> CompleteMultipartUploadResult:
        """Create new object with values from XML element."""
        return cls(
            bucket_name=findtext(element, "Bucket"),
            object_name=findtext(element, "Key"),
            location=findtext(element, "Location"),
            etag=_strip_etag(findtext(element, "ETag")),
        )


def parse_location_constraint(data: bytes) -> str:
    """Parse GetBucketLocation response into canonical region name."""
    element = ET.fromstring(data.decode())
    return normalize_location(element.text)


@dataclass(frozen=True)
class ObjectWriteResult:
    """Result of any API creating an object."""
    bucket_name: str
    object_name: str
    etag: Optional[str]
    version_id: Optional[str] = None
    location: Optional[str] = None
    http_headers: HTTPHeaderDict = field(default_factory=HTTPHeaderDict)

    @classmethod
    def new(
            cls,
            headers: HTTPHeaderDict,
            bucket_name: str,
            object_name: str,
            etag: Optional[str] = None,
            location: Optional[str] = None,
    ) -> ObjectWriteResult:
        """Create result from response headers; etag defaults to header."""
        return cls(
            bucket_name=bucket_name,
            object_name=object_name,
            etag=etag or _strip_etag(headers.get("etag")),
            version_id=headers.get("x-amz-version-id"),
            location=location,
            http_headers=headers,
        )
