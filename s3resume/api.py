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

# pylint: disable=too-many-arguments
# pylint: disable=too-many-lines
# pylint: disable=too-many-public-methods
# pylint: disable=too-many-locals

"""
Simple Storage Service (aka S3) client with resumable object transfers.
"""

from __future__ import annotations

import os
from datetime import datetime, timedelta, timezone
from typing import BinaryIO, Iterator, Optional, TextIO, Type, TypeVar, cast
from urllib.parse import urlunsplit
from xml.etree import ElementTree as ET

import certifi
import urllib3
from urllib3 import Retry
from urllib3._collections import HTTPHeaderDict
from urllib3.response import BaseHTTPResponse
from urllib3.util import Timeout

from . import time
from .credentials import Provider, StaticProvider
from .datatypes import (Bucket, CompleteMultipartUploadResult,
                        ListAllMyBucketsResult, ListMultipartUploadsResult,
                        ListObjectsResult, ListPartsResult, Object,
                        ObjectWriteResult, Part, parse_location_constraint)
from .error import (InputSizeMismatchError, InvalidResponseError,
                    NoResponseError, S3Error, ServerError)
from .generators import (ListIncompleteUploadsIterator, ListObjectsIterator,
                         ListPartsIterator)
from .hashing import ZERO_SHA256_HASH, md5sum_hash, sha256_hash
from .helpers import (_DEFAULT_USER_AGENT, MAX_PAGE_SIZE, MIN_PART_SIZE,
                      BaseURL, QueryType, check_bucket_name, check_object_name,
                      get_part_info, headers_to_strings, makedirs)
from .post_policy import PostPolicy
from .region import DEFAULT_REGION, RegionCache
from .signer import presign_v4, sign_v4_s3
from .sources import SeekableSource, UploadSource, make_source
from .xml import Element, SubElement, findtext, getbytes, unmarshal

_MAX_EXPIRY = timedelta(days=7)
_DOWNLOAD_CHUNK_SIZE = 1024 * 1024
_PART_FILE_SUFFIX = "part.s3resume"

X = TypeVar("X")


def _metadata_headers(metadata: Optional[dict[str, str]]) -> HTTPHeaderDict:
    """User metadata as x-amz-meta-* headers."""
    headers = HTTPHeaderDict()
    for key, value in (metadata or {}).items():
        if not key.lower().startswith("x-amz-meta-"):
            key = "x-amz-meta-" + key
        headers[key] = value
    return headers


class S3Client:
    """
    Simple Storage Service (aka S3) client to perform bucket and object
    operations. Uploads and downloads of large objects resume from where
    an earlier interrupted call stopped.
    """
    _region_cache: RegionCache
    _base_url: BaseURL
    _user_agent: str
    _trace_stream: Optional[TextIO]
    _provider: Optional[Provider]
    _http: urllib3.PoolManager

    def __init__(
            self,
            endpoint: str,
            access_key: Optional[str] = None,
            secret_key: Optional[str] = None,
            session_token: Optional[str] = None,
            secure: bool = True,
            region: Optional[str] = None,
            http_client: Optional[urllib3.PoolManager] = None,
            credentials: Optional[Provider] = None,
            cert_check: bool = True,
    ):
        """
        Initializes a new client object.

        Args:
            endpoint (str):
                Hostname of an S3 service with optional port.

            access_key (Optional[str], default=None):
                Access key (aka user ID) of your account in the S3 service.

            secret_key (Optional[str], default=None):
                Secret key (aka password) of your account in the S3 service.

            session_token (Optional[str], default=None):
                Session token of your account in the S3 service.

            secure (bool, default=True):
                Flag to indicate whether to use a secure (TLS) connection
                to the S3 service.

            region (Optional[str], default=None):
                Region name of buckets in the S3 service. When set, bucket
                region lookup is never performed.

            http_client (Optional[urllib3.PoolManager], default=None):
                Customized HTTP client.

            credentials (Optional[Provider], default=None):
                Credentials provider of your account in the S3 service.

            cert_check (bool, default=True):
                Flag to enable/disable server certificate validation
                for HTTPS connections.

        Notes:
            The client performs no retries; the default HTTP client is
            created with retries disabled and redirects not followed.

        Example:
            >>> from s3resume import S3Client
            >>>
            >>> # Create client with anonymous access
            >>> client = S3Client(endpoint="play.min.io")
            >>>
            >>> # Create client with access and secret key
            >>> client = S3Client(
            ...     endpoint="s3.amazonaws.com",
            ...     access_key="ACCESS-KEY",
            ...     secret_key="SECRET-KEY",
            ... )
            >>>
            >>> # Create client with credentials from environment
            >>> from s3resume.credentials import (ChainedProvider,
            ...                                   EnvAWSProvider,
            ...                                   EnvMinioProvider)
            >>> client = S3Client(
            ...     endpoint="localhost:9000",
            ...     secure=False,
            ...     credentials=ChainedProvider(
            ...         [EnvAWSProvider(), EnvMinioProvider()],
            ...     ),
            ... )
        """
        # Validate http client has correct base class.
        if http_client and not isinstance(http_client, urllib3.PoolManager):
            raise TypeError(
                "HTTP client should be urllib3.PoolManager like object, "
                f"got {type(http_client).__name__}",
            )

        self._region_cache = RegionCache()
        self._base_url = BaseURL(endpoint, secure, region)
        self._user_agent = _DEFAULT_USER_AGENT
        self._trace_stream = None
        if access_key:
            if secret_key is None:
                raise ValueError("secret key must be provided with access key")
            credentials = StaticProvider(access_key, secret_key, session_token)
        self._provider = credentials

        # Load CA certificates from SSL_CERT_FILE file if set
        timeout = timedelta(minutes=5).seconds
        self._http = http_client or urllib3.PoolManager(
            timeout=Timeout(connect=timeout, read=timeout),
            maxsize=10,
            cert_reqs='CERT_REQUIRED' if cert_check else 'CERT_NONE',
            ca_certs=os.environ.get('SSL_CERT_FILE') or certifi.where(),
            retries=Retry(total=0, redirect=False),
        )

    def __del__(self):
        if hasattr(self, "_http"):  # Only required for unit test run
            self._http.clear()

    def _trace(self, *lines: str):
        if self._trace_stream:
            for line in lines:
                self._trace_stream.write(line)
                self._trace_stream.write("\n")

    def _url_open(
            self,
            method: str,
            region: str,
            bucket_name: Optional[str] = None,
            object_name: Optional[str] = None,
            body: Optional[bytes] = None,
            headers: Optional[HTTPHeaderDict] = None,
            query_params: Optional[QueryType] = None,
            preload_content: bool = True,
            no_body_trace: bool = False,
    ) -> BaseHTTPResponse:
        """Build, sign and send HTTP request; classify its response."""
        url = self._base_url.build(
            method=method,
            region=region,
            bucket_name=bucket_name,
            object_name=object_name,
            query_params=query_params,
        )

        headers = headers.copy() if headers else HTTPHeaderDict()
        headers["Host"] = url.netloc
        headers["User-Agent"] = self._user_agent
        if method in ["PUT", "POST"]:
            headers["Content-Length"] = str(len(body or b""))
            if not headers.get("Content-Type"):
                headers["Content-Type"] = "application/octet-stream"
        date = time.utcnow()
        headers["x-amz-date"] = time.to_amz_date(date)

        if self._provider is not None:
            creds = self._provider.retrieve()
            content_sha256 = (
                ZERO_SHA256_HASH if body is None else sha256_hash(body)
            )
            headers["x-amz-content-sha256"] = content_sha256
            if creds.session_token:
                headers["X-Amz-Security-Token"] = creds.session_token
            sign_v4_s3(
                method=method,
                url=url,
                region=region,
                headers=headers,
                credentials=creds,
                content_sha256=content_sha256,
                date=date,
            )

        if self._trace_stream:
            query = ("?" + url.query) if url.query else ""
            self._trace(
                "---------START-HTTP---------",
                f"{method} {url.path}{query} HTTP/1.1",
                headers_to_strings(headers, titled_key=True),
            )
            if not no_body_trace and body is not None:
                self._trace("", body.decode(errors="replace"))
            self._trace("")

        try:
            response = self._http.urlopen(
                method,
                urlunsplit(url),
                body=body,
                headers=headers,
                preload_content=preload_content,
            )
        except urllib3.exceptions.HTTPError as exc:
            self._trace("----------END-HTTP----------")
            raise NoResponseError(method, urlunsplit(url), str(exc)) from exc

        self._trace(
            f"HTTP/1.1 {response.status}",
            headers_to_strings(response.headers),
        )

        if 200 <= response.status < 300:
            if preload_content and response.data:
                self._trace("", response.data.decode(errors="replace"))
            self._trace("----------END-HTTP----------")
            return response

        response.read(cache_content=True)
        if not preload_content:
            response.release_conn()

        if method != "HEAD" and response.data:
            self._trace(response.data.decode(errors="replace"))
        self._trace("----------END-HTTP----------")

        response_error = None
        if method != "HEAD" and response.data:
            try:
                response_error = S3Error.fromxml(
                    response, bucket_name, object_name,
                )
            except (ET.ParseError, ValueError):
                response_error = None
            if response_error is not None and not response_error.code:
                response_error = None

        if response_error is None:
            code, message = self._classify_status(
                response.status, bucket_name, object_name,
            )
            if not code:
                raise ServerError(
                    f"server failed with HTTP status code {response.status}",
                    response.status,
                )
            response_error = S3Error(
                response=response,
                code=code,
                message=message,
                resource=url.path,
                request_id=response.headers.get("x-amz-request-id"),
                host_id=response.headers.get("x-amz-id-2"),
                bucket_name=bucket_name,
                object_name=object_name,
            )

        if response_error.code == "NoSuchBucket" and bucket_name:
            self._region_cache.remove(bucket_name)

        raise response_error

    @staticmethod
    def _classify_status(
            status: int,
            bucket_name: Optional[str],
            object_name: Optional[str],
    ) -> tuple[Optional[str], Optional[str]]:
        """Error code and message of a failure response without body."""
        if status == 404:
            if object_name:
                return "NoSuchKey", "Object does not exist"
            if bucket_name:
                return "NoSuchBucket", "Bucket does not exist"
            return "ResourceNotFound", "Request resource not found"
        if status in (405, 501):
            return (
                "MethodNotAllowed",
                "The specified method is not allowed against this resource",
            )
        if status == 409:
            if bucket_name:
                return "NoSuchBucket", "Bucket does not exist"
            return "ResourceConflict", "Request resource conflicts"
        if status == 403:
            return "AccessDenied", "Access denied"
        return None, None

    def _execute(
            self,
            method: str,
            bucket_name: Optional[str] = None,
            object_name: Optional[str] = None,
            body: Optional[bytes] = None,
            headers: Optional[HTTPHeaderDict] = None,
            query_params: Optional[QueryType] = None,
            preload_content: bool = True,
            no_body_trace: bool = False,
            region: Optional[str] = None,
    ) -> BaseHTTPResponse:
        """Execute HTTP request in region of the bucket."""
        region = self._get_region(bucket_name=bucket_name, region=region)
        return self._url_open(
            method=method,
            region=region,
            bucket_name=bucket_name,
            object_name=object_name,
            body=body,
            headers=headers,
            query_params=query_params,
            preload_content=preload_content,
            no_body_trace=no_body_trace,
        )

    def _get_region(
            self,
            bucket_name: Optional[str] = None,
            region: Optional[str] = None,
    ) -> str:
        """
        Return region of given bucket. Region fixed by constructor wins;
        bucket region is looked up and cached only for authenticated
        requests to Amazon S3 global endpoint.
        """
        if (
                region is not None and self._base_url.region is not None and
                region != self._base_url.region
        ):
            raise ValueError(
                f"region must be {self._base_url.region}, but passed {region}",
            )

        if region is not None:
            return region

        if self._base_url.region is not None:
            return self._base_url.region

        if (
                not bucket_name or not self._provider or
                not self._base_url.is_aws_global_host
        ):
            return DEFAULT_REGION

        region = self._region_cache.get(bucket_name)
        if region:
            return region

        # Execute GetBucketLocation REST API to get region of the bucket.
        response = self._url_open(
            method="GET",
            region=DEFAULT_REGION,
            bucket_name=bucket_name,
            query_params={"location": ""},
        )
        try:
            region = parse_location_constraint(response.data)
        except ET.ParseError as exc:
            raise InvalidResponseError(
                response.status,
                response.headers.get("content-type"),
                response.data.decode(errors="replace"),
            ) from exc

        self._region_cache.set(bucket_name, region)
        return region

    @staticmethod
    def _unmarshal(
            result_type: Type[X], response: BaseHTTPResponse,
    ) -> X:
        """Parse XML body of successful response into cls."""
        try:
            return unmarshal(result_type, response.data)
        except (ET.ParseError, ValueError) as exc:
            raise InvalidResponseError(
                response.status,
                response.headers.get("content-type"),
                response.data.decode(errors="replace"),
            ) from exc

    def set_app_info(self, app_name: str, app_version: str):
        """
        Set your application name and version to user agent header.

        Args:
            app_name (str):
                Application name.

            app_version (str):
                Application version.

        Example:
            >>> client.set_app_info("my_app", "1.0.2")
        """
        if not (app_name and app_version):
            raise ValueError("Application name/version cannot be empty.")
        self._user_agent = f"{_DEFAULT_USER_AGENT} {app_name}/{app_version}"

    def trace_on(self, stream: TextIO):
        """
        Enable http trace.

        Args:
            stream (TextIO):
                Stream for writing HTTP call tracing.

        Example:
            >>> client.trace_on(sys.stdout)
        """
        if not stream:
            raise ValueError('Input stream for trace output is invalid.')
        self._trace_stream = stream

    def trace_off(self):
        """Disable HTTP trace."""
        self._trace_stream = None

    def make_bucket(self, bucket_name: str, location: Optional[str] = None):
        """
        Create a bucket with region.

        Args:
            bucket_name (str):
                Name of the bucket.

            location (Optional[str], default=None):
                Region in which the bucket will be created.

        Example:
            >>> client.make_bucket("my-bucket")
            >>> client.make_bucket("my-bucket", "eu-west-2")
        """
        check_bucket_name(bucket_name)
        if self._base_url.region:
            # Error out if region does not match with region passed via
            # constructor.
            if location and self._base_url.region != location:
                raise ValueError(
                    f"region must be {self._base_url.region}, "
                    f"but passed {location}"
                )
        location = self._base_url.region or location or DEFAULT_REGION
        body = None
        if location != DEFAULT_REGION:
            element = Element("CreateBucketConfiguration")
            SubElement(element, "LocationConstraint", location)
            body = getbytes(element)
        self._url_open("PUT", location, bucket_name=bucket_name, body=body)
        self._region_cache.set(bucket_name, location)

    def list_buckets(self) -> list[Bucket]:
        """
        List information of all accessible buckets.

        Returns:
            list[Bucket]:
                List of bucket information.

        Example:
            >>> for bucket in client.list_buckets():
            ...     print(bucket.name, bucket.creation_date)
        """
        response = self._execute("GET")
        return self._unmarshal(ListAllMyBucketsResult, response).buckets

    def bucket_exists(self, bucket_name: str) -> bool:
        """
        Check if a bucket exists.

        Example:
            >>> if client.bucket_exists("my-bucket"):
            ...     print("my-bucket exists")
        """
        check_bucket_name(bucket_name)
        try:
            self._execute("HEAD", bucket_name)
            return True
        except S3Error as exc:
            if exc.code != "NoSuchBucket":
                raise
        return False

    def remove_bucket(self, bucket_name: str):
        """
        Remove an empty bucket.

        Example:
            >>> client.remove_bucket("my-bucket")
        """
        check_bucket_name(bucket_name)
        self._execute("DELETE", bucket_name)
        self._region_cache.remove(bucket_name)

    def _put_object(
            self,
            bucket_name: str,
            object_name: str,
            data: bytes,
            headers: Optional[HTTPHeaderDict] = None,
            query_params: Optional[QueryType] = None,
    ) -> ObjectWriteResult:
        """Execute PutObject S3 API."""
        response = self._execute(
            method="PUT",
            bucket_name=bucket_name,
            object_name=object_name,
            body=data,
            headers=headers,
            query_params=query_params,
            no_body_trace=True,
        )
        return ObjectWriteResult.new(
            headers=response.headers,
            bucket_name=bucket_name,
            object_name=object_name,
        )

    def _create_multipart_upload(
            self,
            bucket_name: str,
            object_name: str,
            headers: HTTPHeaderDict,
    ) -> str:
        """Execute CreateMultipartUpload S3 API."""
        response = self._execute(
            method="POST",
            bucket_name=bucket_name,
            object_name=object_name,
            headers=headers,
            query_params={"uploads": ""},
        )
        try:
            element = ET.fromstring(response.data.decode())
            return cast(str, findtext(element, "UploadId", True))
        except (ET.ParseError, ValueError) as exc:
            raise InvalidResponseError(
                response.status,
                response.headers.get("content-type"),
                response.data.decode(errors="replace"),
            ) from exc

    def _upload_part(
            self,
            bucket_name: str,
            object_name: str,
            data: bytes,
            upload_id: str,
            part_number: int,
    ) -> str:
        """Execute UploadPart S3 API and return ETag of the part."""
        result = self._put_object(
            bucket_name=bucket_name,
            object_name=object_name,
            data=data,
            headers=HTTPHeaderDict({"Content-MD5": md5sum_hash(data)}),
            query_params={
                "partNumber": str(part_number),
                "uploadId": upload_id,
            },
        )
        return result.etag or ""

    def _complete_multipart_upload(
            self,
            bucket_name: str,
            object_name: str,
            upload_id: str,
            parts: list[Part],
    ) -> ObjectWriteResult:
        """Execute CompleteMultipartUpload S3 API."""
        element = Element("CompleteMultipartUpload")
        for part in parts:
            tag = SubElement(element, "Part")
            SubElement(tag, "PartNumber", str(part.part_number))
            SubElement(tag, "ETag", '"' + part.etag + '"')
        body = getbytes(element)
        response = self._execute(
            method="POST",
            bucket_name=bucket_name,
            object_name=object_name,
            body=body,
            headers=HTTPHeaderDict({
                "Content-Type": "application/xml",
                "Content-MD5": md5sum_hash(body),
            }),
            query_params={"uploadId": upload_id},
        )
        # Server may report failure in the body of a 200 OK response.
        if response.data and b"<Error" in response.data[:256]:
            raise S3Error.fromxml(response, bucket_name, object_name)
        result = self._unmarshal(CompleteMultipartUploadResult, response)
        return ObjectWriteResult.new(
            headers=response.headers,
            bucket_name=result.bucket_name or bucket_name,
            object_name=result.object_name or object_name,
            etag=result.etag,
            location=result.location,
        )

    def _abort_multipart_upload(
            self,
            bucket_name: str,
            object_name: str,
            upload_id: str,
    ):
        """Execute AbortMultipartUpload S3 API."""
        self._execute(
            method="DELETE",
            bucket_name=bucket_name,
            object_name=object_name,
            query_params={"uploadId": upload_id},
        )

    def _find_upload_id(
            self, bucket_name: str, object_name: str,
    ) -> Optional[str]:
        """Upload ID of most recently initiated upload of the object."""
        latest = None
        oldest = datetime.min.replace(tzinfo=timezone.utc)
        for result in self.list_incomplete_uploads(
                bucket_name, prefix=object_name, recursive=True,
        ):
            upload = result.get()
            if upload.object_name != object_name:
                continue
            if latest is None or (
                    (upload.initiated_time or oldest) >=
                    (latest.initiated_time or oldest)
            ):
                latest = upload
        return latest.upload_id if latest else None

    def _upload(
            self,
            bucket_name: str,
            object_name: str,
            source: UploadSource,
            length: int,
            headers: HTTPHeaderDict,
    ) -> ObjectWriteResult:
        """
        Upload length bytes of source. Objects up to 5MiB are sent in one
        request; bigger ones go through a multipart upload which resumes
        the latest incomplete upload of the same object if one exists.
        Parts already on the server are skipped while their number, size
        and ETag match the local data; from the first mismatch onwards,
        every part is uploaded.
        """
        part_size, part_count, last_part_size = get_part_info(length)

        if length <= MIN_PART_SIZE:
            data = source.read(length)
            if len(data) != length:
                raise InputSizeMismatchError(length, len(data))
            headers["Content-MD5"] = md5sum_hash(data)
            return self._put_object(bucket_name, object_name, data, headers)

        upload_id = self._find_upload_id(bucket_name, object_name)
        uploaded_parts: Iterator[Part] = iter(())
        if upload_id:
            uploaded_parts = (
                result.get() for result in self.list_parts(
                    bucket_name, object_name, upload_id,
                )
            )
        else:
            upload_id = self._create_multipart_upload(
                bucket_name, object_name, headers,
            )

        parts: list[Part] = []
        total = 0
        uploaded_part = next(uploaded_parts, None)
        for part_number in range(1, part_count + 1):
            size = last_part_size if part_number == part_count else part_size
            if (
                    uploaded_part is not None and
                    uploaded_part.part_number == part_number and
                    uploaded_part.size == size and
                    uploaded_part.etag.lower() == source.md5_hex(size)
            ):
                source.skip(size)
                parts.append(Part(part_number, uploaded_part.etag))
                total += size
                uploaded_part = next(uploaded_parts, None)
                continue

            uploaded_part = None
            data = source.read(size)
            total += len(data)
            if len(data) != size:
                raise InputSizeMismatchError(length, total)
            etag = self._upload_part(
                bucket_name, object_name, data, upload_id, part_number,
            )
            parts.append(Part(part_number, etag))

        return self._complete_multipart_upload(
            bucket_name, object_name, upload_id, parts,
        )

    def put_object(
            self,
            bucket_name: str,
            object_name: str,
            data: BinaryIO,
            length: int,
            content_type: str = "application/octet-stream",
            metadata: Optional[dict[str, str]] = None,
    ) -> ObjectWriteResult:
        """
        Upload data from a stream to an object in a bucket. An incomplete
        upload of the same object left by an earlier failed call is
        resumed; it is never aborted automatically, see
        :meth:`remove_incomplete_upload`.

        Args:
            bucket_name (str):
                Name of the bucket.

            object_name (str):
                Object name in the bucket.

            data (BinaryIO):
                An object having callable `read()` returning a `bytes`
                object. Seekable objects are read directly at their current
                position; others are consumed as a stream.

            length (int):
                Data size, up to 5TiB.

            content_type (str, default="application/octet-stream"):
                Content type of the object.

            metadata (Optional[dict[str, str]], default=None):
                Any additional metadata to be uploaded along with the
                object.

        Returns:
            ObjectWriteResult:
                The result of the object upload.

        Raises:
            InputSizeMismatchError:
                If data ends before length bytes.

        Example:
            >>> result = client.put_object(
            ...     "my-bucket", "my-object", io.BytesIO(b"hello"), 5,
            ... )
            >>> print(result.object_name, result.etag)
        """
        check_bucket_name(bucket_name)
        check_object_name(object_name)
        if not isinstance(length, int) or isinstance(length, bool):
            raise TypeError("length must be an integer")
        source = make_source(data)
        headers = _metadata_headers(metadata)
        headers["Content-Type"] = content_type or "application/octet-stream"
        return self._upload(bucket_name, object_name, source, length, headers)

    def fput_object(
            self,
            bucket_name: str,
            object_name: str,
            file_path: str,
            content_type: str = "application/octet-stream",
            metadata: Optional[dict[str, str]] = None,
    ) -> ObjectWriteResult:
        """
        Upload data from a file to an object in a bucket, resuming an
        earlier interrupted upload of the same object.

        Example:
            >>> result = client.fput_object(
            ...     "my-bucket", "my-object", "my-filename",
            ...     content_type="application/csv",
            ... )
        """
        check_bucket_name(bucket_name)
        check_object_name(object_name)
        headers = _metadata_headers(metadata)
        headers["Content-Type"] = content_type or "application/octet-stream"
        with open(file_path, "rb") as file_data:
            return self._upload(
                bucket_name,
                object_name,
                SeekableSource(file_data),
                os.fstat(file_data.fileno()).st_size,
                headers,
            )

    def get_object(
            self,
            bucket_name: str,
            object_name: str,
            offset: int = 0,
            length: Optional[int] = None,
    ) -> BaseHTTPResponse:
        """
        Get data of an object. Returned response should be closed after use
        to release network resources. To reuse the connection, it's required
        to call `response.release_conn()` explicitly.

        Args:
            bucket_name (str):
                Name of the bucket.

            object_name (str):
                Object name in the bucket.

            offset (int, default=0):
                Start byte position of object data.

            length (Optional[int], default=None):
                Number of bytes of object data from offset.

        Returns:
            urllib3.response.BaseHTTPResponse:
                An unread HTTP response.

        Example:
            >>> response = None
            >>> try:
            ...     response = client.get_object("my-bucket", "my-object")
            ...     data = response.read()
            ... finally:
            ...     if response:
            ...         response.close()
            ...         response.release_conn()
        """
        check_bucket_name(bucket_name)
        check_object_name(object_name)
        if offset < 0 or (length is not None and length <= 0):
            raise ValueError("offset must be non-negative and length positive")
        headers = HTTPHeaderDict()
        if offset or length:
            end = (offset + length - 1) if length else ""
            headers["Range"] = f"bytes={offset}-{end}"
        return self._execute(
            "GET",
            bucket_name,
            object_name,
            headers=headers,
            preload_content=False,
        )

    def fget_object(
            self,
            bucket_name: str,
            object_name: str,
            file_path: str,
    ) -> Object:
        """
        Download data of an object to a file. Data is written to a partial
        file named after the file path and the object ETag; a later call
        for the same object version continues from the partial file's size.

        Args:
            bucket_name (str):
                Name of the bucket.

            object_name (str):
                Object name in the bucket.

            file_path (str):
                Name of the file to download the object into.

        Returns:
            Object:
                Object information.

        Raises:
            ValueError:
                If file_path is a directory or an existing file is larger
                than the object.

            InputSizeMismatchError:
                If the server sent fewer or more bytes than requested.

        Example:
            >>> client.fget_object("my-bucket", "my-object", "my-filename")
        """
        check_bucket_name(bucket_name)
        check_object_name(object_name)

        if os.path.isdir(file_path):
            raise ValueError(f"file {file_path} is a directory")

        stat = self.stat_object(bucket_name, object_name)
        makedirs(os.path.dirname(file_path))
        size = stat.size or 0
        tmp_file_path = f"{file_path}.{stat.etag}.{_PART_FILE_SUFFIX}"

        if os.path.exists(file_path):
            file_size = os.path.getsize(file_path)
            if file_size == size:
                return stat
            if file_size > size:
                raise ValueError(
                    f"file {file_path} of size {file_size} is larger than "
                    f"object {object_name} of size {size}"
                )
            if not os.path.exists(tmp_file_path):
                os.rename(file_path, tmp_file_path)

        offset = 0
        if os.path.exists(tmp_file_path):
            offset = os.path.getsize(tmp_file_path)
            if offset > size:
                os.remove(tmp_file_path)
                offset = 0

        with open(tmp_file_path, "ab") as tmp_file:
            if offset < size:
                response = self.get_object(
                    bucket_name, object_name, offset=offset,
                )
                written = 0
                try:
                    for data in response.stream(amt=_DOWNLOAD_CHUNK_SIZE):
                        written += tmp_file.write(data)
                finally:
                    response.close()
                    response.release_conn()
                if written != size - offset:
                    raise InputSizeMismatchError(size - offset, written)

        os.replace(tmp_file_path, file_path)
        return stat

    def stat_object(self, bucket_name: str, object_name: str) -> Object:
        """
        Get object information and metadata of an object.

        Example:
            >>> result = client.stat_object("my-bucket", "my-object")
            >>> print(result.size, result.etag, result.last_modified)
        """
        check_bucket_name(bucket_name)
        check_object_name(object_name)
        response = self._execute("HEAD", bucket_name, object_name)
        return Object.from_headers(response.headers, bucket_name, object_name)

    def remove_object(self, bucket_name: str, object_name: str):
        """
        Remove an object.

        Example:
            >>> client.remove_object("my-bucket", "my-object")
        """
        check_bucket_name(bucket_name)
        check_object_name(object_name)
        self._execute("DELETE", bucket_name, object_name)

    def _list_objects(
            self,
            bucket_name: str,
            delimiter: Optional[str] = None,
            marker: Optional[str] = None,
            max_keys: int = MAX_PAGE_SIZE,
            prefix: Optional[str] = None,
    ) -> ListObjectsResult:
        """Execute ListObjects (version 1) S3 API for one page."""
        query_params = {"max-keys": str(max_keys)}
        if delimiter is not None:
            query_params["delimiter"] = delimiter
        if marker:
            query_params["marker"] = marker
        if prefix:
            query_params["prefix"] = prefix
        response = self._execute("GET", bucket_name, query_params=query_params)
        return self._unmarshal(ListObjectsResult, response)

    def list_objects(
            self,
            bucket_name: str,
            prefix: Optional[str] = None,
            recursive: bool = False,
            max_keys: int = MAX_PAGE_SIZE,
    ) -> ListObjectsIterator:
        """
        Lists object information of a bucket. Nothing is requested until
        the iterator is advanced; a failed page request ends iteration with
        one error result.

        Args:
            bucket_name (str):
                Name of the bucket.

            prefix (Optional[str], default=None):
                Object name starts with prefix.

            recursive (bool, default=False):
                List recursively than directory structure emulation.

            max_keys (int, default=1000):
                Number of objects requested per page.

        Returns:
            ListObjectsIterator:
                Iterator of :class:`Result` of :class:`Object`.

        Example:
            >>> for result in client.list_objects("my-bucket", prefix="a/"):
            ...     obj = result.get()
            ...     print(obj.object_name, obj.is_dir)
        """
        check_bucket_name(bucket_name)
        return ListObjectsIterator(
            self, bucket_name, prefix, recursive, max_keys,
        )

    def _list_multipart_uploads(
            self,
            bucket_name: str,
            delimiter: Optional[str] = None,
            key_marker: Optional[str] = None,
            upload_id_marker: Optional[str] = None,
            max_uploads: int = MAX_PAGE_SIZE,
            prefix: Optional[str] = None,
    ) -> ListMultipartUploadsResult:
        """Execute ListMultipartUploads S3 API for one page."""
        query_params = {"uploads": "", "max-uploads": str(max_uploads)}
        if delimiter is not None:
            query_params["delimiter"] = delimiter
        if key_marker:
            query_params["key-marker"] = key_marker
        if upload_id_marker:
            query_params["upload-id-marker"] = upload_id_marker
        if prefix:
            query_params["prefix"] = prefix
        response = self._execute("GET", bucket_name, query_params=query_params)
        return self._unmarshal(ListMultipartUploadsResult, response)

    def list_incomplete_uploads(
            self,
            bucket_name: str,
            prefix: Optional[str] = None,
            recursive: bool = False,
    ) -> ListIncompleteUploadsIterator:
        """
        Lists incomplete multipart uploads of a bucket.

        Example:
            >>> for result in client.list_incomplete_uploads("my-bucket"):
            ...     upload = result.get()
            ...     print(upload.object_name, upload.upload_id)
        """
        check_bucket_name(bucket_name)
        return ListIncompleteUploadsIterator(
            self, bucket_name, prefix, recursive,
        )

    def _list_parts(
            self,
            bucket_name: str,
            object_name: str,
            upload_id: str,
            part_number_marker: Optional[int] = None,
            max_parts: int = MAX_PAGE_SIZE,
    ) -> ListPartsResult:
        """Execute ListParts S3 API for one page."""
        query_params = {"uploadId": upload_id, "max-parts": str(max_parts)}
        if part_number_marker:
            query_params["part-number-marker"] = str(part_number_marker)
        response = self._execute(
            "GET", bucket_name, object_name, query_params=query_params,
        )
        return self._unmarshal(ListPartsResult, response)

    def list_parts(
            self,
            bucket_name: str,
            object_name: str,
            upload_id: str,
    ) -> ListPartsIterator:
        """Lists uploaded parts of a multipart upload."""
        check_bucket_name(bucket_name)
        check_object_name(object_name)
        return ListPartsIterator(self, bucket_name, object_name, upload_id)

    def remove_incomplete_upload(self, bucket_name: str, object_name: str):
        """
        Abort the most recently initiated incomplete upload of an object,
        discarding its uploaded parts. Does nothing if there is none.

        Example:
            >>> client.remove_incomplete_upload("my-bucket", "my-object")
        """
        check_bucket_name(bucket_name)
        check_object_name(object_name)
        upload_id = self._find_upload_id(bucket_name, object_name)
        if upload_id:
            self._abort_multipart_upload(bucket_name, object_name, upload_id)

    def get_presigned_url(
            self,
            method: str,
            bucket_name: str,
            object_name: str,
            expires: timedelta = _MAX_EXPIRY,
            response_headers: Optional[dict[str, str]] = None,
            request_date: Optional[datetime] = None,
    ) -> str:
        """
        Get presigned URL of an object for HTTP method, expiry time and
        custom request parameters.

        Args:
            method (str):
                HTTP method.

            bucket_name (str):
                Name of the bucket.

            object_name (str):
                Object name in the bucket.

            expires (timedelta, default=timedelta(days=7)):
                Expiry in seconds; between 1 second and 7 days.

            response_headers (Optional[dict[str, str]], default=None):
                Response headers to override, e.g. response-content-type.

            request_date (Optional[datetime], default=None):
                Request time instead of current time.

        Returns:
            str:
                URL string.

        Example:
            >>> url = client.get_presigned_url(
            ...     "DELETE", "my-bucket", "my-object",
            ...     expires=timedelta(days=1),
            ... )
        """
        seconds = int(expires.total_seconds())
        if seconds < 1 or expires > _MAX_EXPIRY:
            raise ValueError("expires must be between 1 second to 7 days")
        check_bucket_name(bucket_name)
        check_object_name(object_name)

        region = self._get_region(bucket_name)
        url = self._base_url.build(
            method=method,
            region=region,
            bucket_name=bucket_name,
            object_name=object_name,
            query_params=response_headers,
        )

        if self._provider is None:
            return urlunsplit(url)

        url = presign_v4(
            method=method,
            url=url,
            region=region,
            credentials=self._provider.retrieve(),
            date=request_date or time.utcnow(),
            expires=seconds,
        )
        return urlunsplit(url)

    def presigned_get_object(
            self,
            bucket_name: str,
            object_name: str,
            expires: timedelta = _MAX_EXPIRY,
            response_headers: Optional[dict[str, str]] = None,
            request_date: Optional[datetime] = None,
    ) -> str:
        """
        Get presigned URL of an object to download its data.

        Example:
            >>> url = client.presigned_get_object(
            ...     "my-bucket", "my-object", expires=timedelta(hours=2),
            ... )
        """
        return self.get_presigned_url(
            "GET",
            bucket_name,
            object_name,
            expires,
            response_headers=response_headers,
            request_date=request_date,
        )

    def presigned_put_object(
            self,
            bucket_name: str,
            object_name: str,
            expires: timedelta = _MAX_EXPIRY,
    ) -> str:
        """Get presigned URL of an object to upload data with PUT."""
        return self.get_presigned_url("PUT", bucket_name, object_name, expires)

    def presigned_post_policy(self, policy: PostPolicy) -> dict[str, str]:
        """
        Get form-data of PostPolicy of an object to upload its data using
        POST method.

        Example:
            >>> policy = PostPolicy(
            ...     "my-bucket", datetime.utcnow() + timedelta(days=10),
            ... )
            >>> policy.set_key_startswith("my/object/prefix/")
            >>> policy.set_content_length_range(1*1024*1024, 10*1024*1024)
            >>> form_data = client.presigned_post_policy(policy)
        """
        if not isinstance(policy, PostPolicy):
            raise ValueError("policy must be PostPolicy type")
        if self._provider is None:
            raise ValueError(
                "anonymous access does not require presigned post form-data",
            )
        return policy.form_data(
            self._provider.retrieve(),
            self._get_region(policy.bucket_name),
        )
