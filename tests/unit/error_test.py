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

import io
import pickle
from unittest import TestCase, mock

import urllib3

from s3resume import NoResponseError, S3Client, S3Error, ServerError

from .helpers import generate_error
from .mocks import MockConnection, MockResponse


class ErrorClassificationTest(TestCase):
    def _client(self, mock_connection, *responses):
        mock_server = MockConnection()
        mock_connection.return_value = mock_server
        for response in responses:
            mock_server.mock_add_request(response)
        return S3Client("localhost:9000")

    @mock.patch('urllib3.PoolManager')
    def test_head_object_not_found(self, mock_connection):
        client = self._client(
            mock_connection,
            MockResponse("HEAD", "https://localhost:9000/hello/world",
                         {}, 404,
                         response_headers={"x-amz-request-id": "req-1"}),
        )
        with self.assertRaises(S3Error) as ctx:
            client.stat_object("hello", "world")
        self.assertEqual(ctx.exception.code, "NoSuchKey")
        self.assertEqual(ctx.exception.resource, "/hello/world")
        self.assertEqual(ctx.exception.request_id, "req-1")
        self.assertEqual(ctx.exception.bucket_name, "hello")
        self.assertEqual(ctx.exception.object_name, "world")
        self.assertEqual(ctx.exception.response.status, 404)

    @mock.patch('urllib3.PoolManager')
    def test_bucket_not_found(self, mock_connection):
        client = self._client(
            mock_connection,
            MockResponse("DELETE", "https://localhost:9000/hello", {}, 404),
        )
        with self.assertRaises(S3Error) as ctx:
            client.remove_bucket("hello")
        self.assertEqual(ctx.exception.code, "NoSuchBucket")

    @mock.patch('urllib3.PoolManager')
    def test_resource_not_found(self, mock_connection):
        client = self._client(
            mock_connection,
            MockResponse("GET", "https://localhost:9000/", {}, 404),
        )
        with self.assertRaises(S3Error) as ctx:
            client.list_buckets()
        self.assertEqual(ctx.exception.code, "ResourceNotFound")

    @mock.patch('urllib3.PoolManager')
    def test_synthesized_codes(self, mock_connection):
        cases = [
            ("DELETE", 405, "MethodNotAllowed"),
            ("DELETE", 501, "MethodNotAllowed"),
            ("DELETE", 409, "NoSuchBucket"),
            ("DELETE", 403, "AccessDenied"),
        ]
        for method, status, code in cases:
            client = self._client(
                mock_connection,
                MockResponse(method, "https://localhost:9000/hello/world",
                             {}, status),
            )
            with self.assertRaises(S3Error, msg=str(status)) as ctx:
                client.remove_object("hello", "world")
            self.assertEqual(ctx.exception.code, code)

    @mock.patch('urllib3.PoolManager')
    def test_conflict_without_bucket(self, mock_connection):
        client = self._client(
            mock_connection,
            MockResponse("GET", "https://localhost:9000/", {}, 409),
        )
        with self.assertRaises(S3Error) as ctx:
            client.list_buckets()
        self.assertEqual(ctx.exception.code, "ResourceConflict")

    @mock.patch('urllib3.PoolManager')
    def test_unparsable_body(self, mock_connection):
        client = self._client(
            mock_connection,
            MockResponse("GET", "https://localhost:9000/hello/world",
                         {}, 403, content=b"<html>Forbidden"),
        )
        with self.assertRaises(S3Error) as ctx:
            client.get_object("hello", "world")
        self.assertEqual(ctx.exception.code, "AccessDenied")

    @mock.patch('urllib3.PoolManager')
    def test_server_error(self, mock_connection):
        client = self._client(
            mock_connection,
            MockResponse("HEAD", "https://localhost:9000/hello/world",
                         {}, 503),
        )
        with self.assertRaises(ServerError) as ctx:
            client.stat_object("hello", "world")
        self.assertEqual(ctx.exception.status_code, 503)

    @mock.patch('urllib3.PoolManager')
    def test_xml_error(self, mock_connection):
        client = self._client(
            mock_connection,
            MockResponse(
                "GET", "https://localhost:9000/hello/world", {}, 500,
                content=generate_error(
                    "InternalError", "We encountered an internal error",
                    "req-2", "host-2", "/hello/world", "hello", "world",
                ).encode(),
            ),
        )
        with self.assertRaises(S3Error) as ctx:
            client.get_object("hello", "world")
        self.assertEqual(ctx.exception.code, "InternalError")
        self.assertEqual(ctx.exception.host_id, "host-2")

    @mock.patch('urllib3.PoolManager')
    def test_transport_error(self, mock_connection):
        mock_connection.return_value = mock.Mock()
        mock_connection.return_value.urlopen.side_effect = (
            urllib3.exceptions.ProtocolError("Connection aborted.")
        )
        client = S3Client("localhost:9000")
        with self.assertRaises(NoResponseError) as ctx:
            client.stat_object("hello", "world")
        self.assertEqual(ctx.exception.method, "HEAD")
        self.assertEqual(ctx.exception.url,
                         "https://localhost:9000/hello/world")


class S3ErrorTest(TestCase):
    def test_frozen_and_pickle(self):
        error = S3Error(None, "NoSuchKey", "message", "/b/o", "req", "host",
                        "b", "o")
        with self.assertRaises(AttributeError):
            error.code = "Other"
        self.assertEqual(pickle.loads(pickle.dumps(error)), error)
        self.assertIn("code: NoSuchKey", str(error))


class TraceTest(TestCase):
    @mock.patch('urllib3.PoolManager')
    def test_trace_redacts_signature(self, mock_connection):
        mock_server = MockConnection()
        mock_connection.return_value = mock_server
        mock_server.mock_add_request(
            MockResponse("DELETE", "https://localhost:9000/hello/world",
                         {}, 204),
        )
        client = S3Client("localhost:9000", "minio", "minio123")
        stream = io.StringIO()
        client.trace_on(stream)
        client.remove_object("hello", "world")
        client.trace_off()
        output = stream.getvalue()
        self.assertIn("DELETE /hello/world HTTP/1.1", output)
        self.assertIn("Signature=*REDACTED*", output)
        self.assertIn("Credential=*REDACTED*", output)
        self.assertNotIn("minio/", output)
        self.assertIn("HTTP/1.1 204", output)
