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

from unittest import TestCase, mock

from s3resume import InvalidResponseError, S3Client

from .helpers import generate_list_parts, generate_list_uploads
from .mocks import MockConnection, MockResponse

PARTS_URL = "https://localhost:9000/bucket/object"


class ListIncompleteUploadsTest(TestCase):
    @mock.patch('urllib3.PoolManager')
    def test_list_incomplete_uploads(self, mock_connection):
        mock_server = MockConnection()
        mock_connection.return_value = mock_server
        mock_server.mock_add_request(
            MockResponse(
                "GET",
                "https://localhost:9000/bucket"
                "?delimiter=%2F&max-uploads=1000&uploads=",
                {}, 200,
                content=generate_list_uploads("bucket", [
                    ("go1.4.2", "upload-1", "2015-05-30T14:43:35.349Z"),
                    ("go1.5.0", "upload-2", "2015-05-30T15:00:07.759Z"),
                ]),
            ),
        )
        client = S3Client('localhost:9000')
        uploads = [
            result.get() for result in client.list_incomplete_uploads('bucket')
        ]
        self.assertEqual([upload.object_name for upload in uploads],
                         ["go1.4.2", "go1.5.0"])
        self.assertEqual(uploads[1].upload_id, "upload-2")
        self.assertEqual(uploads[0].bucket_name, "bucket")
        self.assertEqual(uploads[0].initiated_time.year, 2015)

    @mock.patch('urllib3.PoolManager')
    def test_list_parts(self, mock_connection):
        mock_server = MockConnection()
        mock_connection.return_value = mock_server
        mock_server.mock_add_request(
            MockResponse(
                "GET",
                "https://localhost:9000/bucket/object"
                "?max-parts=1000&uploadId=upload-1",
                {}, 200,
                content=generate_list_parts("bucket", "object", "upload-1", [
                    (1, "79b281060d337b9b2b84ccf390adcf74", 5242880),
                    (2, "1d7b2e9f1a2d3c4b5a6978877665544f", 1024),
                ]),
            ),
        )
        client = S3Client('localhost:9000')
        parts = [
            result.get()
            for result in client.list_parts('bucket', 'object', 'upload-1')
        ]
        self.assertEqual([part.part_number for part in parts], [1, 2])
        self.assertEqual(parts[0].etag, "79b281060d337b9b2b84ccf390adcf74")
        self.assertEqual(parts[0].size, 5242880)

    @mock.patch('urllib3.PoolManager')
    def test_remove_incomplete_upload(self, mock_connection):
        mock_server = MockConnection()
        mock_connection.return_value = mock_server
        mock_server.mock_add_request(
            MockResponse(
                "GET",
                "https://localhost:9000/bucket"
                "?max-uploads=1000&prefix=object&uploads=",
                {}, 200,
                content=generate_list_uploads("bucket", [
                    ("object", "newest", "2024-03-02T10:00:00.000Z"),
                    ("object", "older", "2024-03-01T10:00:00.000Z"),
                    ("object.bak", "other", "2024-03-03T10:00:00.000Z"),
                ]),
            ),
        )
        mock_server.mock_add_request(
            MockResponse(
                "DELETE",
                "https://localhost:9000/bucket/object?uploadId=newest",
                {}, 204,
            ),
        )
        client = S3Client('localhost:9000')
        client.remove_incomplete_upload('bucket', 'object')
        self.assertEqual(mock_server.requests, [])

    @mock.patch('urllib3.PoolManager')
    def test_remove_without_upload(self, mock_connection):
        mock_server = MockConnection()
        mock_connection.return_value = mock_server
        mock_server.mock_add_request(
            MockResponse(
                "GET",
                "https://localhost:9000/bucket"
                "?max-uploads=1000&prefix=object&uploads=",
                {}, 200,
                content=generate_list_uploads("bucket", []),
            ),
        )
        client = S3Client('localhost:9000')
        client.remove_incomplete_upload('bucket', 'object')
        self.assertEqual(mock_server.requests, [])


class ListingContinuationTest(TestCase):
    @mock.patch('urllib3.PoolManager')
    def test_list_incomplete_uploads_next_markers(self, mock_connection):
        mock_server = MockConnection()
        mock_connection.return_value = mock_server
        mock_server.mock_add_request(
            MockResponse(
                "GET",
                "https://localhost:9000/bucket?max-uploads=1000&uploads=",
                {}, 200,
                content=generate_list_uploads(
                    "bucket",
                    [("a", "upload-1", "2024-03-01T10:00:00.000Z")],
                    is_truncated=True,
                    next_key_marker="a",
                    next_upload_id_marker="upload-1",
                ),
            ),
        )
        mock_server.mock_add_request(
            MockResponse(
                "GET",
                "https://localhost:9000/bucket?key-marker=a"
                "&max-uploads=1000&upload-id-marker=upload-1&uploads=",
                {}, 200,
                content=generate_list_uploads(
                    "bucket", [("b", "upload-2", "2024-03-01T11:00:00.000Z")],
                ),
            ),
        )
        client = S3Client('localhost:9000')
        uploads = [
            result.get() for result in
            client.list_incomplete_uploads('bucket', recursive=True)
        ]
        self.assertEqual([upload.upload_id for upload in uploads],
                         ["upload-1", "upload-2"])
        self.assertEqual(mock_server.requests, [])

    @mock.patch('urllib3.PoolManager')
    def test_list_incomplete_uploads_last_upload_marker(
            self, mock_connection,
    ):
        mock_server = MockConnection()
        mock_connection.return_value = mock_server
        mock_server.mock_add_request(
            MockResponse(
                "GET",
                "https://localhost:9000/bucket?max-uploads=1000&uploads=",
                {}, 200,
                content=generate_list_uploads(
                    "bucket",
                    [
                        ("a", "upload-1", "2024-03-01T10:00:00.000Z"),
                        ("b", "upload-2", "2024-03-01T11:00:00.000Z"),
                    ],
                    is_truncated=True,
                ),
            ),
        )
        mock_server.mock_add_request(
            MockResponse(
                "GET",
                "https://localhost:9000/bucket?key-marker=b"
                "&max-uploads=1000&upload-id-marker=upload-2&uploads=",
                {}, 200,
                content=generate_list_uploads(
                    "bucket", [("c", "upload-3", "2024-03-01T12:00:00.000Z")],
                ),
            ),
        )
        client = S3Client('localhost:9000')
        uploads = [
            result.get() for result in
            client.list_incomplete_uploads('bucket', recursive=True)
        ]
        self.assertEqual([upload.object_name for upload in uploads],
                         ["a", "b", "c"])
        self.assertEqual(mock_server.requests, [])

    @mock.patch('urllib3.PoolManager')
    def test_list_incomplete_uploads_marker_not_advancing(
            self, mock_connection,
    ):
        mock_server = MockConnection()
        mock_connection.return_value = mock_server
        for url in [
                "https://localhost:9000/bucket?max-uploads=1000&uploads=",
                "https://localhost:9000/bucket?key-marker=a"
                "&max-uploads=1000&upload-id-marker=upload-1&uploads=",
        ]:
            mock_server.mock_add_request(
                MockResponse(
                    "GET", url, {}, 200,
                    content=generate_list_uploads(
                        "bucket",
                        [("a", "upload-1", "2024-03-01T10:00:00.000Z")],
                        is_truncated=True,
                    ),
                ),
            )
        client = S3Client('localhost:9000')
        results = list(
            client.list_incomplete_uploads('bucket', recursive=True),
        )
        self.assertEqual(len(results), 2)
        self.assertEqual(results[0].get().upload_id, "upload-1")
        self.assertIsInstance(results[1].error, InvalidResponseError)
        self.assertEqual(mock_server.requests, [])

    @mock.patch('urllib3.PoolManager')
    def test_list_incomplete_uploads_empty_truncated_page(
            self, mock_connection,
    ):
        mock_server = MockConnection()
        mock_connection.return_value = mock_server
        mock_server.mock_add_request(
            MockResponse(
                "GET",
                "https://localhost:9000/bucket"
                "?max-uploads=1000&prefix=object&uploads=",
                {}, 200,
                content=generate_list_uploads("bucket", [], is_truncated=True),
            ),
        )
        client = S3Client('localhost:9000')
        with self.assertRaises(InvalidResponseError):
            client.remove_incomplete_upload('bucket', 'object')
        self.assertEqual(mock_server.requests, [])

    @mock.patch('urllib3.PoolManager')
    def test_list_parts_next_marker(self, mock_connection):
        mock_server = MockConnection()
        mock_connection.return_value = mock_server
        mock_server.mock_add_request(
            MockResponse(
                "GET", PARTS_URL + "?max-parts=1000&uploadId=upload-1",
                {}, 200,
                content=generate_list_parts(
                    "bucket", "object", "upload-1",
                    [(1, "e1", 5242880), (2, "e2", 5242880)],
                    is_truncated=True,
                    next_part_number_marker=2,
                ),
            ),
        )
        mock_server.mock_add_request(
            MockResponse(
                "GET",
                PARTS_URL +
                "?max-parts=1000&part-number-marker=2&uploadId=upload-1",
                {}, 200,
                content=generate_list_parts(
                    "bucket", "object", "upload-1", [(3, "e3", 1024)],
                ),
            ),
        )
        client = S3Client('localhost:9000')
        parts = [
            result.get()
            for result in client.list_parts('bucket', 'object', 'upload-1')
        ]
        self.assertEqual([part.part_number for part in parts], [1, 2, 3])
        self.assertEqual(mock_server.requests, [])

    @mock.patch('urllib3.PoolManager')
    def test_list_parts_last_part_marker(self, mock_connection):
        mock_server = MockConnection()
        mock_connection.return_value = mock_server
        mock_server.mock_add_request(
            MockResponse(
                "GET", PARTS_URL + "?max-parts=1000&uploadId=upload-1",
                {}, 200,
                content=generate_list_parts(
                    "bucket", "object", "upload-1",
                    [(1, "e1", 5242880), (2, "e2", 5242880)],
                    is_truncated=True,
                ),
            ),
        )
        mock_server.mock_add_request(
            MockResponse(
                "GET",
                PARTS_URL +
                "?max-parts=1000&part-number-marker=2&uploadId=upload-1",
                {}, 200,
                content=generate_list_parts(
                    "bucket", "object", "upload-1", [(3, "e3", 1024)],
                ),
            ),
        )
        client = S3Client('localhost:9000')
        parts = [
            result.get()
            for result in client.list_parts('bucket', 'object', 'upload-1')
        ]
        self.assertEqual([part.part_number for part in parts], [1, 2, 3])
        self.assertEqual(mock_server.requests, [])

    @mock.patch('urllib3.PoolManager')
    def test_list_parts_marker_not_advancing(self, mock_connection):
        mock_server = MockConnection()
        mock_connection.return_value = mock_server
        for query in [
                "?max-parts=1000&uploadId=upload-1",
                "?max-parts=1000&part-number-marker=2&uploadId=upload-1",
        ]:
            mock_server.mock_add_request(
                MockResponse(
                    "GET", PARTS_URL + query, {}, 200,
                    content=generate_list_parts(
                        "bucket", "object", "upload-1",
                        [(2, "e2", 5242880)],
                        is_truncated=True,
                        next_part_number_marker=2,
                    ),
                ),
            )
        client = S3Client('localhost:9000')
        results = list(client.list_parts('bucket', 'object', 'upload-1'))
        self.assertEqual(len(results), 2)
        self.assertEqual(results[0].get().part_number, 2)
        self.assertIsInstance(results[1].error, InvalidResponseError)
        self.assertEqual(mock_server.requests, [])
