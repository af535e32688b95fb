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

from datetime import datetime, timezone
from unittest import TestCase, mock

from s3resume import S3Client, S3Error

from .helpers import generate_error
from .mocks import MockConnection, MockResponse


class MakeBucketTest(TestCase):
    def test_bucket_is_string(self):
        client = S3Client('localhost:9000')
        with self.assertRaises(TypeError):
            client.make_bucket(1234)

    def test_bucket_is_not_empty_string(self):
        client = S3Client('localhost:9000')
        with self.assertRaises(ValueError):
            client.make_bucket('  \t \n  ')

    def test_invalid_bucket_names(self):
        client = S3Client('localhost:9000')
        for name in ['AB#CD', 'ab', '192.168.1.1', 'a..b', '-abc']:
            with self.assertRaises(ValueError, msg=name):
                client.make_bucket(name)

    @mock.patch('urllib3.PoolManager')
    def test_make_bucket_works(self, mock_connection):
        mock_server = MockConnection()
        mock_connection.return_value = mock_server
        request = MockResponse('PUT', 'https://localhost:9000/hello',
                               {'Content-Length': '0'}, 200)
        mock_server.mock_add_request(request)
        client = S3Client('localhost:9000')
        client.make_bucket('hello')
        self.assertIsNone(request.request_body)
        self.assertEqual(client._region_cache.get('hello'), 'us-east-1')

    @mock.patch('urllib3.PoolManager')
    def test_make_bucket_with_location(self, mock_connection):
        mock_server = MockConnection()
        mock_connection.return_value = mock_server
        request = MockResponse('PUT',
                               'https://s3.eu-west-2.amazonaws.com/hello',
                               {}, 200)
        mock_server.mock_add_request(request)
        client = S3Client('s3.amazonaws.com', 'minio', 'minio123')
        client.make_bucket('hello', 'eu-west-2')
        self.assertIn(
            b'<LocationConstraint>eu-west-2</LocationConstraint>',
            request.request_body,
        )
        self.assertEqual(client._region_cache.get('hello'), 'eu-west-2')

    @mock.patch('urllib3.PoolManager')
    def test_make_bucket_throws_fail(self, mock_connection):
        error_xml = generate_error('BucketAlreadyOwnedByYou', 'message',
                                   'request_id', 'host_id', 'resource',
                                   'hello', '')
        mock_server = MockConnection()
        mock_connection.return_value = mock_server
        mock_server.mock_add_request(
            MockResponse('PUT', 'https://localhost:9000/hello', {}, 409,
                         response_headers={"Content-Type": "application/xml"},
                         content=error_xml.encode())
        )
        client = S3Client('localhost:9000')
        with self.assertRaises(S3Error) as ctx:
            client.make_bucket('hello')
        self.assertEqual(ctx.exception.code, 'BucketAlreadyOwnedByYou')


class BucketExistsTest(TestCase):
    @mock.patch('urllib3.PoolManager')
    def test_bucket_exists(self, mock_connection):
        mock_server = MockConnection()
        mock_connection.return_value = mock_server
        mock_server.mock_add_request(
            MockResponse('HEAD', 'https://localhost:9000/hello', {}, 200),
        )
        mock_server.mock_add_request(
            MockResponse('HEAD', 'https://localhost:9000/goodbye', {}, 404),
        )
        mock_server.mock_add_request(
            MockResponse('HEAD', 'https://localhost:9000/secret', {}, 403),
        )
        client = S3Client('localhost:9000')
        self.assertTrue(client.bucket_exists('hello'))
        self.assertFalse(client.bucket_exists('goodbye'))
        with self.assertRaises(S3Error):
            client.bucket_exists('secret')


class ListBucketsTest(TestCase):
    @mock.patch('urllib3.PoolManager')
    def test_list_buckets(self, mock_connection):
        mock_server = MockConnection()
        mock_connection.return_value = mock_server
        mock_server.mock_add_request(
            MockResponse(
                'GET', 'https://localhost:9000/', {}, 200,
                content=b'''<ListAllMyBucketsResult
xmlns="http://s3.amazonaws.com/doc/2006-03-01/">
<Owner><ID>minio</ID><DisplayName>minio</DisplayName></Owner>
<Buckets>
<Bucket><Name>hello</Name>
<CreationDate>2015-06-22T23:07:43.240Z</CreationDate></Bucket>
<Bucket><Name>world</Name>
<CreationDate>2015-06-22T23:07:56.766Z</CreationDate></Bucket>
</Buckets></ListAllMyBucketsResult>''',
            ),
        )
        client = S3Client('localhost:9000')
        buckets = client.list_buckets()
        self.assertEqual([bucket.name for bucket in buckets],
                         ['hello', 'world'])
        self.assertEqual(
            buckets[0].creation_date,
            datetime(2015, 6, 22, 23, 7, 43, 240000, timezone.utc),
        )


class RemoveBucketTest(TestCase):
    @mock.patch('urllib3.PoolManager')
    def test_remove_bucket(self, mock_connection):
        mock_server = MockConnection()
        mock_connection.return_value = mock_server
        mock_server.mock_add_request(
            MockResponse('DELETE', 'https://localhost:9000/hello', {}, 204),
        )
        client = S3Client('localhost:9000')
        client._region_cache.set('hello', 'us-east-1')
        client.remove_bucket('hello')
        self.assertNotIn('hello', client._region_cache)
