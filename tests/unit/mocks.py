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

from urllib3._collections import HTTPHeaderDict


class MockResponse:
    def __init__(self, method, url, headers, status_code,
                 response_headers=None, content=None):
        self.method = method
        self.url = url
        self.request_headers = HTTPHeaderDict(headers or {})
        self.request_body = None
        self.sent_headers = None
        self.status = status_code
        self.headers = HTTPHeaderDict(response_headers or {})
        self.data = content or b""
        self.closed = False

    # noinspection PyUnusedLocal
    def read(self, amt=None, cache_content=False):
        return self.data

    def mock_verify(self, method, url, headers, body=None):
        assert self.method == method, f"{self.method} != {method}"
        assert self.url == url, f"{self.url} != {url}"
        headers = HTTPHeaderDict(headers or {})
        for header, value in self.request_headers.items():
            assert headers.get(header) == value, (
                f"header {header}: {value} != {headers.get(header)}"
            )
        self.request_body = body
        self.sent_headers = headers

    def stream(self, amt=2 ** 16, decode_content=None):
        for i in range(0, len(self.data), amt):
            yield self.data[i:i + amt]

    def close(self):
        self.closed = True

    # dummy release connection call.
    def release_conn(self):
        return


class MockConnection:
    def __init__(self):
        self.requests = []

    def mock_add_request(self, request):
        self.requests.append(request)

    # noinspection PyUnusedLocal
    def urlopen(self, method, url, body=None, headers=None,
                preload_content=True, **kwargs):
        assert self.requests, f"unexpected request {method} {url}"
        return_request = self.requests.pop(0)
        return_request.mock_verify(method, url, headers, body)
        return return_request

    def clear(self):
        return
