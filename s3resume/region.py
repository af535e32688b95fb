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

"""Bucket region cache shared by all requests of a client."""

from __future__ import annotations

from threading import Lock
from typing import Optional

DEFAULT_REGION = "us-east-1"

# Legacy location constraint aliases returned by GetBucketLocation.
_LOCATION_ALIASES = {
    "": DEFAULT_REGION,
    "EU": "eu-west-1",
}


def normalize_location(location: Optional[str]) -> str:
    """Map a location constraint to its canonical region name."""
    location = location or ""
    return _LOCATION_ALIASES.get(location, location)


class RegionCache:
    """
    Thread-safe bucket name to region map. Entries never expire; they are
    dropped with remove() when the bucket is reported missing.
    """

    def __init__(self):
        self._lock = Lock()
        self._regions: dict[str, str] = {}

    def get(self, bucket_name: str) -> Optional[str]:
        """Get cached region of the bucket."""
        with self._lock:
            return self._regions.get(bucket_name)

    def set(self, bucket_name: str, region: str):
        """Set region of the bucket, replacing any earlier value."""
        with self._lock:
            self._regions[bucket_name] = region

    def remove(self, bucket_name: str):
        """Forget region of the bucket."""
        with self._lock:
            self._regions.pop(bucket_name, None)

    def __contains__(self, bucket_name: str) -> bool:
        with self._lock:
            return bucket_name in self._regions
