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
s3resume.post_policy
~~~~~~~~~~~~~~~~~~~~

Browser based upload policy. Policy conditions are described at
https://docs.aws.amazon.com/AmazonS3/latest/API/sigv4-HTTPPOSTConstructPolicy.html

:copyright: (c) 2015-2025 by MinIO, Inc.
:license: Apache 2.0, see LICENSE for more details.

"""

from __future__ import annotations

import base64
import json
from datetime import datetime
from typing import Any, Optional

from .credentials import Credentials
from .helpers import check_bucket_name, check_non_empty_string
from .signer import SIGN_V4_ALGORITHM, get_credential_string, post_presign_v4
from .time import to_amz_date, to_iso8601utc, utcnow

_EQ = "eq"
_STARTS_WITH = "starts-with"


class PostPolicy:
    """
    Post policy of a bucket. Conditions set here are both signed into the
    policy and returned as form fields the upload must carry.
    """

    def __init__(self, bucket_name: str, expiration: datetime):
        check_bucket_name(bucket_name)
        if not isinstance(expiration, datetime):
            raise ValueError("expiration must be datetime type")
        self._bucket_name = bucket_name
        self._expiration = expiration
        self._conditions: list[list[Any]] = []
        self._form_fields: dict[str, str] = {}
        self._content_length_range: Optional[tuple[int, int]] = None

    @property
    def bucket_name(self) -> str:
        """Get bucket name."""
        return self._bucket_name

    def _set_condition(self, operator: str, element: str, value: str):
        self._conditions = [
            cond for cond in self._conditions if cond[1] != "$" + element
        ]
        self._conditions.append([operator, "$" + element, value])
        self._form_fields[element] = value

    def set_key(self, key: str):
        """Restrict upload to exactly this object name."""
        check_non_empty_string(key)
        self._set_condition(_EQ, "key", key)

    def set_key_startswith(self, prefix: str):
        """Restrict upload to object names starting with prefix."""
        check_non_empty_string(prefix)
        self._set_condition(_STARTS_WITH, "key", prefix)

    def set_content_type(self, content_type: str):
        """Restrict Content-Type of the upload."""
        check_non_empty_string(content_type)
        self._set_condition(_EQ, "Content-Type", content_type)

    def set_success_action_status(self, status: int):
        """Set HTTP status code returned on successful upload."""
        if status not in (200, 201, 204):
            raise ValueError("success action status must be 200, 201 or 204")
        self._set_condition(_EQ, "success_action_status", str(status))

    def set_content_length_range(self, min_length: int, max_length: int):
        """Restrict size of the upload to [min_length, max_length]."""
        if min_length < 0 or max_length < 0 or min_length > max_length:
            raise ValueError(
                f"min length {min_length} must be <= max length "
                f"{max_length}, and both must be non-negative"
            )
        self._content_length_range = (min_length, max_length)

    def form_data(
            self,
            creds: Credentials,
            region: str,
            date: Optional[datetime] = None,
    ) -> dict[str, str]:
        """
        Return form fields of this policy: x-amz-algorithm, x-amz-credential,
        x-amz-date, policy, x-amz-signature, x-amz-security-token if
        credentials have one, and every field set by a condition.
        """
        if not region:
            raise ValueError("region cannot be empty")
        if "key" not in self._form_fields:
            raise ValueError("key condition must be set")

        date = date or utcnow()
        credential = get_credential_string(creds.access_key, date, region)
        amz_date = to_amz_date(date)

        conditions: list[list[Any]] = [[_EQ, "$bucket", self._bucket_name]]
        conditions += self._conditions
        if self._content_length_range:
            conditions.append(
                ["content-length-range", *self._content_length_range],
            )
        conditions.append([_EQ, "$x-amz-algorithm", SIGN_V4_ALGORITHM])
        conditions.append([_EQ, "$x-amz-credential", credential])
        if creds.session_token:
            conditions.append(
                [_EQ, "$x-amz-security-token", creds.session_token],
            )
        conditions.append([_EQ, "$x-amz-date", amz_date])

        policy = base64.b64encode(
            json.dumps({
                "expiration": to_iso8601utc(self._expiration),
                "conditions": conditions,
            }).encode(),
        ).decode("ascii")

        form = dict(self._form_fields)
        form["bucket"] = self._bucket_name
        form.update({
            "x-amz-algorithm": SIGN_V4_ALGORITHM,
            "x-amz-credential": credential,
            "x-amz-date": amz_date,
            "policy": policy,
            "x-amz-signature": post_presign_v4(
                policy, creds.secret_key, date, region,
            ),
        })
        if creds.session_token:
            form["x-amz-security-token"] = creds.session_token
        return form
