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

import sys

from s3resume import S3Client
from s3resume.credentials import (ChainedProvider, EnvAWSProvider,
                                  EnvMinioProvider)

client = S3Client(
    endpoint="s3.amazonaws.com",
    credentials=ChainedProvider(
        [
            EnvAWSProvider(),
            EnvMinioProvider(),
        ]
    ),
)

# Trace HTTP calls while looking up the bucket region and object.
client.trace_on(sys.stderr)
stat = client.stat_object(bucket_name="my-bucket", object_name="my-object")
client.trace_off()
print(f"last-modified: {stat.last_modified}, size: {stat.size}")
