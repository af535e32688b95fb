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

from s3resume import S3Client

client = S3Client(
    endpoint="play.min.io",
    access_key="Q3AM3UQ867SPQQA43P2F",
    secret_key="zuf+tfteSlswRu7BJ86wekitnifILbZam1KYY3TG",
)

# List objects information.
for result in client.list_objects(bucket_name="my-bucket"):
    obj = result.get()
    print(obj.object_name, "(dir)" if obj.is_dir else obj.size)

# List objects information whose names starts with "my/prefix/".
for result in client.list_objects(
        bucket_name="my-bucket", prefix="my/prefix/",
):
    print(result.get().object_name)

# List objects information recursively, stopping at the first error.
for result in client.list_objects(bucket_name="my-bucket", recursive=True):
    if result.error:
        print(f"listing failed; {result.error}")
        break
    print(result.value.object_name)
