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
s3resume - resumable transfers for Amazon S3 compatible object storage

    >>> from s3resume import S3Client
    >>> client = S3Client(
    ...     "play.min.io",
    ...     access_key="Q3AM3UQ867SPQQA43P2F",
    ...     secret_key="zuf+tfteSlswRu7BJ86wekitnifILbZam1KYY3TG",
    ... )
    >>> client.fput_object("my-bucket", "my-object", "/tmp/large.bin")
    >>> for result in client.list_objects("my-bucket", recursive=True):
    ...     print(result.get().object_name)

:copyright: (C) 2015-2025 MinIO, Inc.
:license: Apache 2.0, see LICENSE for more details.
"""

__title__ = "s3resume"
__author__ = "MinIO, Inc."
__version__ = "1.0.0"
__license__ = "Apache 2.0"
__copyright__ = "Copyright 2015-2025 MinIO, Inc."

# pylint: disable=unused-import,useless-import-alias
from .api import S3Client as S3Client
from .error import InputSizeMismatchError as InputSizeMismatchError
from .error import InsufficientDataError as InsufficientDataError
from .error import InvalidResponseError as InvalidResponseError
from .error import NoResponseError as NoResponseError
from .error import S3Error as S3Error
from .error import ServerError as ServerError
from .generators import Result as Result
