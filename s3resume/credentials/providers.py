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

"""Credential providers."""

from __future__ import annotations

import os
from abc import ABCMeta, abstractmethod
from typing import Optional

from .credentials import Credentials


class Provider(metaclass=ABCMeta):  # pylint: disable=too-few-public-methods
    """Credential retriever."""

    @abstractmethod
    def retrieve(self) -> Credentials:
        """Retrieve credentials."""


class StaticProvider(Provider):
    """Fixed credential provider."""

    def __init__(
            self,
            access_key: str,
            secret_key: str,
            session_token: Optional[str] = None,
    ):
        self._credentials = Credentials(access_key, secret_key, session_token)

    def retrieve(self) -> Credentials:
        """Return passed credentials."""
        return self._credentials


def _getenv(*names: str) -> str:
    """First non-empty value of given environment variables."""
    for name in names:
        value = os.environ.get(name)
        if value:
            return value
    return ""


class EnvAWSProvider(Provider):
    """Credential provider from AWS environment variables."""

    def retrieve(self) -> Credentials:
        """Retrieve credentials."""
        return Credentials(
            access_key=_getenv("AWS_ACCESS_KEY_ID", "AWS_ACCESS_KEY"),
            secret_key=_getenv("AWS_SECRET_ACCESS_KEY", "AWS_SECRET_KEY"),
            session_token=os.environ.get("AWS_SESSION_TOKEN"),
        )


class EnvMinioProvider(Provider):
    """Credential provider from MinIO environment variables."""

    def retrieve(self) -> Credentials:
        """Retrieve credentials."""
        return Credentials(
            access_key=_getenv("MINIO_ACCESS_KEY", "MINIO_ROOT_USER"),
            secret_key=_getenv("MINIO_SECRET_KEY", "MINIO_ROOT_PASSWORD"),
        )


class ChainedProvider(Provider):
    """
    Tries each provider in order; credentials of the first one which
    succeeds are kept for later calls.
    """

    def __init__(self, providers: list[Provider]):
        self._providers = providers
        self._credentials: Optional[Credentials] = None

    def retrieve(self) -> Credentials:
        """Retrieve credentials from one of available provider."""
        if self._credentials:
            return self._credentials

        for provider in self._providers:
            try:
                self._credentials = provider.retrieve()
            except ValueError:
                continue
            return self._credentials

        raise ValueError("All providers fail to fetch credentials")
