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

"""Namespace aware XML helpers over xml.etree.ElementTree."""

from __future__ import annotations

import io
from typing import Optional, TypeVar
from xml.etree import ElementTree as ET

from typing_extensions import Protocol

S3_NAMESPACE = "http://s3.amazonaws.com/doc/2006-03-01/"


def Element(  # pylint: disable=invalid-name
        tag: str,
        namespace: str = S3_NAMESPACE,
) -> ET.Element:
    """Create root element, optionally carrying xmlns attribute."""
    return ET.Element(tag, {"xmlns": namespace} if namespace else {})


def SubElement(  # pylint: disable=invalid-name
        parent: ET.Element,
        tag: str,
        text: Optional[str] = None,
) -> ET.Element:
    """Create child element with optional text."""
    element = ET.SubElement(parent, tag)
    if text is not None:
        element.text = text
    return element


def _qualify(element: ET.Element, path: str) -> tuple[str, dict[str, str]]:
    """
    Prefix every step of path with the namespace of element. Responses
    from some servers carry no namespace at all; those are matched as is.
    """
    if not element.tag.startswith("{"):
        return path, {}
    namespace = element.tag[1:element.tag.index("}")]
    qualified = "/".join(f"ns:{step}" for step in path.split("/"))
    return qualified, {"ns": namespace}


def findall(element: ET.Element, path: str) -> list[ET.Element]:
    """Namespace aware ElementTree.Element.findall()."""
    path, namespaces = _qualify(element, path)
    return element.findall(path, namespaces)


def find(
        element: ET.Element,
        path: str,
        strict: bool = False,
) -> Optional[ET.Element]:
    """
    Namespace aware ElementTree.Element.find(); with strict, a missing
    element raises ValueError.
    """
    qualified, namespaces = _qualify(element, path)
    child = element.find(qualified, namespaces)
    if strict and child is None:
        raise ValueError(f"XML element <{path}> not found")
    return child


def findtext(
        element: ET.Element,
        path: str,
        strict: bool = False,
        default: Optional[str] = None,
) -> Optional[str]:
    """Text of matching element; empty element yields empty string."""
    child = find(element, path, strict)
    return default if child is None else (child.text or "")


def getbytes(element: ET.Element) -> bytes:
    """Serialize element without XML declaration."""
    with io.BytesIO() as data:
        ET.ElementTree(element).write(data, xml_declaration=False)
        return data.getvalue()


T = TypeVar("T", bound="FromXML")


class FromXML(Protocol):
    """Type which can be built from an ElementTree.Element."""

    @classmethod
    def fromxml(cls: type[T], element: ET.Element) -> T:
        """Create object from values of XML element."""


def unmarshal(cls: type[T], data: bytes | str) -> T:
    """Parse XML data and build an instance of cls from its root."""
    if isinstance(data, bytes):
        data = data.decode()
    return cls.fromxml(ET.fromstring(data))
