"""
Render a metadata bag as a package.xml / destructiveChanges.xml document.
"""
from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from typing import Iterable, Mapping, Optional, Union

from sfdxpackage.domain.metadata.accumulator import MetadataBag

PACKAGE_NAMESPACE = "http://soap.sforce.com/2006/04/metadata"
DEFAULT_API_VERSION = "46.0"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

_VERSION_RE = re.compile(r"^\d+(\.\d+)?$")

Metadata = Union[MetadataBag, Mapping[str, Iterable[str]]]


def normalize_api_version(api_version: Optional[Union[str, int, float]]) -> str:
    """Integer versions gain a ".0" suffix; None or an empty string give the default."""
    if api_version is None or api_version == "":
        return DEFAULT_API_VERSION
    text = str(api_version).strip()
    if not _VERSION_RE.match(text):
        raise ValueError(f"Invalid API version: {api_version!r}")
    if "." not in text:
        text += ".0"
    return text


def package_writer(metadata: Metadata, api_version: Optional[Union[str, int, float]] = None) -> str:
    root = ET.Element("Package", {"xmlns": PACKAGE_NAMESPACE})

    for type_name, members in metadata.items():
        types_el = ET.SubElement(root, "types")
        for member in members:
            ET.SubElement(types_el, "members").text = member
        ET.SubElement(types_el, "name").text = type_name

    ET.SubElement(root, "version").text = normalize_api_version(api_version)

    ET.indent(root, space="  ")
    return XML_DECLARATION + "\n" + ET.tostring(root, encoding="unicode") + "\n"
