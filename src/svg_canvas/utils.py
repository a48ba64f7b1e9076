"""Functions for reading SVG trees and attribute values."""

from __future__ import annotations

import math
import re
from pathlib import Path
from typing import TypeGuard
from xml.etree import ElementTree as ET

from defusedxml.ElementTree import fromstring

from svg_canvas.errors import AttributeValueError

GRADIENT_URL_PATTERN = re.compile(r"^\s*url\(\s*#([^)\s]+)\s*\)\s*$")
"""A regex pattern to match a paint server reference like `url(#id)`."""


def save_parse(data: str) -> ET.Element:
    """Save and parse an SVG string."""
    return fromstring(data)  # type: ignore[no-any-return]


def assure_elem(elem: object) -> TypeGuard[ET.Element]:
    """Assure that the element is an `ET.Element`."""
    return isinstance(elem, ET.Element)


def read_tree(data: str | Path) -> ET.Element:
    """Read an SVG tree from a file or markup."""
    if isinstance(data, Path):
        data = data.read_text("utf-8")

    return save_parse(data)


def filtered_tag(tag: str) -> str:
    """Get the tag without the provider.

    Examples:
        >>> filtered_tag("{http://www.w3.org/2000/svg}path")
        'path'
        >>> filtered_tag("path")
        'path'
    """
    return re.sub(r"\{.*\}", "", tag)


def _finite_float(text: str, name: str, value: str) -> float:
    """Parse a finite float, raising `AttributeValueError` otherwise."""
    try:
        number = float(text)
    except ValueError:
        raise AttributeValueError(name, value) from None

    if not math.isfinite(number):
        raise AttributeValueError(name, value)
    return number


def as_float(value: str | None, default: float = 0.0, name: str = "length") -> float:
    """Parse a length attribute without the 'px' suffix.

    Percentages and other units are not supported.

    Examples:
        >>> as_float("12px")
        12.0
        >>> as_float(None, 800)
        800

    Raises:
        AttributeValueError: If the value is not a plain or pixel length.
    """
    if value is None or not value.strip():
        return default
    return _finite_float(value.strip().removesuffix("px"), name, value)


def parse_offset(value: str | None, name: str = "offset") -> float:
    """Parse the offset of a gradient stop, either a fraction or a percentage.

    Examples:
        >>> parse_offset("50%")
        0.5
        >>> parse_offset("0.25")
        0.25

    Raises:
        AttributeValueError: If the value is not a number or percentage.
    """
    if value is None or not value.strip():
        return 0.0

    text = value.strip()
    if text.endswith("%"):
        return _finite_float(text.removesuffix("%"), name, value) / 100
    return _finite_float(text, name, value)


def gradient_id_from_url(value: str) -> str | None:
    """Get the id referenced by `url(#id)`, or None for plain colours.

    Examples:
        >>> gradient_id_from_url("url(#sky)")
        'sky'
        >>> gradient_id_from_url("#336699") is None
        True
    """
    match = GRADIENT_URL_PATTERN.match(value)
    if match is None:
        return None
    return match.group(1)
