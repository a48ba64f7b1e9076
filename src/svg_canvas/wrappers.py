"""Wrapper for SVG elements."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING
from xml.etree import ElementTree as ET

from typing_extensions import Self, override

from svg_canvas.codegen import GradientStop, LinearGradient
from svg_canvas.path import compile_path
from svg_canvas.utils import as_float, filtered_tag, gradient_id_from_url, parse_offset

if TYPE_CHECKING:
    from svg_canvas.codegen import CodeGen
    from svg_canvas.path import ResolvedOperation, TransformContext

LOGGER = logging.getLogger(__name__)

DEFAULT_STOP_COLOR = "black"


class ElemSpan(ABC):
    """Abstract base class for SVG elements emitting canvas code."""

    def __init__(self, elem: ET.Element) -> None:
        """Initialize the element.

        Args:
            elem: The element to wrap.
        """
        self.elem = elem
        self.attr = elem.attrib

    @override
    def __repr__(self) -> str:
        elem_id = self.attr.get("id", "")
        id_suffix = f" (#{elem_id})" if elem_id else ""
        return f"{filtered_tag(self.tag)}{id_suffix}"

    @property
    def tag(self) -> str:
        """The tag of the element."""
        return self.elem.tag

    def fill_style(self, codegen: CodeGen) -> tuple[str, bool] | None:
        """The `fillStyle` value and if it is a raw gradient reference.

        Raises:
            UnknownGradientError: If the fill references an undefined gradient.
        """
        fill = self.attr.get("fill")
        if fill is None:
            return None

        gradient_id = gradient_id_from_url(fill)
        if gradient_id is not None:
            return codegen.resolve_gradient_var(gradient_id), True

        return fill, False

    def apply_common(self, codegen: CodeGen) -> None:
        """Emit the attributes shared by all drawable elements."""
        if style := self.fill_style(codegen):
            value, raw = style
            codegen.emit_assign("fillStyle", value, raw)

    @abstractmethod
    def enter(self, codegen: CodeGen, context: TransformContext) -> None:
        """Emit the code before the children are visited."""

    def leave(self, codegen: CodeGen, context: TransformContext) -> None:
        """Emit the code after the children are visited."""
        del codegen, context


class Svg(ElemSpan):
    """Root element, sizes the canvas."""

    @override
    def enter(self, codegen: CodeGen, context: TransformContext) -> None:
        width = as_float(self.attr.get("width"), codegen.width, "width")
        height = as_float(self.attr.get("height"), codegen.height, "height")
        codegen.width, codegen.height = width, height
        self.apply_common(codegen)


class Group(ElemSpan):
    """Group class. Children start at the origin."""

    @override
    def enter(self, codegen: CodeGen, context: TransformContext) -> None:
        context.begin_scope()

    @override
    def leave(self, codegen: CodeGen, context: TransformContext) -> None:
        context.end_scope()


class Path(ElemSpan):
    """Path class."""

    def compile(self, context: TransformContext) -> list[ResolvedOperation]:
        """Compile the path data in its own scope of the context.

        Raises:
            PathDataError: If the path data is malformed.
        """
        context.begin_scope()
        try:
            return compile_path(self.attr.get("d", ""), context)
        finally:
            context.end_scope()

    @override
    def enter(self, codegen: CodeGen, context: TransformContext) -> None:
        # resolve everything first, a broken path must not emit partial code
        operations = self.compile(context)
        style = self.fill_style(codegen)

        codegen.emit_call("beginPath")
        codegen.emit_operations(operations)
        if style:
            codegen.emit_assign("fillStyle", *style)
        codegen.emit_call("fill")
        codegen.emit_call("closePath")


class LinearGradientElem(ElemSpan):
    """Linear gradient definition."""

    def to_gradient(self) -> LinearGradient:
        """Read the gradient with its stops in document order.

        Raises:
            AttributeValueError: If a coordinate or an offset is unsupported.
        """
        stops = tuple(
            GradientStop(
                offset=parse_offset(stop.attrib.get("offset")),
                color=stop.attrib.get("stop-color", DEFAULT_STOP_COLOR),
            )
            for stop in self.elem.iter()
            if filtered_tag(stop.tag) == "stop"
        )
        x1, y1, x2, y2 = (
            as_float(self.attr.get(k), name=k) for k in ("x1", "y1", "x2", "y2")
        )

        return LinearGradient(self.attr["id"], x1, y1, x2, y2, stops)

    def define(self, codegen: CodeGen) -> Self:
        """Emit the gradient so fills can reference it.

        Gradients without an id cannot be referenced and are skipped.
        """
        if "id" not in self.attr:
            LOGGER.debug("Skipping %s without id", self)
            return self

        gradient = self.to_gradient()
        var = codegen.add_gradient(gradient)
        LOGGER.debug("Defined gradient %r as %s", gradient.id, var)
        return self

    @override
    def enter(self, codegen: CodeGen, context: TransformContext) -> None:
        self.define(codegen)
