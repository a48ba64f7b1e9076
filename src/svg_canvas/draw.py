"""Walk an SVG tree and convert it into a canvas program."""

from __future__ import annotations

import logging
from functools import partial
from typing import TYPE_CHECKING
from xml.etree import ElementTree as ET

import svg_canvas.wrappers as svg_classes
from svg_canvas.codegen import DEFAULT_RECEIVER, CodeGen
from svg_canvas.errors import AttributeValueError, PathDataError, UnknownGradientError
from svg_canvas.path import TransformContext
from svg_canvas.utils import assure_elem, filtered_tag, read_tree

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path

    from svg_canvas.wrappers import ElemSpan

LOGGER = logging.getLogger(__name__)

WRAPPED_CLASSES: dict[str, type[ElemSpan]] = {
    "svg": svg_classes.Svg,
    "g": svg_classes.Group,
    "path": svg_classes.Path,
    "linearGradient": svg_classes.LinearGradientElem,
}
"""Tags with an effect on the generated program."""

SKIPPED_SUBTREES = {"defs", "clipPath", "marker", "metadata", "title", "desc", "style"}
"""Tags whose children are never drawn."""

RECOVERABLE_ERRORS = (PathDataError, UnknownGradientError, AttributeValueError)
"""Errors skipping a single element when the walk is not strict."""

LEAF_TAGS = {"path", "linearGradient"}
"""Wrapped tags whose children are read by the wrapper itself, if at all."""


def get_class_from_tag(tag: str) -> type[ElemSpan] | None:
    """Get the class from the tag, None for tags without an effect."""
    return WRAPPED_CLASSES.get(tag)


def _outer_defs(elem: ET.Element) -> Iterator[ET.Element]:
    """Yield the `<defs>` sections not nested in another `<defs>`."""
    for child in elem:
        if filtered_tag(child.tag) == "defs":
            yield child
        else:
            yield from _outer_defs(child)


def _emit_or_skip(obj: ElemSpan, strict: bool, emit: Callable[[], object]) -> None:
    """Run `emit`, logging and skipping the element on errors unless `strict`."""
    try:
        emit()
    except RECOVERABLE_ERRORS as err:
        if strict:
            raise
        LOGGER.warning("Skipping %s: %s", obj, err)


def harvest_gradients(tree: ET.Element, codegen: CodeGen, strict: bool = True) -> None:
    """Define the linear gradients of every `<defs>` section once."""
    for defs in _outer_defs(tree):
        for elem in defs.iter():
            if filtered_tag(elem.tag) == "linearGradient":
                obj = svg_classes.LinearGradientElem(elem)
                _emit_or_skip(obj, strict, partial(obj.define, codegen))


def _visit(
    elem: ET.Element, codegen: CodeGen, context: TransformContext, strict: bool
) -> None:
    tag = filtered_tag(elem.tag)
    if tag in SKIPPED_SUBTREES:
        return

    cls = get_class_from_tag(tag)
    if cls is None:
        LOGGER.debug("Skipping unsupported tag %r", tag)
        for child in elem:
            _visit(child, codegen, context, strict)
        return

    obj = cls(elem)
    _emit_or_skip(obj, strict, partial(obj.enter, codegen, context))

    if tag not in LEAF_TAGS:
        for child in elem:
            _visit(child, codegen, context, strict)

    obj.leave(codegen, context)


def compile_tree(
    tree: ET.Element,
    codegen: CodeGen | None = None,
    context: TransformContext | None = None,
    strict: bool = True,
) -> CodeGen:
    """Emit the canvas code for an SVG tree.

    Gradients in `<defs>` are defined before any element is drawn, so fills
    may reference them regardless of document order.

    Args:
        tree: The root element.
        codegen: The generator to append to. A new one if omitted.
        context: The current point shared by the whole walk. A new one if
            omitted.
        strict: Raise on the first broken element. Otherwise broken elements are
            skipped with a warning, their children are still visited.

    Returns:
        The code generator holding the program.

    Raises:
        PathDataError: If a path cannot be compiled and `strict` is set.
        AttributeValueError: If a size, gradient coordinate or offset is
            unsupported and `strict` is set.
        UnknownGradientError: If a fill references an undefined gradient and
            `strict` is set.
    """
    if not assure_elem(tree):
        raise TypeError(f"Expected an element, got {type(tree).__name__}")

    if codegen is None:
        codegen = CodeGen()
    if context is None:
        context = TransformContext()

    harvest_gradients(tree, codegen, strict)
    _visit(tree, codegen, context, strict)

    return codegen


def svg_to_canvas_script(
    data: str | Path, receiver: str = DEFAULT_RECEIVER, strict: bool = True
) -> str:
    """Convert SVG markup or an SVG file into a canvas program.

    The program is a self-invoking function returning the rendered image as
    a data URL.
    """
    tree = read_tree(data)
    codegen = compile_tree(tree, CodeGen(receiver), strict=strict)
    return codegen.serialize()
