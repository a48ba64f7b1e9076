"""Tests the canvas program generator."""

from __future__ import annotations

import math
import re
from typing import Any

import numpy as np
import pytest

from svg_canvas import CodeGen, GradientStop, UnknownGradientError
from svg_canvas.codegen import stringify
from svg_canvas.path import compile_path


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("#000000", "'#000000'"),
        ("it's", "'it\\'s'"),
        (10, "10"),
        (10.0, "10"),
        (-2.5, "-2.5"),
        (0.1, "0.1"),
        (True, "true"),
        (False, "false"),
        (None, "null"),
        (math.nan, "NaN"),
        (math.inf, "Infinity"),
        (-math.inf, "-Infinity"),
        (np.float64(3.0), "3"),
        (np.int64(7), "7"),
        (np.bool_(True), "true"),
    ],
)
def test_stringify(value: Any, expected: str) -> None:
    assert stringify(value) == expected


def test_emit_call() -> None:
    gen = CodeGen()
    gen.emit_call("beginPath")
    gen.emit_call("moveTo", 10.0, 20.5)

    assert gen.statements == ("ctx.beginPath();", "ctx.moveTo(10, 20.5);")


def test_emit_assign() -> None:
    gen = CodeGen()
    gen.emit_assign("fillStyle", "#000000")
    gen.emit_assign("fillStyle", "gradient0", raw_literal=True)

    assert gen.statements == (
        "ctx.fillStyle = '#000000';",
        "ctx.fillStyle = gradient0;",
    )
    assert "ctx.fillStyle = '#000000';" in gen.serialize()


def test_emit_operations() -> None:
    gen = CodeGen()
    gen.emit_operations(compile_path("M 1 2 c 1,2,3,4,5,6"))

    assert gen.statements == (
        "ctx.moveTo(1, 2);",
        "ctx.bezierCurveTo(2, 4, 4, 6, 6, 8);",
        "ctx.stroke();",
    )


def test_linear_gradient() -> None:
    gen = CodeGen()
    var = gen.define_linear_gradient(
        "sky",
        0,
        0,
        100,
        0,
        GradientStop(0, "#ffffff"),
        GradientStop(0.5, "#336699"),
    )

    assert var == "gradient0"
    assert gen.resolve_gradient_var("sky") == "gradient0"
    assert gen.statements == (
        "const gradient0 = ctx.createLinearGradient(0, 0, 100, 0);",
        "gradient0.addColorStop(0, '#ffffff');",
        "gradient0.addColorStop(0.5, '#336699');",
    )

    gen.emit_assign("fillStyle", gen.resolve_gradient_var("sky"), raw_literal=True)
    assert gen.statements[-1] == "ctx.fillStyle = gradient0;"


def test_redefined_gradient_last_wins() -> None:
    gen = CodeGen()
    gen.define_linear_gradient("sky", 0, 0, 1, 1)
    gen.define_linear_gradient("sky", 0, 0, 2, 2)

    assert gen.resolve_gradient_var("sky") == "gradient1"


def test_unknown_gradient() -> None:
    gen = CodeGen()

    with pytest.raises(UnknownGradientError, match="'missing'") as exc_info:
        gen.resolve_gradient_var("missing")

    assert exc_info.value.gradient_id == "missing"
    assert isinstance(exc_info.value, LookupError)


def test_serialize() -> None:
    gen = CodeGen(width=320, height=240)
    gen.emit_call("fill")

    program = gen.serialize()

    assert program.startswith("(function () {\n\n// Initialize canvas\n")
    assert program.endswith("ctx.fill();\nreturn canvas.toDataURL();\n\n})()")
    assert 'canvas.setAttribute("width", 320);' in program
    assert 'canvas.setAttribute("height", 240);' in program
    assert 'const ctx = canvas.getContext("2d");' in program


def test_serialize_is_idempotent() -> None:
    gen = CodeGen()
    gen.emit_call("beginPath")
    gen.emit_assign("fillStyle", "#000000")

    first = gen.serialize()
    second = gen.serialize()

    assert first == second
    assert str(gen) == first
    assert first.count("return canvas.toDataURL();") == 1
    assert len(gen.statements) == 2


def test_size_is_mutable_until_serialization() -> None:
    gen = CodeGen()
    assert 'canvas.setAttribute("width", 800);' in gen.serialize()

    gen.width = 64
    assert 'canvas.setAttribute("width", 64);' in gen.serialize()


def test_custom_receiver() -> None:
    gen = CodeGen("c2d")
    gen.emit_call("fill")

    program = gen.serialize()
    assert 'const c2d = canvas.getContext("2d");' in program
    assert "c2d.fill();" in program


@pytest.mark.parametrize(
    "receiver",
    ["canvas", "id", "gradient0", "var", "2d", "my-ctx", "", "ctx;"],
)
def test_invalid_receiver(receiver: str) -> None:
    with pytest.raises(ValueError, match=re.escape(repr(receiver))):
        CodeGen(receiver)


@pytest.mark.parametrize("receiver", ["ctx", "c2d", "_ctx", "gradient", "context2d"])
def test_valid_receiver(receiver: str) -> None:
    gen = CodeGen(receiver)
    program = gen.serialize()

    assert program.count(f"const {receiver} = ") == 1
