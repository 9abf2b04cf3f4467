"""Custom exception types used by the stencil templating helpers."""

from __future__ import annotations


class StencilError(RuntimeError):
    """Base class for errors raised while preparing or rendering templates."""


class ArgumentCountError(StencilError, ValueError):
    """Raised when a lambda section argument has the wrong number of fields."""

    def __init__(self, expected: int, actual: int, text: str) -> None:
        self.expected = expected
        self.actual = actual
        self.text = text
        super().__init__(
            f"expected {expected}, got {actual} space-separated arguments: {text!r}"
        )


class TemplateRenderingError(StencilError):
    """Raised when the renderer cannot evaluate a template."""
