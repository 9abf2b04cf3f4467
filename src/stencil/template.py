"""Mustache rendering with lambda section operations."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import partial
from pathlib import Path
from typing import Any, Mapping

import pystache
from pystache.context import ContextStack
from pystache.renderengine import RenderEngine

from .config import ScaffoldingConfig
from .errors import TemplateRenderingError
from .naming import base_name
from .operations import CASING, OPERATIONS, Operation, Resolver

__all__ = [
    "ScopedRenderEngine",
    "TemplateRenderer",
    "TemplateRenderingError",
    "create_context",
    "render",
]


LOGGER = logging.getLogger(__name__)


def create_context(config: ScaffoldingConfig) -> dict[str, Any]:
    """Build the rendering context for one scaffolding run.

    Sources are merged in order, later ones winning on key collisions:
    template static fields (without ``libraries``), configuration fields, the
    derived ``folderName``, the operations and the ``casing`` operations.
    """

    context: dict[str, Any] = config.template.model_dump(
        mode="json", by_alias=True, exclude={"libraries"}
    )
    context.update(config.context_fields())
    context["folderName"] = base_name(config.directory)
    context.update({name: factory() for name, factory in OPERATIONS.items()})
    context["casing"] = {name: factory() for name, factory in CASING.items()}
    return context


def _invoke(operation: Operation, resolve: Resolver, text: str) -> str:
    LOGGER.debug("lambda %s(%r)", getattr(operation, "__name__", operation), text)
    return operation(text, resolve)


class ScopedRenderEngine(RenderEngine):
    """Render engine that hands section lambdas a resolver for their scope.

    pystache calls section lambdas with the raw inner text only. Section data
    is fetched with the live context stack right before the lambda runs, so
    each operation is bound there to a resolver rendering against that same
    stack: inside ``{{#libraries}}`` the resolver sees the current library as
    ``{{.}}``.
    """

    def fetch_section_data(self, context: ContextStack, name: str) -> list[Any]:
        data = super().fetch_section_data(context, name)

        def resolve(text: str) -> str:
            return self.render(text, context)

        return [
            partial(_invoke, value, resolve)
            if callable(value) and not isinstance(value, type)
            else value
            for value in data
        ]


class _ScopedRenderer(pystache.Renderer):
    def _make_render_engine(self) -> RenderEngine:
        engine = super()._make_render_engine()
        return ScopedRenderEngine(
            literal=engine.literal,
            escape=engine.escape,
            resolve_context=engine.resolve_context,
            resolve_partial=engine.resolve_partial,
            to_str=engine.to_str,
        )


@dataclass(slots=True)
class TemplateRenderer:
    """Render Mustache templates whose context may hold lambda operations.

    Callables in the context follow the ``(text, render)`` contract of
    :mod:`stencil.operations`; see :class:`ScopedRenderEngine`.

    Output is not HTML-escaped since the results are file paths and source
    files.
    """

    engine: pystache.Renderer = field(
        default_factory=lambda: _ScopedRenderer(escape=lambda u: u)
    )

    def render_string(self, template: str, context: Mapping[str, Any]) -> str:
        """Render ``template`` using ``context``."""

        return self.engine.render(template, context)

    def render_file(
        self,
        template_path: str | Path,
        context: Mapping[str, Any],
        *,
        target: str | Path | None = None,
        encoding: str = "utf-8",
    ) -> str:
        """Render ``template_path`` and optionally write the result to ``target``."""

        template_path = Path(template_path)
        if not template_path.is_file():
            raise TemplateRenderingError(f"template not found: {template_path}")

        text = template_path.read_text(encoding=encoding)
        rendered = self.render_string(text, context)

        if target is not None:
            target_path = Path(target)
            target_path.parent.mkdir(parents=True, exist_ok=True)
            target_path.write_text(rendered, encoding=encoding)
            LOGGER.debug("rendered %s -> %s", template_path, target_path)

        return rendered


_DEFAULT_RENDERER = TemplateRenderer()


def render(template_text: str, context: Mapping[str, Any]) -> str:
    """Render ``template_text`` with the default :class:`TemplateRenderer`."""

    return _DEFAULT_RENDERER.render_string(template_text, context)
