"""Lambda sections for rendering scaffolding templates.

The package exposes a fixed set of text operations (segment slicing,
rejoining, case conversion and dotted-name normalisation) as Mustache lambda
sections, builds the rendering context for a scaffolding run and ships a
small scaffolder that renders both file names and file contents.
"""

from __future__ import annotations

from .arguments import parse_fields, parse_index_pair, rejoin_segments, slice_segments
from .config import InitTemplate, ScaffoldingConfig, TemplateFile, load_template
from .errors import ArgumentCountError, StencilError, TemplateRenderingError
from .naming import base_name, camel_case, kebab_case, pascal_case
from .operations import CASING, OPERATIONS
from .scaffold import ProjectScaffolder
from .template import TemplateRenderer, create_context, render

__all__ = [
    "ArgumentCountError",
    "CASING",
    "InitTemplate",
    "OPERATIONS",
    "ProjectScaffolder",
    "ScaffoldingConfig",
    "StencilError",
    "TemplateFile",
    "TemplateRenderer",
    "TemplateRenderingError",
    "base_name",
    "camel_case",
    "create_context",
    "kebab_case",
    "load_template",
    "parse_fields",
    "parse_index_pair",
    "pascal_case",
    "rejoin_segments",
    "render",
    "slice_segments",
]

__version__ = "0.1.0"
