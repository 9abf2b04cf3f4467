"""Configuration models shared by the scaffolder and CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .errors import TemplateRenderingError

__all__ = ["InitTemplate", "ScaffoldingConfig", "TemplateFile", "load_template"]


class TemplateFile(BaseModel):
    """A file shipped with an init template."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: str = Field(..., description="Source path relative to the template directory.")
    destination: str | None = Field(
        None,
        description="Output path template relative to the target directory. Defaults to ``path``.",
    )


class InitTemplate(BaseModel):
    """Description of a project template.

    Fields not declared here are kept and exposed to templates as static
    values, which lets a template ship its own defaults.
    """

    model_config = ConfigDict(
        extra="allow", alias_generator=to_camel, populate_by_name=True
    )

    title: str = Field(..., description="Human-readable template name.")
    description: str = Field("", description="Short summary of what the template creates.")
    libraries: List[str] = Field(default_factory=list, description="Libraries the template depends on.")
    files: List[TemplateFile] = Field(default_factory=list, description="Files to render into the project.")


class ScaffoldingConfig(BaseModel):
    """Everything known about a single scaffolding run.

    Attributes
    ----------
    template:
        The template being instantiated.
    directory:
        Target directory. Its final component becomes ``folderName`` in the
        rendering context.
    name:
        Project name chosen by the user.
    parameters:
        Free-form values such as ``ServiceNamespace`` referenced from
        templates as ``{{parameters.ServiceNamespace}}``.
    """

    model_config = ConfigDict(
        extra="allow", alias_generator=to_camel, populate_by_name=True
    )

    template: InitTemplate
    directory: str
    name: str = ""
    base_uri: str = ""
    libraries: List[str] = Field(default_factory=list)
    parameters: Dict[str, Any] = Field(default_factory=dict)
    include_gitignore: bool = True

    def context_fields(self) -> Dict[str, Any]:
        """Return explicitly set configuration values keyed the way templates reference them.

        Fields left at their defaults are omitted so they never shadow a value
        the template declares itself.
        """

        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


def load_template(path: str | Path) -> InitTemplate:
    """Load an :class:`InitTemplate` from a JSON file."""

    path = Path(path)
    if not path.is_file():
        raise TemplateRenderingError(f"template definition not found: {path}")
    return InitTemplate.model_validate_json(path.read_text(encoding="utf-8"))
