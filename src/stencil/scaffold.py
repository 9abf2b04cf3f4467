"""Project scaffolding helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .config import ScaffoldingConfig
from .errors import TemplateRenderingError
from .template import TemplateRenderer, create_context

__all__ = ["GITIGNORE_TEMPLATE", "ProjectScaffolder"]


LOGGER = logging.getLogger(__name__)


GITIGNORE_TEMPLATE = """# Dependencies
node_modules/

# Build output
tsp-output/
dist/
__pycache__/
"""


@dataclass(slots=True)
class ProjectScaffolder:
    """Render an init template's files into a target directory."""

    renderer: TemplateRenderer

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    def create(
        self,
        config: ScaffoldingConfig,
        template_dir: str | Path,
        *,
        force: bool = False,
    ) -> Path:
        """Create the project described by ``config`` inside ``config.directory``.

        Both the destination path and the contents of every template file are
        rendered with the same context, so file names may use lambdas such as
        ``{{#normalizeToPath}}...{{/normalizeToPath}}``.
        """

        template_dir = Path(template_dir)
        if not template_dir.is_dir():
            raise TemplateRenderingError(f"template directory not found: {template_dir}")

        target_path = Path(config.directory).expanduser().resolve()
        context = create_context(config)

        files: list[tuple[str, str]] = []
        for template_file in config.template.files:
            source = template_dir / template_file.path
            if not source.is_file():
                raise TemplateRenderingError(f"template file not found: {source}")
            destination = template_file.destination or template_file.path
            files.append((destination, source.read_text(encoding="utf-8")))

        if config.include_gitignore and not any(
            Path(relative).name == ".gitignore" for relative, _ in files
        ):
            files.append((".gitignore", GITIGNORE_TEMPLATE))

        # Render and check everything before touching the target directory.
        rendered_files: list[tuple[Path, str]] = []
        for relative_template, template in files:
            relative_path = self.renderer.render_string(relative_template, context)
            rendered = self.renderer.render_string(template, context)
            rendered_files.append((target_path / relative_path, rendered))

        if not force:
            for destination, _ in rendered_files:
                if destination.exists():
                    raise FileExistsError(f"{destination} already exists")

        target_path.mkdir(parents=True, exist_ok=True)
        for destination, rendered in rendered_files:
            destination.parent.mkdir(parents=True, exist_ok=True)
            destination.write_text(rendered, encoding="utf-8")
            LOGGER.debug("wrote %s", destination)

        LOGGER.info("scaffolded %d file(s) from %r into %s", len(files), config.template.title, target_path)
        return target_path
