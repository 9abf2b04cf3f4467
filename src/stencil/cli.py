"""Command line interface for the stencil utilities."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Sequence

from .config import InitTemplate, ScaffoldingConfig, load_template
from .errors import StencilError
from .scaffold import ProjectScaffolder
from .template import TemplateRenderer, create_context

TEMPLATE_DEFINITION = "template.json"


def _parse_parameters(values: Iterable[str]) -> dict[str, str]:
    """Turn repeated ``-p NAME=VALUE`` options into the ``parameters`` mapping."""

    parameters: dict[str, str] = {}
    for option in values:
        name, separator, value = option.partition("=")
        name = name.strip()
        if not separator:
            raise argparse.ArgumentTypeError(
                f"parameter {option!r} has no value; use -p NAME=VALUE"
            )
        if not name:
            raise argparse.ArgumentTypeError(f"parameter {option!r} has an empty name")
        parameters[name] = value
    return parameters


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render scaffolding templates with lambda sections")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init", help="scaffold a project from a template directory")
    init_parser.add_argument(
        "template_dir", type=Path, help=f"Directory containing {TEMPLATE_DEFINITION} and its files"
    )
    init_parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=Path.cwd(),
        help="Target directory where the project should be created",
    )
    init_parser.add_argument("--name", help="Project name (defaults to the target folder name)")
    init_parser.add_argument(
        "-p",
        "--parameter",
        metavar="NAME=VALUE",
        action="append",
        default=[],
        help="Template parameters, available as {{parameters.NAME}}",
    )
    init_parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Overwrite existing files instead of failing",
    )
    init_parser.add_argument(
        "--no-gitignore", action="store_true", help="Do not add a default .gitignore"
    )

    render_parser = subparsers.add_parser(
        "render", help="render a single template file with lambda sections"
    )
    render_parser.add_argument("template", type=Path, help="Path to the template file")
    render_parser.add_argument(
        "-p",
        "--parameter",
        metavar="NAME=VALUE",
        action="append",
        default=[],
        help="Template parameters, available as {{parameters.NAME}}",
    )
    render_parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=Path.cwd(),
        help="Directory used to derive {{folderName}}",
    )
    render_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write the rendered template to this path instead of stdout",
    )

    return parser


def _handle_init(args: argparse.Namespace) -> int:
    template = load_template(args.template_dir / TEMPLATE_DEFINITION)
    config = ScaffoldingConfig(
        template=template,
        directory=str(args.directory),
        name=args.name or args.directory.resolve().name,
        libraries=template.libraries,
        parameters=_parse_parameters(args.parameter),
        include_gitignore=not args.no_gitignore,
    )
    scaffolder = ProjectScaffolder(TemplateRenderer())
    project_path = scaffolder.create(config, args.template_dir, force=args.force)
    print(f"Project created at {project_path}")
    return 0


def _handle_render(args: argparse.Namespace) -> int:
    config = ScaffoldingConfig(
        template=InitTemplate(title=args.template.name),
        directory=str(args.directory),
        parameters=_parse_parameters(args.parameter),
    )
    renderer = TemplateRenderer()
    rendered = renderer.render_file(args.template, create_context(config), target=args.output)
    if args.output is None:
        sys.stdout.write(rendered)
        if not rendered.endswith("\n"):
            sys.stdout.write("\n")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    handlers = {"init": _handle_init, "render": _handle_render}
    try:
        return handlers[args.command](args)
    except (StencilError, ValueError, argparse.ArgumentTypeError) as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
