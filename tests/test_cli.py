from __future__ import annotations

import argparse
import json
from pathlib import Path

import pytest

from stencil.cli import _parse_parameters, main


def test_parse_parameters():
    context = _parse_parameters(["ServiceNamespace=Azure.Data", "version=1.0"])
    assert context == {"ServiceNamespace": "Azure.Data", "version": "1.0"}

    with pytest.raises(argparse.ArgumentTypeError):
        _parse_parameters(["invalid"])


def test_cli_init_creates_project(tmp_path: Path):
    template_dir = tmp_path / "template"
    template_dir.mkdir()
    (template_dir / "template.json").write_text(
        json.dumps({"title": "Library", "files": [{"path": "README.md"}]}),
        encoding="utf-8",
    )
    (template_dir / "README.md").write_text("# {{name}} ({{folderName}})", encoding="utf-8")
    project_dir = tmp_path / "my-service"

    exit_code = main(["init", str(template_dir), "--directory", str(project_dir)])

    assert exit_code == 0
    assert (project_dir / "README.md").read_text(encoding="utf-8") == "# my-service (my-service)"
    assert (project_dir / ".gitignore").exists()


def test_cli_render_writes_to_output(tmp_path: Path):
    template_path = tmp_path / "template.txt"
    template_path.write_text(
        "{{#rejoin}}. / 1, {{parameters.ServiceNamespace}}{{/rejoin}}", encoding="utf-8"
    )
    output_path = tmp_path / "output.txt"
    exit_code = main(
        [
            "render",
            str(template_path),
            "-p",
            "ServiceNamespace=Azure.Messaging.EventGrid",
            "-o",
            str(output_path),
        ]
    )
    assert exit_code == 0
    assert output_path.read_text(encoding="utf-8") == "Messaging/EventGrid"


def test_cli_render_reports_argument_errors(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    template_path = tmp_path / "template.txt"
    template_path.write_text("{{#slice}}1,-1 a.b.c{{/slice}}", encoding="utf-8")

    exit_code = main(["render", str(template_path)])

    assert exit_code == 1
    assert "expected 3, got 2" in capsys.readouterr().err


def test_parse_parameters_keeps_equals_in_values():
    assert _parse_parameters(["Query=a=b"]) == {"Query": "a=b"}


def test_parse_parameters_rejects_empty_names():
    with pytest.raises(argparse.ArgumentTypeError, match="empty name"):
        _parse_parameters([" =value"])
