"""Tests for the command-line interface (logigen.cli).

Covers:
- Successful generation and exit codes
- User errors (bad name, unsupported combination, write failures)
- Internal errors
- Settings file and environment precedence
- The ``templates`` listing
"""

from __future__ import annotations

import io
import json
import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from logigen.cli import EXIT_INTERNAL_ERROR, EXIT_OK, EXIT_USER_ERROR, build_parser, load_settings, main
from logigen.errors import TemplateNotRegistered


def run_cli(*argv: str) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(list(argv))
    return exc_info.value.code


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every CLI test from an empty directory with a clean environment."""
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("LOGIGEN_"):
            monkeypatch.delenv(key)
    return tmp_path


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


class TestParser:
    @pytest.mark.unit
    def test_defaults(self):
        args = build_parser().parse_args(["generate", "model", "--name", "post"])
        assert args.type == "model"
        assert args.path is None
        assert args.framework is None
        assert args.typescript is None
        assert args.with_test is None
        assert args.with_story is None

    @pytest.mark.unit
    def test_boolean_flags(self):
        args = build_parser().parse_args(
            ["generate", "component", "-n", "card", "-t", "--no-test", "--story"]
        )
        assert args.typescript is True
        assert args.with_test is False
        assert args.with_story is True

    @pytest.mark.unit
    def test_no_typescript_flag(self):
        args = build_parser().parse_args(["generate", "service", "-n", "post", "--no-typescript"])
        assert args.typescript is False

    @pytest.mark.unit
    def test_unknown_type(self):
        assert run_cli("generate", "widget", "--name", "x") == 2

    @pytest.mark.unit
    def test_name_required(self):
        assert run_cli("generate", "model") == 2


# ---------------------------------------------------------------------------
# generate
# ---------------------------------------------------------------------------


class TestGenerateCommand:
    @pytest.mark.unit
    def test_model(self, isolated_cwd, capsys):
        code = run_cli(
            "generate", "model", "--name", "blog post", "--typescript",
            "--fields", "title:string, views:number", "--yes",
        )
        assert code == EXIT_OK
        target = isolated_cwd / "model" / "blog-post.ts"
        assert "interface BlogPost" in target.read_text(encoding="utf-8")
        assert (isolated_cwd / "model" / "blog-post.test.ts").exists()
        assert "Generated model: blog post" in capsys.readouterr().out

    @pytest.mark.unit
    def test_custom_path(self, isolated_cwd):
        code = run_cli("generate", "service", "-n", "order", "-p", "src", "--no-test", "-y")
        assert code == EXIT_OK
        assert (isolated_cwd / "src" / "service" / "order.js").exists()
        assert not (isolated_cwd / "src" / "service" / "order.test.js").exists()

    @pytest.mark.unit
    def test_hook_outside_react(self, isolated_cwd, capsys):
        code = run_cli("generate", "hook", "--name", "fetch data", "--framework", "vue", "--yes")
        assert code == EXIT_USER_ERROR
        err = capsys.readouterr().err
        assert "hook" in err and "vue" in err
        assert not (isolated_cwd / "hook").exists()

    @pytest.mark.unit
    def test_invalid_name(self, capsys):
        assert run_cli("generate", "model", "--name", "123", "--yes") == EXIT_USER_ERROR
        assert "Invalid name" in capsys.readouterr().err

    @pytest.mark.unit
    def test_invalid_fields(self, capsys):
        code = run_cli("generate", "model", "--name", "post", "--fields", "a,,b", "--yes")
        assert code == EXIT_USER_ERROR
        assert "Invalid field" in capsys.readouterr().err

    @pytest.mark.unit
    def test_no_overwrite(self, isolated_cwd):
        assert run_cli("generate", "route", "-n", "category", "--no-test", "-y") == EXIT_OK
        assert run_cli("generate", "route", "-n", "category", "--no-test", "-y", "--no-overwrite") == EXIT_USER_ERROR

    @pytest.mark.unit
    def test_dry_run(self, isolated_cwd, capsys):
        code = run_cli("generate", "component", "-n", "card", "-y", "--dry-run")
        assert code == EXIT_OK
        assert not (isolated_cwd / "component").exists()
        out = capsys.readouterr().out
        assert "Dry run: would generate component: card" in out
        assert "✨ Generated" not in out

    @pytest.mark.unit
    def test_closed_stdin_without_yes(self, isolated_cwd, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", io.StringIO(""))
        code = run_cli("generate", "model", "--name", "post")
        assert code == EXIT_USER_ERROR
        assert "--yes" in capsys.readouterr().err
        assert not (isolated_cwd / "model").exists()

    @pytest.mark.unit
    def test_missing_companion_is_a_warning(self, isolated_cwd, capsys):
        code = run_cli("generate", "component", "-n", "card", "-f", "solid", "-y")
        assert code == EXIT_USER_ERROR

        with patch("logigen.scaffolder.generator.TemplateResolver.resolve_companion", return_value=None):
            code = run_cli("generate", "component", "-n", "card", "-y")
        assert code == EXIT_OK
        assert "Warning" in capsys.readouterr().err
        assert (isolated_cwd / "component" / "card.js").exists()

    @pytest.mark.unit
    def test_internal_error_exit_code(self, capsys):
        with patch(
            "logigen.scaffolder.generator.TemplateRenderer.render",
            side_effect=TemplateNotRegistered("react/component.js.j2"),
        ):
            code = run_cli("generate", "component", "-n", "card", "-y")
        assert code == EXIT_INTERNAL_ERROR
        assert "Internal error" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


class TestSettingsPrecedence:
    @pytest.mark.unit
    def test_config_file_in_cwd(self, isolated_cwd):
        (isolated_cwd / ".logigen.json").write_text(json.dumps({"typescript": True}), encoding="utf-8")
        assert run_cli("generate", "service", "-n", "order", "--no-test", "-y") == EXIT_OK
        assert (isolated_cwd / "service" / "order.ts").exists()

    @pytest.mark.unit
    def test_flag_beats_env(self, isolated_cwd, monkeypatch):
        monkeypatch.setenv("LOGIGEN_FRAMEWORK", "vue")
        assert run_cli("generate", "component", "-n", "card", "-f", "react", "-y", "--no-test", "--no-story") == EXIT_OK
        content = (isolated_cwd / "component" / "card.js").read_text(encoding="utf-8")
        assert "className" in content

    @pytest.mark.unit
    def test_no_typescript_beats_env_and_file(self, isolated_cwd, monkeypatch):
        monkeypatch.setenv("LOGIGEN_TYPESCRIPT", "1")
        (isolated_cwd / ".logigen.json").write_text(json.dumps({"typescript": True}), encoding="utf-8")
        assert run_cli("generate", "service", "-n", "post", "--no-test", "-y", "--no-typescript") == EXIT_OK
        assert (isolated_cwd / "service" / "post.js").exists()
        assert not (isolated_cwd / "service" / "post.ts").exists()

    @pytest.mark.unit
    def test_file_beats_env(self, isolated_cwd, monkeypatch):
        monkeypatch.setenv("LOGIGEN_FRAMEWORK", "vue")
        config = isolated_cwd / "custom.json"
        config.write_text(json.dumps({"framework": "react"}), encoding="utf-8")
        assert load_settings(str(config)).framework == "react"
        assert load_settings(None).framework == "vue"

    @pytest.mark.unit
    def test_missing_config_file(self, capsys):
        code = run_cli("generate", "model", "-n", "post", "-y", "--config", "nope.json")
        assert code == EXIT_USER_ERROR
        assert "could not load settings" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# templates
# ---------------------------------------------------------------------------


class TestTemplatesCommand:
    @pytest.mark.unit
    def test_lists_all(self, capsys):
        assert run_cli("templates") == EXIT_OK
        out = capsys.readouterr().out
        assert "common/model.ts.j2" in out
        assert "22 template(s)" in out

    @pytest.mark.unit
    def test_prefix(self, capsys):
        assert run_cli("templates", "--prefix", "express") == EXIT_OK
        assert "4 template(s)" in capsys.readouterr().out

    @pytest.mark.unit
    def test_unknown_prefix(self):
        assert run_cli("templates", "--prefix", "angular") == EXIT_USER_ERROR
