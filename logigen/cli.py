"""Command-line interface.

Examples::

    logigen generate component --name "user profile" --typescript
    logigen generate model --name "blog post" --fields "title, views:number" --yes
    logigen generate route --name category --path src
    logigen templates --prefix react
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from logigen import __version__
from logigen.config import DEFAULT_CONFIG_FILE, Settings
from logigen.errors import InternalError, LogigenError
from logigen.models import KNOWN_FRAMEWORKS, ArtifactType
from logigen.scaffolder import CodeGenerator, GenerationOptions, TemplateRenderer
from logigen.utils import (
    console,
    print_error,
    print_info,
    print_success,
    print_summary_table,
    print_warning,
)

EXIT_OK = 0
EXIT_USER_ERROR = 1
EXIT_INTERNAL_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="logigen",
        description="Generate components, hooks, services, models, controllers and routes.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  logigen generate component --name 'user profile' --typescript\n"
            "  logigen generate model --name 'blog post' --fields 'title, views:number'\n"
            "  logigen generate route --name category --path src\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    gen = subparsers.add_parser("generate", help="Generate a code artifact")
    gen.add_argument(
        "type",
        choices=[t.value for t in ArtifactType],
        help="Artifact type to generate",
    )
    gen.add_argument("--name", "-n", required=True, help="Name of the item to generate")
    gen.add_argument("--path", "-p", default=None, help="Base path for generation (default: .)")
    gen.add_argument(
        "--framework", "-f",
        default=None,
        help=f"Framework to use: {', '.join(KNOWN_FRAMEWORKS)} (default: react)",
    )
    gen.add_argument(
        "--typescript", "-t",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Generate TypeScript instead of JavaScript (--no-typescript forces JavaScript)",
    )
    gen.add_argument("--fields", default=None, help="Comma-separated fields, e.g. 'title, views:number'")
    gen.add_argument(
        "--test",
        dest="with_test",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Generate a test file (asked when omitted)",
    )
    gen.add_argument(
        "--story",
        dest="with_story",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Generate a Storybook story for components (asked when omitted)",
    )
    gen.add_argument("--yes", "-y", action="store_true", help="Accept defaults, ask nothing")
    gen.add_argument(
        "--no-overwrite",
        action="store_true",
        help="Fail instead of replacing an existing file",
    )
    gen.add_argument("--dry-run", action="store_true", help="Render without writing files")
    gen.add_argument("--config", default=None, help=f"Settings file (default: {DEFAULT_CONFIG_FILE} if present)")
    gen.add_argument("--verbose", "-v", action="store_true", help="Show template resolution details")

    tpl = subparsers.add_parser("templates", help="List registered templates")
    tpl.add_argument("--prefix", default="", help="Only list templates under this family, e.g. 'react'")

    return parser


def load_settings(config_path: Optional[str]) -> Settings:
    """Environment settings overlaid with the JSON settings file, if any."""
    settings = Settings.from_env()
    path = Path(config_path) if config_path else Path(DEFAULT_CONFIG_FILE)
    if config_path or path.exists():
        settings = settings.merged_with_file(path)
    return settings


def _run_generate(args: argparse.Namespace) -> int:
    try:
        settings = load_settings(args.config)
    except (OSError, ValidationError) as exc:
        print_error(f"Error: could not load settings: {exc}")
        return EXIT_USER_ERROR

    updates: dict[str, bool] = {}
    if args.yes:
        updates["interactive"] = False
    if args.no_overwrite:
        updates["overwrite"] = False
    if args.verbose:
        updates["verbose"] = True
    settings = settings.model_copy(update=updates)

    options = GenerationOptions(
        name=args.name,
        path=args.path,
        framework=args.framework,
        typescript=args.typescript,
        fields=args.fields,
        with_test=args.with_test,
        with_story=args.with_story,
    )
    generator = CodeGenerator(settings)

    try:
        result = asyncio.run(generator.generate(args.type, options, dry_run=args.dry_run))
    except InternalError as exc:
        print_error(f"Internal error: {exc}")
        return EXIT_INTERNAL_ERROR
    except LogigenError as exc:
        print_error(f"Error: {exc}")
        return EXIT_USER_ERROR
    except KeyboardInterrupt:
        print_error("Error: interrupted")
        return EXIT_USER_ERROR

    for warning in result.warnings:
        print_warning(f"Warning: {warning}")

    verb = "Would generate" if args.dry_run else "Generated"
    if settings.verbose or args.dry_run:
        print_summary_table(
            {label: str(path) for label, path in (
                ("main", result.main_path),
                ("test", result.test_path),
                ("story", result.story_path),
            ) if path is not None},
            title=f"{verb} {result.artifact_type.value}",
        )
    if args.dry_run:
        print_info(f"Dry run: would generate {result.artifact_type.value}: {args.name} (nothing was written)")
    else:
        print_success(f"✨ Generated {result.artifact_type.value}: {args.name}")
    return EXIT_OK


def _run_templates(args: argparse.Namespace) -> int:
    renderer = TemplateRenderer()
    templates = renderer.list_templates(args.prefix)
    if not templates:
        print_warning(f"No templates under '{args.prefix}'")
        return EXIT_USER_ERROR
    print_summary_table(
        {template_id: template_id.split("/", 1)[0] for template_id in templates},
        title="Registered templates",
    )
    console.print(f"{len(templates)} template(s)")
    return EXIT_OK


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entry point for ``logigen`` and ``python -m logigen``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "generate":
        code = _run_generate(args)
    else:
        code = _run_templates(args)
    sys.exit(code)


if __name__ == "__main__":
    main()
