"""logigen configuration.

Typed defaults for the CLI.  Settings use a Pydantic v2 model so they can be
validated at construction time and serialised to/from JSON or environment
variables without boiler-plate.  Explicit command-line flags always take
precedence over anything configured here.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from logigen.models import normalize_framework

DEFAULT_CONFIG_FILE = ".logigen.json"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


class Settings(BaseModel):
    """Defaults applied to every generation.

    Instances are typically created once by the CLI entry point (from the
    environment, optionally overlaid with a JSON file) and then used to
    fill in any option the user did not pass explicitly.
    """

    output_dir: Path = Field(default=Path("."), description="Base directory for generated files")
    framework: str = Field(default="react", description="Default target framework")
    typescript: bool = Field(default=False, description="Generate TypeScript by default")
    overwrite: bool = Field(
        default=True,
        description="Replace existing files; when false an existing target is an error",
    )
    interactive: bool = Field(default=True, description="Ask questions on the terminal")
    verbose: bool = Field(default=False, description="Print resolution details")

    @field_validator("framework")
    @classmethod
    def _normalize_framework(cls, value: str) -> str:
        return normalize_framework(value)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path | None = None) -> Path:
        """Persist the settings to a JSON file.

        Args:
            path: Destination file. Defaults to ``.logigen.json`` in the
                current directory.

        Returns:
            The path where the file was written.
        """
        target = Path(path or DEFAULT_CONFIG_FILE)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Settings":
        """Load previously-saved settings from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    def merged_with_file(self, path: Path) -> "Settings":
        """Return a copy with the keys present in the JSON file *path* applied."""
        overrides = Settings.load(path).model_dump(exclude_unset=True)
        return self.model_copy(update=overrides)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            LOGIGEN_OUTPUT_DIR, LOGIGEN_FRAMEWORK, LOGIGEN_TYPESCRIPT,
            LOGIGEN_OVERWRITE, LOGIGEN_INTERACTIVE, LOGIGEN_VERBOSE.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("LOGIGEN_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["LOGIGEN_OUTPUT_DIR"])
        if os.environ.get("LOGIGEN_FRAMEWORK"):
            kwargs["framework"] = os.environ["LOGIGEN_FRAMEWORK"]
        for key in ("typescript", "overwrite", "interactive", "verbose"):
            raw = os.environ.get(f"LOGIGEN_{key.upper()}")
            if raw:
                kwargs[key] = raw.strip().lower() in _TRUE_VALUES
        return cls(**kwargs)
