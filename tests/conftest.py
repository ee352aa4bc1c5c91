"""Shared pytest fixtures for the logigen test suite.

Provides reusable fixtures for:
- Temporary output directories
- Non-interactive settings
- In-memory write sinks and scripted answer providers
- A renderer over the bundled templates
- Ready-made render configs
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest

from logigen.config import Settings
from logigen.fields import parse_fields
from logigen.models import ArtifactType, GenerationRequest, LanguageVariant, RenderConfig
from logigen.naming import derive_names
from logigen.scaffolder.generator import CodeGenerator
from logigen.scaffolder.prompts import StaticAnswerProvider
from logigen.scaffolder.sink import MemorySink
from logigen.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_output_dir(tmp_path: Path) -> Path:
    """Temporary directory generated files are written to (auto-cleanup)."""
    output_dir = tmp_path / "generated"
    output_dir.mkdir()
    yield output_dir


# ---------------------------------------------------------------------------
# Settings & collaborators
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> Settings:
    """Non-interactive settings with every other value at its default."""
    return Settings(interactive=False)


@pytest.fixture
def memory_sink() -> MemorySink:
    """A write sink that records files in memory."""
    return MemorySink()


@pytest.fixture
def renderer() -> TemplateRenderer:
    """Renderer over the bundled template registry."""
    return TemplateRenderer()


@pytest.fixture
def make_generator(settings, memory_sink, renderer) -> Callable[..., CodeGenerator]:
    """Factory for a CodeGenerator with scripted answers and an in-memory sink."""

    def _make(answers: dict[str, Any] | None = None, **overrides: Any) -> CodeGenerator:
        return CodeGenerator(
            settings=overrides.pop("settings", settings),
            answer_provider=overrides.pop("answer_provider", StaticAnswerProvider(answers or {})),
            sink=overrides.pop("sink", memory_sink),
            renderer=overrides.pop("renderer", renderer),
        )

    return _make


# ---------------------------------------------------------------------------
# Render configs
# ---------------------------------------------------------------------------

@pytest.fixture
def make_config() -> Callable[..., RenderConfig]:
    """Build a RenderConfig the same way the generator does."""

    def _make(
        artifact_type: str = "model",
        name: str = "blog post",
        *,
        framework: str = "react",
        typescript: bool = True,
        fields: str | None = "title:string, views:number",
        path: str = "out",
    ) -> RenderConfig:
        request = GenerationRequest(
            artifact_type=ArtifactType(artifact_type),
            base_name=name,
            framework=framework,
            language_variant=LanguageVariant.from_flag(typescript),
            output_base_path=path,
            raw_fields_text=fields,
        )
        return RenderConfig(
            request=request,
            names=derive_names(name),
            fields=parse_fields(fields),
        )

    return _make
