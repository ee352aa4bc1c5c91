"""Main generation orchestrator.

Takes an artifact type plus the options given on the command line, asks the
remaining questions, and writes the rendered artifact to
``{path}/{type}/{kebab-name}.{js|ts}``.  Test and story companions are
written afterwards, next to the main file.

The steps run strictly in order::

    collect config -> resolve template -> render -> write main
        -> [write test] -> [write story]

A failure before or during the main write aborts with an exception.
Companion failures are collected as warnings on the result; the main file
is never rolled back.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

from logigen.config import Settings
from logigen.errors import InvalidNameError, LogigenError, TemplateNotFound, WriteError
from logigen.fields import parse_fields
from logigen.models import (
    ArtifactType,
    GenerationRequest,
    LanguageVariant,
    RenderConfig,
)
from logigen.naming import derive_names
from logigen.utils import print_info

from .prompts import AnswerProvider, DefaultsProvider, Question, QuestionKind, RichPromptProvider
from .resolver import CompanionKind, ResolvedTemplate, TemplateResolver
from .sink import LocalFileSink, WriteSink
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Questions
# ---------------------------------------------------------------------------

# Artifact types that carry data fields.
FIELD_TYPES: frozenset[str] = frozenset({ArtifactType.MODEL.value, ArtifactType.CONTROLLER.value})

GENERATION_QUESTIONS: list[Question] = [
    Question(
        id="fields",
        kind=QuestionKind.TEXT,
        prompt="Enter fields (comma-separated, name:type)",
        condition=lambda known: known["type"] in FIELD_TYPES,
        default="",
    ),
    Question(
        id="with_test",
        kind=QuestionKind.CONFIRM,
        prompt="Generate test file?",
        default=True,
    ),
    Question(
        id="with_story",
        kind=QuestionKind.CONFIRM,
        prompt="Generate Storybook story?",
        condition=lambda known: known["type"] == ArtifactType.COMPONENT.value,
        default=True,
    ),
]


# ---------------------------------------------------------------------------
# Options and results
# ---------------------------------------------------------------------------


class GenerationOptions(BaseModel):
    """Values given explicitly on the command line.

    ``None`` means "not given": the value then comes from the answer
    provider or from ``Settings``.  A value given here is never asked for.
    """

    name: Optional[str] = Field(default=None, description="Base name of the artifact")
    path: Optional[str] = Field(default=None, description="Output base directory")
    framework: Optional[str] = Field(default=None, description="Target framework")
    typescript: Optional[bool] = Field(default=None, description="Generate TypeScript")
    fields: Optional[str] = Field(default=None, description="Raw field list")
    with_test: Optional[bool] = Field(default=None, description="Generate a test file")
    with_story: Optional[bool] = Field(default=None, description="Generate a story file")


class GenerationResult(BaseModel):
    """Outcome of one generation."""

    artifact_type: ArtifactType
    template_id: str
    main_path: Path
    test_path: Optional[Path] = None
    story_path: Optional[Path] = None
    warnings: list[str] = Field(default_factory=list)
    dry_run: bool = False

    @property
    def written(self) -> list[Path]:
        """Every file produced, main file first."""
        return [p for p in (self.main_path, self.test_path, self.story_path) if p is not None]


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class CodeGenerator:
    """Generation orchestrator.

    Args:
        settings: Defaults for options not given explicitly.
        answer_provider: Collaborator that answers the interactive
            questions.  Defaults to Rich prompts when ``settings.interactive``
            is set, otherwise to the question defaults.
        sink: Collaborator that writes files.  Defaults to the local disk.
        renderer: Template renderer (and registry).
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        answer_provider: Optional[AnswerProvider] = None,
        sink: Optional[WriteSink] = None,
        renderer: Optional[TemplateRenderer] = None,
    ) -> None:
        self.settings = settings or Settings()
        if answer_provider is None:
            answer_provider = (
                RichPromptProvider() if self.settings.interactive else DefaultsProvider()
            )
        self.answer_provider = answer_provider
        self.sink: WriteSink = sink or LocalFileSink()
        self.renderer = renderer or TemplateRenderer()
        self.resolver = TemplateResolver(self.renderer.registry)

    # -- Public API --------------------------------------------------------

    async def generate(
        self,
        artifact_type: ArtifactType | str,
        options: GenerationOptions,
        *,
        dry_run: bool = False,
    ) -> GenerationResult:
        """Generate one artifact and its companions.

        Args:
            artifact_type: What to generate (``"model"``, ``"component"``...).
            options: Explicit command-line values.
            dry_run: Render everything but write nothing.

        Returns:
            The written paths and any companion warnings.

        Raises:
            InvalidNameError: The base name is missing or unusable.
            InvalidFieldError: The field list is malformed.
            TemplateNotFound: No template for the type/framework/variant.
            WriteError: The main file could not be written.
            InternalError: A resolved template could not be rendered.
        """
        artifact_type = ArtifactType(artifact_type)

        # 1. Collect config
        config = await self.collect_config(artifact_type, options)
        request = config.request

        # 2. Resolve template
        resolved = self.resolve_template(request)
        if self.settings.verbose:
            print_info(f"Using template {resolved.template_id} ({resolved.tier.value} match)")

        # 3. Render
        content = self.renderer.render(resolved.template_id, config)

        # 4. Write main file
        main_path = self.output_path(config)
        await self._write(main_path, content, dry_run=dry_run)

        result = GenerationResult(
            artifact_type=artifact_type,
            template_id=resolved.template_id,
            main_path=main_path,
            dry_run=dry_run,
        )

        # 5. Companions, only once the main file exists
        if request.generate_test:
            result.test_path = await self._generate_companion(
                CompanionKind.TEST, config, result.warnings, dry_run=dry_run
            )
        if request.generate_story:
            result.story_path = await self._generate_companion(
                CompanionKind.STORY, config, result.warnings, dry_run=dry_run
            )

        return result

    # -- Config collection -------------------------------------------------

    async def collect_config(
        self, artifact_type: ArtifactType, options: GenerationOptions
    ) -> RenderConfig:
        """Merge explicit options, answers and settings into a ``RenderConfig``.

        Stage one takes every explicit option.  Stage two asks only the
        questions whose answer is still unknown.  Settings fill whatever is
        left.
        """
        settings = self.settings
        if options.name is None or not options.name.strip():
            raise InvalidNameError(options.name or "")

        known: dict[str, Any] = {
            "type": artifact_type.value,
            "name": options.name,
            "framework": options.framework or settings.framework,
            "typescript": (
                options.typescript if options.typescript is not None else settings.typescript
            ),
            "fields": options.fields,
            "with_test": options.with_test,
            "with_story": options.with_story,
        }
        pending = [
            q for q in GENERATION_QUESTIONS if known.get(q.id) is None and q.applies(known)
        ]
        answers = await self.answer_provider.ask(pending, known) if pending else {}
        for key, value in answers.items():
            if known.get(key) is None:
                known[key] = value

        is_component = artifact_type is ArtifactType.COMPONENT
        request = GenerationRequest(
            artifact_type=artifact_type,
            base_name=options.name.strip(),
            framework=known["framework"],
            language_variant=LanguageVariant.from_flag(bool(known["typescript"])),
            output_base_path=options.path or str(settings.output_dir),
            raw_fields_text=known.get("fields") or None,
            generate_test=bool(known.get("with_test")),
            generate_story=is_component and bool(known.get("with_story")),
        )
        return RenderConfig(
            request=request,
            names=derive_names(request.base_name),
            fields=parse_fields(request.raw_fields_text),
        )

    # -- Resolution --------------------------------------------------------

    def resolve_template(self, request: GenerationRequest) -> ResolvedTemplate:
        """Resolve the main template or raise ``TemplateNotFound``."""
        resolved = self.resolver.resolve(
            request.artifact_type, request.framework, request.language_variant
        )
        if resolved is None:
            raise TemplateNotFound(
                request.artifact_type.value,
                request.framework,
                request.language_variant.value,
            )
        return resolved

    # -- Paths -------------------------------------------------------------

    @staticmethod
    def output_path(config: RenderConfig, kind: Optional[CompanionKind] = None) -> Path:
        """Compute ``{path}/{type}/{kebab}[.test|.stories].{js|ts}``."""
        request = config.request
        infix = {None: "", CompanionKind.TEST: ".test", CompanionKind.STORY: ".stories"}[kind]
        filename = f"{config.names.kebab}{infix}{request.language_variant.suffix}"
        return Path(request.output_base_path) / request.artifact_type.value / filename

    # -- Writing -----------------------------------------------------------

    async def _write(self, path: Path, content: str, *, dry_run: bool) -> None:
        """Write *content* to *path* honouring the overwrite policy."""
        if not self.settings.overwrite and await self.sink.exists(path):
            raise WriteError(path, "file already exists (overwrite disabled)")
        if dry_run:
            return
        await self.sink.ensure_directory(path.parent)
        await self.sink.write_file(path, content)

    async def _generate_companion(
        self,
        kind: CompanionKind,
        config: RenderConfig,
        warnings: list[str],
        *,
        dry_run: bool,
    ) -> Optional[Path]:
        """Render and write a test or story file; failures become warnings."""
        request = config.request
        resolved = self.resolver.resolve_companion(kind, request)
        if resolved is None:
            warnings.append(
                f"No {kind.value} template for type '{request.artifact_type.value}' "
                f"with framework '{request.framework}' ({request.language_variant.value})"
            )
            return None

        path = self.output_path(config, kind)
        try:
            content = self.renderer.render(resolved.template_id, config)
            await self._write(path, content, dry_run=dry_run)
        except LogigenError as exc:
            warnings.append(f"Skipped {kind.value} file: {exc}")
            return None
        return path
