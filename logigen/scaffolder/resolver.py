"""Template selection for a (type, framework, language variant) triple.

Resolution is layered:

1. Framework-keyed templates (component, hook) are looked up by framework
   and variant.
2. Framework-agnostic templates (service, model) are looked up by variant
   alone, so every framework shares one template.
3. Otherwise a candidate id is built by naming convention: hooks exist only
   for React, controllers and routes always live under ``express/``.

Every candidate, including those from the static tables, is checked against
the renderer's registry.  A ``ResolvedTemplate`` is only ever built from an
id that is known to exist.
"""

from __future__ import annotations

from enum import Enum
from typing import Collection, Optional

from pydantic import BaseModel, ConfigDict

from logigen.models import ArtifactType, GenerationRequest, LanguageVariant, normalize_framework


class ResolutionTier(str, Enum):
    """Which layer of the lookup produced the template."""
    FRAMEWORK = "framework"
    VARIANT = "variant"
    CONVENTION = "convention"


class CompanionKind(str, Enum):
    """Auxiliary files generated next to the main artifact."""
    TEST = "test"
    STORY = "story"


class ResolvedTemplate(BaseModel):
    """A template id confirmed to exist in the registry."""
    model_config = ConfigDict(frozen=True)

    template_id: str
    tier: ResolutionTier


# ---------------------------------------------------------------------------
# Static tables
# ---------------------------------------------------------------------------

FRAMEWORK_TEMPLATES: dict[ArtifactType, dict[str, dict[LanguageVariant, str]]] = {
    ArtifactType.COMPONENT: {
        "react": {
            LanguageVariant.PLAIN: "react/component.js.j2",
            LanguageVariant.TYPED: "react/component.ts.j2",
        },
        "vue": {
            LanguageVariant.PLAIN: "vue/component.js.j2",
            LanguageVariant.TYPED: "vue/component.ts.j2",
        },
    },
    ArtifactType.HOOK: {
        "react": {
            LanguageVariant.PLAIN: "react/hook.js.j2",
            LanguageVariant.TYPED: "react/hook.ts.j2",
        },
    },
}

VARIANT_TEMPLATES: dict[ArtifactType, dict[LanguageVariant, str]] = {
    ArtifactType.SERVICE: {
        LanguageVariant.PLAIN: "common/service.js.j2",
        LanguageVariant.TYPED: "common/service.ts.j2",
    },
    ArtifactType.MODEL: {
        LanguageVariant.PLAIN: "common/model.js.j2",
        LanguageVariant.TYPED: "common/model.ts.j2",
    },
}

# Family directory each artifact type belongs to when no framework applies.
_SERVER_SIDE: frozenset[ArtifactType] = frozenset({ArtifactType.CONTROLLER, ArtifactType.ROUTE})
_COMMON: frozenset[ArtifactType] = frozenset({ArtifactType.SERVICE, ArtifactType.MODEL})


def conventional_template_id(
    artifact_type: ArtifactType, framework: str, variant: LanguageVariant
) -> Optional[str]:
    """Build the template id a type would have by naming convention.

    Returns ``None`` where the combination has no meaning at all (a hook
    outside React).  The id is a guess: callers must check the registry.
    """
    ext = variant.extension
    if artifact_type is ArtifactType.COMPONENT:
        return f"{framework}/component.{ext}.j2"
    if artifact_type is ArtifactType.HOOK:
        return f"react/hook.{ext}.j2" if framework == "react" else None
    if artifact_type in _SERVER_SIDE:
        return f"express/{artifact_type.value}.{ext}.j2"
    if artifact_type in _COMMON:
        return f"common/{artifact_type.value}.{ext}.j2"
    return None


def template_family(artifact_type: ArtifactType, framework: str) -> str:
    """Directory a type's templates live in for *framework*."""
    if artifact_type in _SERVER_SIDE:
        return "express"
    if artifact_type in _COMMON:
        return "common"
    if artifact_type is ArtifactType.HOOK:
        return "react"
    return framework


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------


class TemplateResolver:
    """Maps template keys to registered template ids.

    Args:
        registry: The set of registered template ids, usually
            ``TemplateRenderer.registry``.
    """

    def __init__(self, registry: Collection[str]) -> None:
        self.registry = frozenset(registry)

    def _validated(self, candidate: Optional[str], tier: ResolutionTier) -> Optional[ResolvedTemplate]:
        if candidate is None or candidate not in self.registry:
            return None
        return ResolvedTemplate(template_id=candidate, tier=tier)

    def resolve(
        self,
        artifact_type: ArtifactType | str,
        framework: str,
        variant: LanguageVariant,
    ) -> Optional[ResolvedTemplate]:
        """Resolve the main template for a key, or ``None`` when nothing matches."""
        artifact_type = ArtifactType(artifact_type)
        framework = normalize_framework(framework)

        by_framework = FRAMEWORK_TEMPLATES.get(artifact_type)
        if by_framework is not None and framework in by_framework:
            found = self._validated(by_framework[framework].get(variant), ResolutionTier.FRAMEWORK)
            if found is not None:
                return found

        by_variant = VARIANT_TEMPLATES.get(artifact_type)
        if by_variant is not None:
            found = self._validated(by_variant.get(variant), ResolutionTier.VARIANT)
            if found is not None:
                return found

        return self._validated(
            conventional_template_id(artifact_type, framework, variant),
            ResolutionTier.CONVENTION,
        )

    def resolve_companion(
        self, kind: CompanionKind, request: GenerationRequest
    ) -> Optional[ResolvedTemplate]:
        """Resolve the template for a test or story file.

        Stories exist only for components, under the component's framework.
        Tests prefer a family-specific template and fall back to the generic
        ``common/test.{ext}.j2``.
        """
        ext = request.language_variant.extension
        artifact_type = request.artifact_type
        if kind is CompanionKind.STORY:
            if artifact_type is not ArtifactType.COMPONENT:
                return None
            return self._validated(
                f"{request.framework}/story.{ext}.j2", ResolutionTier.FRAMEWORK
            )

        family = template_family(artifact_type, request.framework)
        specific = self._validated(
            f"{family}/{artifact_type.value}.test.{ext}.j2", ResolutionTier.FRAMEWORK
        )
        if specific is not None:
            return specific
        return self._validated(f"common/test.{ext}.j2", ResolutionTier.CONVENTION)
