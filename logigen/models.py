"""Pydantic v2 models shared across logigen.

Defines the enumerations for artifact types and language variants, and the
request-scoped data passed from the CLI through the scaffolder: the
``GenerationRequest``, parsed ``FieldDescriptor`` entries, the
``DerivedNames`` and the complete ``RenderConfig`` handed to templates.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ArtifactType(str, Enum):
    """Category of code unit being generated."""
    COMPONENT = "component"
    HOOK = "hook"
    SERVICE = "service"
    MODEL = "model"
    CONTROLLER = "controller"
    ROUTE = "route"


class LanguageVariant(str, Enum):
    """Plain JavaScript or statically-typed TypeScript output."""
    PLAIN = "plain"
    TYPED = "typed"

    @property
    def extension(self) -> str:
        """Template/file extension stem, ``js`` or ``ts``."""
        return "ts" if self is LanguageVariant.TYPED else "js"

    @property
    def suffix(self) -> str:
        """Output file suffix including the dot."""
        return f".{self.extension}"

    @classmethod
    def from_flag(cls, typescript: bool) -> "LanguageVariant":
        return cls.TYPED if typescript else cls.PLAIN


KNOWN_FRAMEWORKS: tuple[str, ...] = ("react", "vue", "express", "common")

# Aliases accepted on the command line for the framework-agnostic family.
_FRAMEWORK_ALIASES: dict[str, str] = {
    "none": "common",
    "": "common",
}


def normalize_framework(framework: str) -> str:
    """Lowercase a framework name and fold its aliases (``none`` -> ``common``)."""
    value = framework.strip().lower()
    return _FRAMEWORK_ALIASES.get(value, value)


# ---------------------------------------------------------------------------
# Request-scoped models
# ---------------------------------------------------------------------------

class FieldDescriptor(BaseModel):
    """A single ``name:type`` entry from a field list."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Field name, trimmed")
    type: str = Field(default="string", description="Host-language type, passed verbatim")


class DerivedNames(BaseModel):
    """Naming conventions derived from a single base name."""
    model_config = ConfigDict(frozen=True)

    pascal: str = Field(..., min_length=1, description="UpperCamelCase, e.g. 'UserProfile'")
    camel: str = Field(..., min_length=1, description="lowerCamelCase, e.g. 'userProfile'")
    kebab: str = Field(..., min_length=1, description="lower-hyphen-case, e.g. 'user-profile'")
    plural: str = Field(..., min_length=1, description="Pluralized base name")


class GenerationRequest(BaseModel):
    """Everything needed for one generation, after flags and answers are merged."""
    model_config = ConfigDict(frozen=True)

    artifact_type: ArtifactType
    base_name: str = Field(..., min_length=1)
    framework: str = Field(default="react")
    language_variant: LanguageVariant = Field(default=LanguageVariant.PLAIN)
    output_base_path: str = Field(default=".")
    raw_fields_text: Optional[str] = Field(default=None)
    generate_test: bool = Field(default=True)
    generate_story: bool = Field(default=False)

    @field_validator("framework")
    @classmethod
    def _normalize_framework(cls, value: str) -> str:
        return normalize_framework(value)

    @property
    def typescript(self) -> bool:
        return self.language_variant is LanguageVariant.TYPED


class RenderConfig(BaseModel):
    """The complete variable environment visible to a template."""
    model_config = ConfigDict(frozen=True)

    request: GenerationRequest
    names: DerivedNames
    fields: list[FieldDescriptor] = Field(default_factory=list)

    def context(self) -> dict[str, Any]:
        """Flatten into the dictionary passed to Jinja2.

        Only the keys returned here are defined inside templates; anything
        else raises at render time.
        """
        request = self.request
        return {
            "type": request.artifact_type.value,
            "name": request.base_name,
            "framework": request.framework,
            "typescript": request.typescript,
            "language_variant": request.language_variant.value,
            "path": request.output_base_path,
            "with_test": request.generate_test,
            "with_story": request.generate_story,
            "pascal_name": self.names.pascal,
            "camel_name": self.names.camel,
            "kebab_name": self.names.kebab,
            "plural_name": self.names.plural,
            "fields": [f.model_dump() for f in self.fields],
        }
