"""logigen scaffolder -- resolves, renders and writes code templates.

Quick usage::

    from logigen.scaffolder import CodeGenerator, GenerationOptions

    generator = CodeGenerator()
    result = await generator.generate(
        "route", GenerationOptions(name="category", framework="express")
    )
    result.main_path  # ./route/category.js
"""

from logigen.scaffolder.generator import CodeGenerator, GenerationOptions, GenerationResult
from logigen.scaffolder.resolver import ResolvedTemplate, TemplateResolver
from logigen.scaffolder.templates import TemplateRenderer

__all__ = [
    "CodeGenerator",
    "GenerationOptions",
    "GenerationResult",
    "ResolvedTemplate",
    "TemplateRenderer",
    "TemplateResolver",
]
