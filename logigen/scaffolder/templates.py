"""Jinja2 template registry and renderer.

Templates live as ``.j2`` files under ``logigen/scaffolder/templates/``,
grouped by family (``react/``, ``vue/``, ``common/``, ``express/``).  A
template id is the path relative to that directory, e.g.
``"common/model.ts.j2"``.  The set of ids found there is the registry; the
renderer never guesses at ids that are not in it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2
from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from logigen.errors import RenderError, TemplateNotRegistered
from logigen.models import RenderConfig
from logigen.naming import pluralize, to_camel, to_kebab, to_pascal


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders registered Jinja2 templates with a ``RenderConfig``.

    Undefined variables are errors rather than empty strings, so a template
    that references something outside the render config fails loudly.
    Rendering has no access to the clock or to randomness; the same template
    and config always produce identical text.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Register naming filters
        self.env.filters["pascal_case"] = to_pascal
        self.env.filters["camel_case"] = to_camel
        self.env.filters["kebab_case"] = to_kebab
        self.env.filters["pluralize"] = pluralize
        self._registry: frozenset[str] | None = None

    # -- Registry ----------------------------------------------------------

    @property
    def registry(self) -> frozenset[str]:
        """Every registered template id, scanned once per renderer."""
        if self._registry is None:
            self._registry = frozenset(self.list_templates())
        return self._registry

    def has_template(self, template_id: str) -> bool:
        return template_id in self.registry

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of all ``.j2`` template ids under *prefix*.

        Ids are relative to the template root and always use ``/``.  A
        prefix pointing outside the template root matches nothing.
        """
        root = self.template_dir.resolve()
        search_dir = (root / prefix).resolve() if prefix else root
        if not search_dir.is_dir() or not search_dir.is_relative_to(root):
            return []
        return sorted(
            p.relative_to(root).as_posix()
            for p in search_dir.rglob("*.j2")
        )

    # -- Rendering ---------------------------------------------------------

    def render(self, template_id: str, config: RenderConfig | dict[str, Any]) -> str:
        """Render a registered template.

        Args:
            template_id: Registry id, e.g. ``"react/component.ts.j2"``.
            config: A ``RenderConfig`` or an already-flattened context dict.

        Raises:
            TemplateNotRegistered: If *template_id* is not in the registry.
            RenderError: If the template is malformed or references an
                undefined variable.
        """
        if not self.has_template(template_id):
            raise TemplateNotRegistered(template_id)
        try:
            template = self.env.get_template(template_id)
        except jinja2.TemplateNotFound as exc:
            raise TemplateNotRegistered(template_id) from exc
        except jinja2.TemplateError as exc:
            raise RenderError(template_id, str(exc)) from exc
        return self._render(template, template_id, config)

    def render_string(
        self, template_string: str, config: RenderConfig | dict[str, Any]
    ) -> str:
        """Render an inline template string with the same environment.

        Useful for small fragments that are not stored as files.
        """
        try:
            template = self.env.from_string(template_string)
        except jinja2.TemplateError as exc:
            raise RenderError("<string>", str(exc)) from exc
        return self._render(template, "<string>", config)

    @staticmethod
    def _render(
        template: jinja2.Template,
        template_id: str,
        config: RenderConfig | dict[str, Any],
    ) -> str:
        context = config.context() if isinstance(config, RenderConfig) else config
        try:
            return template.render(**context)
        except jinja2.TemplateError as exc:
            raise RenderError(template_id, str(exc)) from exc
