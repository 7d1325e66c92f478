"""Jinja2 template rendering for Kotlin scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``mvi_scaffold/scaffolder/templates/`` directory and renders them with
feature-specific context data.  Rendering is pure: the renderer never touches
the target project, it only turns a context dictionary into text.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for Kotlin scaffolding.

    The renderer loads ``.j2`` template files from a configurable
    template directory.  Undefined variables raise instead of rendering as
    empty text, so a context that forgets a symbol fails loudly rather than
    producing a file that does not compile.
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
        # Register custom filters
        self.env.filters["kotlin_bool"] = _kotlin_bool_filter

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"viewmodel/State.kt.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------


def _kotlin_bool_filter(value: bool) -> str:
    """Render a Python boolean as a Kotlin literal."""
    return "true" if value else "false"


_default_renderer: TemplateRenderer | None = None


def default_renderer() -> TemplateRenderer:
    """Shared renderer over the bundled templates (created on first use)."""
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = TemplateRenderer()
    return _default_renderer
