"""Jinja2 template engine — renders stdin through a user template before injection."""

from __future__ import annotations

import logging
from pathlib import Path

import jinja2

from mdinject.errors import TemplateFileError, TemplateParseError, TemplateRenderError
from mdinject.models import DEFAULT_TEMPLATE

logger = logging.getLogger(__name__)

# Output lands in markdown, not HTML: no autoescaping, and a template's
# trailing newline is part of its output.
_env = jinja2.Environment(
    undefined=jinja2.StrictUndefined,
    keep_trailing_newline=True,
    autoescape=False,
)

_RENDER_ERRORS = (
    jinja2.TemplateError, ArithmeticError, LookupError, RuntimeError, TypeError, ValueError,
)


def _compile(template: str) -> jinja2.Template:
    try:
        return _env.from_string(template)
    except jinja2.TemplateSyntaxError as exc:
        raise TemplateParseError(f"invalid template (line {exc.lineno}): {exc.message}") from exc


def render_string(template: str, replacements: dict[str, str]) -> str:
    """Parse *template* and render it with *replacements* bound as variables.

    Raises ``TemplateParseError`` for malformed sources and
    ``TemplateRenderError`` when evaluation fails, e.g. on a reference to a
    name that is not in *replacements*.
    """
    compiled = _compile(template)
    try:
        return compiled.render(replacements)
    except _RENDER_ERRORS as exc:
        raise TemplateRenderError(f"cannot render template: {exc}") from exc


def apply_template(template: str, content: str) -> str:
    """Render *template* with ``stdin`` bound to *content*.

    The identity template returns *content* untouched.
    """
    if template == DEFAULT_TEMPLATE:
        return content
    logger.debug("Rendering %d bytes of input through template %r", len(content), template)
    return render_string(template, {"stdin": content})


def read_template_file(template_path: str | Path) -> str:
    """Read a template source from disk."""
    try:
        return Path(template_path).read_text()
    except OSError as exc:
        raise TemplateFileError(f"cannot read template {template_path}: {exc}") from exc
