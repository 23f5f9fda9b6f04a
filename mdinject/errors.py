"""Exception taxonomy for md-inject.

Every failure is terminal for a run. Each exception carries the stage it
happened in so the CLI can report it once with enough context.
"""

from __future__ import annotations


class MdInjectError(Exception):
    """Base class for all md-inject failures."""

    stage = "running md-inject"


class UsageError(MdInjectError):
    stage = "parsing arguments"


class ConfigError(UsageError):
    """Invalid ``--config`` YAML file."""


class InputError(MdInjectError):
    stage = "reading stdin"


class FileReadError(MdInjectError):
    stage = "reading file"


class TemplateFileError(FileReadError):
    stage = "reading template"


class TemplateError(MdInjectError):
    stage = "applying template"


class TemplateParseError(TemplateError):
    """The template source is not valid Jinja2."""


class TemplateRenderError(TemplateError):
    """The template parsed but could not be evaluated."""


class InjectionError(MdInjectError):
    stage = "injecting content"


class MissingStartTagError(InjectionError):
    def __init__(self, start_tag: str):
        super().__init__(f"missing start tag {start_tag} while end tag is present")
        self.tag = start_tag


class MissingEndTagError(InjectionError):
    def __init__(self, end_tag: str):
        super().__init__(f"missing end tag {end_tag} while start tag is present")
        self.tag = end_tag


class TagOrderError(InjectionError):
    def __init__(self, start_tag: str, end_tag: str):
        super().__init__(f"end tag {end_tag} is before the start tag {start_tag}")
        self.start_tag = start_tag
        self.end_tag = end_tag


class FileWriteError(MdInjectError):
    stage = "writing file"
