"""Run orchestration: read, template, inject, then decide what to do with the result."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from mdinject.errors import FileReadError, FileWriteError, InputError
from mdinject.injector import inject
from mdinject.models import InjectConfig, RunOutcome, RunResult
from mdinject.template_engine import apply_template

logger = logging.getLogger(__name__)


def read_stdin(stream: TextIO | None = None) -> str:
    """Read the whole input stream before anything else happens."""
    stream = stream if stream is not None else sys.stdin
    try:
        return stream.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"cannot read stdin: {exc}") from exc


def read_file(filename: str) -> str:
    # newline="" keeps CRLF documents byte-identical outside the tagged region
    try:
        with open(filename, encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(f"cannot read {filename}: {exc}") from exc


def write_file(filename: str, content: str) -> None:
    # Truncating the existing file leaves its permission bits alone.
    try:
        with open(filename, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as exc:
        raise FileWriteError(f"cannot write {filename}: {exc}") from exc


def compute_update(config: InjectConfig, stdin_text: str, old_content: str) -> str:
    """Return the document as it should look after injecting *stdin_text*."""
    addition = apply_template(config.template, stdin_text)
    return inject(old_content, addition, config.id)


def run(config: InjectConfig, stdin_text: str) -> RunResult:
    """Inject *stdin_text* into ``config.filename`` and pick exactly one outcome.

    Priority: unchanged, then fail-on-diff, then print-only, then write.
    Only the last one touches the file.
    """
    old_content = read_file(config.filename)
    updated = compute_update(config, stdin_text, old_content)

    if updated == old_content:
        outcome = RunOutcome.UNCHANGED
    elif config.fail_on_diff:
        outcome = RunOutcome.OUT_OF_DATE
    elif config.print_only:
        outcome = RunOutcome.PRINTED
    else:
        write_file(config.filename, updated)
        outcome = RunOutcome.WRITTEN

    logger.info("%s: %s", config.filename, outcome.value)
    return RunResult(outcome=outcome, filename=config.filename, content=updated)
