"""Data models for a single md-inject run."""

from __future__ import annotations

import enum
from dataclasses import dataclass

TAG_START_FORMAT = "<!-- START md-inject:{} -->"
TAG_END_FORMAT = "<!-- END md-inject:{} -->"
DEFAULT_TAG_ID = "default"
DEFAULT_TEMPLATE = "{{ stdin }}"


@dataclass(frozen=True)
class InjectConfig:
    """Options resolved once per run from defaults, YAML and CLI flags."""

    filename: str
    id: str = DEFAULT_TAG_ID
    fail_on_diff: bool = False  # exit 2 instead of writing when the file would change
    print_only: bool = False  # print the result instead of writing the file
    template: str = DEFAULT_TEMPLATE


@dataclass(frozen=True)
class TagPair:
    start: str
    end: str

    @classmethod
    def for_id(cls, tag_id: str) -> TagPair:
        return cls(
            start=TAG_START_FORMAT.format(tag_id),
            end=TAG_END_FORMAT.format(tag_id),
        )


class RunOutcome(enum.Enum):
    UNCHANGED = "unchanged"
    OUT_OF_DATE = "out_of_date"
    PRINTED = "printed"
    WRITTEN = "written"


@dataclass(frozen=True)
class RunResult:
    """Outcome of a run plus the computed document."""

    outcome: RunOutcome
    filename: str
    content: str

    @property
    def exit_code(self) -> int:
        return 2 if self.outcome is RunOutcome.OUT_OF_DATE else 0
