"""Marker-based injection of content into a document.

A region is delimited by a start/end tag pair::

    <!-- START md-inject:default -->
    ...replaced on every run...
    <!-- END md-inject:default -->

Only the first occurrence of each tag is considered. Everything before the
start tag and from the end tag onward is preserved byte for byte.
"""

from __future__ import annotations

import logging

from mdinject.errors import MissingEndTagError, MissingStartTagError, TagOrderError
from mdinject.models import TagPair

logger = logging.getLogger(__name__)


def inject_content(original: str, addition: str, start_tag: str, end_tag: str) -> str:
    """Return *original* with *addition* placed between *start_tag* and *end_tag*.

    When neither tag is present a new tagged block is appended. When only one
    is present, or the end tag comes first, an ``InjectionError`` is raised
    instead of guessing where the region ends.
    """
    start_pos = original.find(start_tag)
    end_pos = original.find(end_tag)
    logger.debug("%s at %d, %s at %d", start_tag, start_pos, end_tag, end_pos)

    if start_pos < 0 and end_pos < 0:
        logger.debug("No tags found, appending a new block")
        return f"{original}\n{start_tag}\n{addition}\n{end_tag}\n"

    if start_pos < 0:
        raise MissingStartTagError(start_tag)
    if end_pos < 0:
        raise MissingEndTagError(end_tag)
    if end_pos < start_pos:
        raise TagOrderError(start_tag, end_tag)

    head = original[: start_pos + len(start_tag)]
    return f"{head}\n{addition}{original[end_pos:]}"


def inject(original: str, addition: str, tag_id: str) -> str:
    """Same as inject_content but derives the tag pair from *tag_id*."""
    tags = TagPair.for_id(tag_id)
    return inject_content(original, addition, tags.start, tags.end)
