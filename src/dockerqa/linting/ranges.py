# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Map 1-based line numbers onto character-offset ranges."""

from __future__ import annotations

import logging

from ..core.models import TextRange
from ..core.text import TextBuffer

LOGGER = logging.getLogger(__name__)


def map_line(buffer: TextBuffer, line: int) -> TextRange | None:
    """Return the range covering the whole of ``line`` in ``buffer``.

    Empty lines and lines outside the buffer yield ``None``; a zero-length
    range is never produced.

    Args:
        buffer: Line-indexed view of the document.
        line: 1-based line number reported by the linter.

    Returns:
        TextRange | None: Offsets of the line content, excluding its terminator.
    """

    index = line - 1
    if not 0 <= index < buffer.line_count:
        LOGGER.debug("Line %d is outside the document (%d lines)", line, buffer.line_count)
        return None
    try:
        start = buffer.line_start_offset(index)
        end = buffer.line_end_offset(index)
    except (IndexError, ValueError) as exc:
        LOGGER.debug("Invalid line %d in document: %s", line, exc)
        return None
    if start < 0 or end - start <= 0:
        return None
    return TextRange(start=start, end=end)


__all__ = ["map_line"]
