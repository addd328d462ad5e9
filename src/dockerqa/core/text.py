# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Line-indexed views over document text."""

from __future__ import annotations

from typing import Final, Protocol, runtime_checkable

_CR: Final[str] = "\r"
_LF: Final[str] = "\n"


@runtime_checkable
class TextBuffer(Protocol):
    """Read-only, line-indexed view of a document.

    Offsets are character offsets into the document. Line end offsets exclude
    the line terminator.
    """

    @property
    def line_count(self) -> int:
        """Return the number of lines in the buffer."""

        raise NotImplementedError

    def line_start_offset(self, index: int) -> int:
        """Return the offset of the first character of line ``index`` (0-based)."""

        raise NotImplementedError

    def line_end_offset(self, index: int) -> int:
        """Return the offset just past the last character of line ``index``."""

        raise NotImplementedError


class LineIndexedText:
    """Concrete :class:`TextBuffer` computed from a string.

    ``\\n``, ``\\r\\n`` and ``\\r`` terminate lines. A trailing terminator opens a
    final empty line, so ``"FROM a\\n"`` has two lines and ``""`` has one.
    """

    __slots__ = ("_ends", "_starts", "_text")

    def __init__(self, text: str) -> None:
        """Index ``text`` by line.

        Args:
            text: Document content to index.
        """

        self._text = text
        self._starts, self._ends = _index_lines(text)

    @property
    def text(self) -> str:
        """Return the indexed document text."""

        return self._text

    @property
    def text_length(self) -> int:
        """Return the number of characters in the document."""

        return len(self._text)

    @property
    def line_count(self) -> int:
        """Return the number of lines in the document."""

        return len(self._starts)

    def line_start_offset(self, index: int) -> int:
        """Return the start offset of line ``index``.

        Args:
            index: 0-based line index.

        Returns:
            int: Offset of the first character on the line.

        Raises:
            IndexError: If ``index`` is outside ``[0, line_count)``.
        """

        self._check_index(index)
        return self._starts[index]

    def line_end_offset(self, index: int) -> int:
        """Return the end offset of line ``index``, excluding its terminator.

        Args:
            index: 0-based line index.

        Returns:
            int: Offset just past the last character on the line.

        Raises:
            IndexError: If ``index`` is outside ``[0, line_count)``.
        """

        self._check_index(index)
        return self._ends[index]

    def line_text(self, index: int) -> str:
        """Return the content of line ``index`` without its terminator."""

        return self._text[self.line_start_offset(index) : self.line_end_offset(index)]

    def _check_index(self, index: int) -> None:
        # Negative indices would silently wrap with list indexing.
        if not 0 <= index < len(self._starts):
            raise IndexError(f"line index {index} out of range for {len(self._starts)} lines")


def _index_lines(text: str) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """Return parallel tuples of line start and end offsets for ``text``."""

    starts = [0]
    ends: list[int] = []
    position = 0
    length = len(text)
    while position < length:
        char = text[position]
        if char == _LF:
            ends.append(position)
            starts.append(position + 1)
        elif char == _CR:
            ends.append(position)
            if position + 1 < length and text[position + 1] == _LF:
                position += 1
            starts.append(position + 1)
        position += 1
    ends.append(length)
    return tuple(starts), tuple(ends)


__all__ = ["LineIndexedText", "TextBuffer"]
