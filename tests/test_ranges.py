# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for mapping line numbers onto offset ranges."""

from __future__ import annotations

import pytest

from dockerqa.core.models import TextRange
from dockerqa.core.text import LineIndexedText
from dockerqa.linting.ranges import map_line

DOCKERFILE = "FROM ubuntu:latest\n\nRUN apt-get update\n"


class _StaticBuffer:
    """Buffer reporting fixed offsets regardless of content."""

    def __init__(self, spans: list[tuple[int, int]]) -> None:
        self._spans = spans

    @property
    def line_count(self) -> int:
        return len(self._spans)

    def line_start_offset(self, index: int) -> int:
        return self._spans[index][0]

    def line_end_offset(self, index: int) -> int:
        return self._spans[index][1]


class _BrokenBuffer(_StaticBuffer):
    def line_end_offset(self, index: int) -> int:
        raise ValueError("document changed")


def test_map_line_covers_whole_line() -> None:
    text = LineIndexedText(DOCKERFILE)

    assert map_line(text, 1) == TextRange(start=0, end=18)
    assert map_line(text, 3) == TextRange(start=20, end=38)


def test_map_line_skips_empty_line() -> None:
    assert map_line(LineIndexedText(DOCKERFILE), 2) is None


@pytest.mark.parametrize("line", [0, -3, 5, 100])
def test_map_line_out_of_bounds(line: int) -> None:
    assert map_line(LineIndexedText(DOCKERFILE), line) is None


def test_map_line_uses_buffer_offsets_verbatim() -> None:
    assert map_line(_StaticBuffer([(0, 19)]), 1) == TextRange(start=0, end=19)


def test_map_line_tolerates_misbehaving_buffer() -> None:
    assert map_line(_BrokenBuffer([(0, 5)]), 1) is None
    assert map_line(_StaticBuffer([(7, 3)]), 1) is None
    assert map_line(_StaticBuffer([(-2, 3)]), 1) is None
