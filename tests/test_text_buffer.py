# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the line-indexed text buffer."""

from __future__ import annotations

import pytest

from dockerqa.core.text import LineIndexedText, TextBuffer


def test_single_line_with_trailing_newline() -> None:
    text = LineIndexedText("FROM ubuntu:latest\n")

    assert isinstance(text, TextBuffer)
    assert text.text_length == 19
    assert text.line_count == 2
    assert (text.line_start_offset(0), text.line_end_offset(0)) == (0, 18)
    assert (text.line_start_offset(1), text.line_end_offset(1)) == (19, 19)


def test_mixed_line_terminators_are_excluded_from_lines() -> None:
    text = LineIndexedText("FROM a\r\nRUN b\rCMD c")

    assert text.line_count == 3
    assert [text.line_text(index) for index in range(3)] == ["FROM a", "RUN b", "CMD c"]
    assert text.line_start_offset(1) == 8
    assert text.line_start_offset(2) == 14


def test_empty_document_has_one_empty_line() -> None:
    text = LineIndexedText("")

    assert text.line_count == 1
    assert text.line_start_offset(0) == text.line_end_offset(0) == 0


@pytest.mark.parametrize("index", [-1, 2])
def test_out_of_range_index_raises(index: int) -> None:
    text = LineIndexedText("FROM a\n")

    with pytest.raises(IndexError):
        text.line_start_offset(index)
