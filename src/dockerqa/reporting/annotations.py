# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Turn diagnostic records into renderable annotations."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Final

from ..core.models import DiagnosticRecord, TextRange
from ..core.severity import Severity


class AnnotationStyle(str, Enum):
    """Visual treatment applied to an annotated span."""

    ERROR = "error"
    WARNING = "warning"
    WEAK_WARNING = "weak_warning"


_SEVERITY_STYLES: Final[dict[Severity, AnnotationStyle]] = {
    Severity.ERROR: AnnotationStyle.ERROR,
    Severity.WARNING: AnnotationStyle.WARNING,
    Severity.INFO: AnnotationStyle.WEAK_WARNING,
}


@dataclass(frozen=True, slots=True)
class Annotation:
    """A diagnostic paired with the span and style used to paint it."""

    record: DiagnosticRecord
    range: TextRange
    style: AnnotationStyle

    @property
    def message(self) -> str:
        """Return the message displayed for the annotation."""

        return self.record.message


def style_for(severity: Severity) -> AnnotationStyle:
    """Return the annotation style for ``severity``."""

    return _SEVERITY_STYLES.get(severity, AnnotationStyle.WEAK_WARNING)


def build_annotations(records: Iterable[DiagnosticRecord], text_length: int) -> list[Annotation]:
    """Return annotations for the records that can be painted on the document.

    Records without a range, or whose range does not fit inside
    ``[0, text_length]`` (the document changed since linting), are dropped.

    Args:
        records: Diagnostics in reported order.
        text_length: Current length of the document text.

    Returns:
        list[Annotation]: Annotations in the same order as ``records``.
    """

    annotations: list[Annotation] = []
    for record in records:
        span = record.range
        if span is None or span.start < 0 or span.end > text_length:
            continue
        annotations.append(Annotation(record=record, range=span, style=style_for(record.severity)))
    return annotations


__all__ = ["Annotation", "AnnotationStyle", "build_annotations", "style_for"]
