# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Consumers of lint results: annotations and console rendering."""

from __future__ import annotations

from .annotations import Annotation, AnnotationStyle, build_annotations

__all__ = ["Annotation", "AnnotationStyle", "build_annotations"]
