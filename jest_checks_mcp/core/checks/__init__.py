"""Checks module - annotations and the check run payload."""

from .annotations import Annotation, build_annotations
from .ansi import strip_ansi
from .payload import (
    CheckOutput,
    CheckPayload,
    as_markdown_code,
    build_check_payload,
    format_summary,
    get_output_text,
)

__all__ = [
    "build_annotations",
    "build_check_payload",
    "format_summary",
    "get_output_text",
    "as_markdown_code",
    "strip_ansi",
    "Annotation",
    "CheckOutput",
    "CheckPayload",
]
