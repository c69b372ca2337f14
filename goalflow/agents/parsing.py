"""
Interpretation of raw completions.

The provider is asked to open its reply with one of a fixed set of marker
tags. This module is the only place that knows the literal tags; callers get
a Tag and a list of lines back.
"""
import re
from enum import Enum

from goalflow.agents.errors import EmptyExtractionError, UnrecognizedFormatError


class Tag(str, Enum):
    QUESTIONS = "QUESTIONS:"
    ROADMAP = "ROADMAP:"
    TASKS = "TASKS:"


# Checked in this order, first match wins
TAG_PRIORITY = (Tag.QUESTIONS, Tag.ROADMAP, Tag.TASKS)


def _preview(text: str, limit: int = 80) -> str:
    snippet = text.strip().replace("\n", " ")
    return (snippet[:limit] + "...") if len(snippet) > limit else snippet


def classify(raw_text: str) -> Tag:
    text = raw_text.strip()
    for tag in TAG_PRIORITY:
        if text.startswith(tag.value):
            return tag
    raise UnrecognizedFormatError(f"No known tag at start of response: {_preview(text)!r}")


def extract_lines(raw_text: str, tag: Tag) -> list[str]:
    """Strip `tag` and return the trimmed non-empty lines that follow, in order."""
    text = raw_text.strip()
    if text.startswith(tag.value):
        text = text[len(tag.value):]

    lines = [line.strip() for line in re.split(r"\r?\n", text.strip())]
    lines = [line for line in lines if line]

    if not lines:
        raise EmptyExtractionError(f"{tag.value} block contained no lines")
    return lines


def parse_block(raw_text: str, expected: Tag) -> list[str]:
    tag = classify(raw_text)
    if tag is not expected:
        raise UnrecognizedFormatError(
            f"Expected {expected.value} block, got {tag.value}"
        )
    return extract_lines(raw_text, tag)
