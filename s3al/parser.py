"""Parsing of shell command lines into chains, pipelines and redirections."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .textutils import extract_after, extract_before, parse_command, split_by


class RedirectionType(Enum):
    INPUT = "<"
    OUTPUT = ">"
    APPEND = ">>"


@dataclass(frozen=True)
class Redirection:
    type: RedirectionType
    file_name: str


@dataclass
class CommandSegment:
    """One command of a pipeline together with its redirections."""

    command: str = ""
    args: list[str] = field(default_factory=list)
    input_redirect: Optional[Redirection] = None
    output_redirect: Optional[Redirection] = None
    is_piped_to_next: bool = False


@dataclass
class CommandChain:
    """A pipeline: segments connected by ``|``."""

    segments: list[CommandSegment] = field(default_factory=list)


def parse(command_line: str) -> list[CommandChain]:
    """Parse a full command line into chains separated by ``&&``."""
    return [CommandChain(parse_chain(text)) for text in split_by(command_line, "&&")]


def parse_chain(chain_text: str) -> list[CommandSegment]:
    """Parse a pipeline of commands separated by ``|``."""
    pieces = split_by(chain_text, "|")
    last = len(pieces) - 1
    segments = []
    for position, piece in enumerate(pieces):
        segment = parse_segment(piece)
        segment.is_piped_to_next = position < last
        segments.append(segment)
    return segments


def parse_segment(segment_text: str) -> CommandSegment:
    """Parse one command with its ``<``, ``>`` or ``>>`` redirections."""
    segment = CommandSegment()
    text = segment_text

    if "<" in text:
        file_name = extract_after(text, "<")
        if file_name:
            segment.input_redirect = Redirection(RedirectionType.INPUT, file_name)
        text = extract_before(text, "<")

    if ">>" in text:
        file_name = extract_after(text, ">>")
        if file_name:
            segment.output_redirect = Redirection(RedirectionType.APPEND, file_name)
        text = extract_before(text, ">>")
    elif ">" in text:
        file_name = extract_after(text, ">")
        if file_name:
            segment.output_redirect = Redirection(RedirectionType.OUTPUT, file_name)
        text = extract_before(text, ">")

    segment.command, segment.args = parse_command(text)
    return segment