"""PRG program codec.

A program is read from exactly one file, binary or text, and is always
converted to the other format.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from prg_core.errors import SizeCeilingError, StructuralError
from prg_core.protocol import (
    BINARY_EXT,
    FIRST_STEP_LINE,
    HEADER_CAPTION,
    HEADER_LEN,
    HEADER_LINE,
    MAX_STEPS,
    PROGRAM_LEN,
    STEP_CAPTION,
    STEP_SEPARATOR,
    TEXT_EXT,
)
from prg_core.records import Header, Step


class Source(Enum):
    """Format a program was decoded from."""

    BINARY = "binary"
    TEXT = "text"

    @property
    def target(self) -> Source:
        return Source.TEXT if self is Source.BINARY else Source.BINARY

    @property
    def extension(self) -> str:
        return BINARY_EXT if self is Source.BINARY else TEXT_EXT


@dataclass(frozen=True)
class Program:
    header: Header
    steps: tuple[Step, ...] = field(default_factory=tuple)
    source: Source = Source.BINARY


def decode_binary(data: bytes) -> Program:
    header = Header.decode(data[:HEADER_LEN])
    steps = Step.decode_sequence(data[HEADER_LEN:])
    return Program(header, tuple(steps), Source.BINARY)


def decode_text(text: str) -> Program:
    lines = text.strip().split("\n")
    if len(lines) <= HEADER_LINE:
        raise StructuralError("header line missing")
    if len(lines) < FIRST_STEP_LINE:
        raise StructuralError(
            f"text program needs at least {FIRST_STEP_LINE} lines, got {len(lines)}"
        )
    header = Header.decode_text(lines[HEADER_LINE])
    steps = Step.decode_text_sequence(lines[FIRST_STEP_LINE:])
    return Program(header, tuple(steps), Source.TEXT)


def decode(data: bytes) -> Program:
    """Decode a program, detecting its format.

    Anything that is valid UTF-8 is read as text, everything else as binary.
    """
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        return decode_binary(data)
    return decode_text(text)


def encode_to_binary(program: Program) -> bytes:
    buf = bytearray(program.header.encode())
    for step in program.steps:
        buf += step.encode()

    if len(buf) > PROGRAM_LEN:
        raise SizeCeilingError(
            f"{len(buf)} bytes ({len(program.steps)} steps, at most {MAX_STEPS} fit)"
        )

    # Zero padding doubles as the end marker for the step sequence
    buf += bytes(PROGRAM_LEN - len(buf))
    return bytes(buf)


def encode_to_text(program: Program) -> str:
    lines = [
        HEADER_CAPTION,
        program.header.encode_text(),
        "",
        STEP_CAPTION,
        STEP_SEPARATOR,
    ]
    lines.extend(step.encode_text() for step in program.steps)
    return "".join(line + "\n" for line in lines)


def convert(program: Program) -> bytes:
    """Encode a program in the format opposite to the one it came from."""
    if program.source.target is Source.BINARY:
        return encode_to_binary(program)
    return encode_to_text(program).encode("utf-8")


def read_program(path: Path) -> Program:
    return decode(Path(path).read_bytes())
