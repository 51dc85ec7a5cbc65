"""PRG record codecs: the program header and the step records.

Both records exist in two encodings:

- binary: fixed-size little-endian records (see ``prg_core.protocol``)
- text: one ``|``-separated line per record

Reserved bytes are written as zero and ignored when reading.
"""
from __future__ import annotations

import re
import struct
from dataclasses import dataclass
from typing import Iterable
from warnings import warn

from prg_core.errors import ParseError, StructuralError
from prg_core.protocol import (
    END_QUOTE,
    FIELD_SEP,
    HEADER_FMT,
    HEADER_LEN,
    HEADER_MARKER,
    PISTON_COUNT,
    QUOTE_WIDTH,
    STEP_FMT,
    STEP_LEN,
    WAIT_WIDTH,
)

# Plain decimal only: no sign other than "+", no underscores, no spaces inside
_DECIMAL = re.compile(r"\+?[0-9]+")


def _check_width(value: int, bits: int, name: str) -> None:
    if not 0 <= value < (1 << bits):
        raise ParseError(f"{name} does not fit in {bits} bits: {value}")


def _field(parts: list[str], index: int, name: str) -> str:
    if index >= len(parts):
        raise ParseError(f"could not read {name}")
    return parts[index]


def _parse_uint(text: str, bits: int, name: str) -> int:
    text = text.strip()
    if not _DECIMAL.fullmatch(text):
        raise ParseError(f"invalid value for {name}: {text!r}")
    # Too many significant digits can never fit, and int() would refuse huge ones
    digits = text.lstrip("+").lstrip("0")
    if len(digits) > len(str((1 << bits) - 1)):
        raise ParseError(f"{name} does not fit in {bits} bits: {text[:20]}...")
    value = int(text)
    _check_width(value, bits, name)
    return value


@dataclass(frozen=True)
class Header:
    """Program header: delays for the left and right piston banks."""

    wait_l: int
    wait_r: int

    def __post_init__(self) -> None:
        _check_width(self.wait_l, 16, "wait L")
        _check_width(self.wait_r, 16, "wait R")

    @classmethod
    def decode(cls, data: bytes) -> Header:
        if len(data) < HEADER_LEN:
            raise StructuralError(f"header needs {HEADER_LEN} bytes, got {len(data)}")
        _marker, wait_l, wait_r = struct.unpack(HEADER_FMT, data[:HEADER_LEN])
        return cls(wait_l, wait_r)

    def encode(self) -> bytes:
        return struct.pack(HEADER_FMT, HEADER_MARKER, self.wait_l, self.wait_r)

    @classmethod
    def decode_text(cls, line: str) -> Header:
        parts = line.strip().split(FIELD_SEP)
        return cls(
            _parse_uint(_field(parts, 0, "wait L"), 16, "wait L"),
            _parse_uint(_field(parts, 1, "wait R"), 16, "wait R"),
        )

    def encode_text(self) -> str:
        return f"{self.wait_l:^{WAIT_WIDTH}}{FIELD_SEP}{self.wait_r:^{WAIT_WIDTH}}"


@dataclass(frozen=True)
class Step:
    """One actuation step.

    ``quote`` is the machine position of the step, ``p1``..``p8`` the piston
    offsets and ``l``/``r`` the offsets of the left (pistons 5-8) and right
    (pistons 1-4) banks.
    """

    quote: int
    p1: int
    p2: int
    p3: int
    p4: int
    p5: int
    p6: int
    p7: int
    p8: int
    l: int  # noqa: E741
    r: int

    def __post_init__(self) -> None:
        _check_width(self.quote, 16, "quote")
        for i, value in enumerate(self.pistons, start=1):
            _check_width(value, 8, f"p{i}")
        _check_width(self.l, 8, "l")
        _check_width(self.r, 8, "r")

    @property
    def pistons(self) -> tuple[int, ...]:
        return (self.p1, self.p2, self.p3, self.p4, self.p5, self.p6, self.p7, self.p8)

    @classmethod
    def decode(cls, data: bytes) -> Step:
        if len(data) < STEP_LEN:
            raise StructuralError(f"step needs {STEP_LEN} bytes, got {len(data)}")
        return cls(*struct.unpack(STEP_FMT, data[:STEP_LEN]))

    def encode(self) -> bytes:
        return struct.pack(STEP_FMT, self.quote, *self.pistons, self.l, self.r)

    @classmethod
    def decode_sequence(cls, data: bytes) -> list[Step]:
        """Decode consecutive step records up to the first end marker.

        The record holding quote 0 is not part of the result, and neither is
        anything after it. A trailing chunk shorter than a record also ends
        the sequence.
        """
        steps: list[Step] = []
        for off in range(0, len(data), STEP_LEN):
            chunk = data[off:off + STEP_LEN]
            if len(chunk) < STEP_LEN:
                warn(f"Truncated step record at step offset {off} ({len(chunk)} bytes)")
                break
            (quote,) = struct.unpack_from("<H", chunk)
            if quote == END_QUOTE:
                break
            steps.append(cls.decode(chunk))
        return steps

    @classmethod
    def decode_text(cls, line: str) -> Step:
        groups = line.strip().split(FIELD_SEP)
        pistons = _field(groups, 1, "piston data (missing |)").split()
        offsets = _field(groups, 2, "offset data (missing |)").split()

        quote = _parse_uint(_field(groups, 0, "quote"), 16, "quote")
        if quote == END_QUOTE:
            raise ParseError(f"quote {END_QUOTE} is reserved for the end of the program")

        values = [
            _parse_uint(_field(pistons, i, f"p{i + 1}"), 8, f"p{i + 1}")
            for i in range(PISTON_COUNT)
        ]
        values.append(_parse_uint(_field(offsets, 0, "l"), 8, "l"))
        values.append(_parse_uint(_field(offsets, 1, "r"), 8, "r"))
        return cls(quote, *values)

    def encode_text(self) -> str:
        pistons = " ".join(str(p) for p in self.pistons)
        return f"{self.quote:>{QUOTE_WIDTH}} {FIELD_SEP} {pistons} {FIELD_SEP} {self.l} {self.r}"

    @classmethod
    def decode_text_sequence(cls, lines: Iterable[str]) -> list[Step]:
        return [cls.decode_text(line) for line in lines]
