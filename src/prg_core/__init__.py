"""PRG Core - machine program records and codecs."""
from .errors import (
    NameExhaustionError,
    ParseError,
    ProgramError,
    SizeCeilingError,
    StructuralError,
)
from .program import (
    Program,
    Source,
    convert,
    decode,
    encode_to_binary,
    encode_to_text,
    read_program,
)
from .records import Header, Step

__all__ = [
    "Header",
    "Step",
    "Program",
    "Source",
    "decode",
    "encode_to_binary",
    "encode_to_text",
    "convert",
    "read_program",
    "ProgramError",
    "StructuralError",
    "ParseError",
    "SizeCeilingError",
    "NameExhaustionError",
]
