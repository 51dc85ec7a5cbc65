"""Conversion errors. Every one of them aborts the run."""
from __future__ import annotations

ERRORS = {
    "E_PROGRAM": "Program conversion failed",
    "E_STRUCTURE": "Required line or byte range missing",
    "E_PARSE": "Invalid field value",
    "E_SIZE_CEILING": "Program does not fit the 1422 byte program slot",
    "E_NAME_EXHAUSTED": "No free output file name",
}


class ProgramError(Exception):
    code = "E_PROGRAM"

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"{ERRORS[self.code]}: {detail}")


class StructuralError(ProgramError):
    code = "E_STRUCTURE"


class ParseError(ProgramError):
    code = "E_PARSE"


class SizeCeilingError(ProgramError):
    code = "E_SIZE_CEILING"


class NameExhaustionError(ProgramError):
    code = "E_NAME_EXHAUSTED"
