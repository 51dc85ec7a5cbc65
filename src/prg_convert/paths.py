"""Output file naming."""
from __future__ import annotations

from pathlib import Path

from prg_core.errors import NameExhaustionError
from prg_core.protocol import MAX_NAME_SUFFIX


def output_path(in_path: Path, extension: str) -> Path:
    """Pick a free sibling of ``in_path`` with the given extension.

    ``foo.prg`` becomes ``foo.txt``; if that exists, ``foo_0.txt``,
    ``foo_1.txt`` ... up to ``foo_99.txt``.
    """
    out = Path(in_path).with_suffix(f".{extension}")
    if not out.exists():
        return out

    for i in range(MAX_NAME_SUFFIX):
        candidate = out.with_name(f"{out.stem}_{i}{out.suffix}")
        if not candidate.exists():
            return candidate

    raise NameExhaustionError(
        f"{out.name} and all of _0 to _{MAX_NAME_SUFFIX - 1} already exist"
    )
