"""PRG Convert - binary <-> text program converter."""
from __future__ import annotations

from pathlib import Path

import click

from prg_core.errors import ProgramError
from prg_core.program import Program, convert, encode_to_text, read_program
from prg_convert.paths import output_path


def convert_file(in_file: Path, pretty_print: bool = True) -> Path:
    """Convert a program file to the other format and return the new path."""
    click.echo(f"Loading file: {in_file}")
    program: Program = read_program(in_file)
    click.echo(f"Reading {program.source.value} format")

    if pretty_print:
        click.echo(encode_to_text(program), nl=False)

    target = program.source.target
    out_file = output_path(in_file, target.extension)

    # Build the whole output before touching the disk
    payload = convert(program)

    click.echo(f"Saving output to: {out_file}")
    out_file.write_bytes(payload)

    click.echo(f"Wrote {target.extension} file: {out_file} ({len(program.steps)} steps)")
    return out_file


@click.command()
@click.argument("in_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-p", "--pretty-print-off", is_flag=True, help="Do not dump the program to the console")
def main(in_file: Path, pretty_print_off: bool) -> None:
    """Convert IN_FILE between the binary (.prg) and text (.txt) program formats."""
    try:
        convert_file(in_file, pretty_print=not pretty_print_off)
    except (ProgramError, OSError) as e:
        # Fail closed with a single-line reason, nothing written.
        click.echo(f"FATAL: {e}")
        raise SystemExit(1)

    click.echo("Done!")


if __name__ == "__main__":
    main()
