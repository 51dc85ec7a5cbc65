import random
from pathlib import Path

from prg_core.program import Program, Source, encode_to_binary, encode_to_text
from prg_core.records import Header, Step

# Wait values above 0x7F make the header invalid UTF-8, so the file is
# detected as binary.
DEMO_WAIT_L = 1500
DEMO_WAIT_R = 2200


def generate_program(steps: int, seed: int = 0) -> Program:
    rng = random.Random(seed)
    quote = 0
    records = []
    for _ in range(steps):
        quote += rng.randint(5, 40)
        pistons = [rng.randint(0, 255) for _ in range(8)]
        records.append(Step(quote, *pistons, rng.randint(0, 30), rng.randint(0, 30)))
    return Program(Header(DEMO_WAIT_L, DEMO_WAIT_R), tuple(records), Source.BINARY)


def write_program(out_file: str, steps: int, text: bool = False, seed: int = 0) -> Path:
    program = generate_program(steps, seed)
    out = Path(out_file)
    out.parent.mkdir(parents=True, exist_ok=True)

    if text:
        out.write_bytes(encode_to_text(program).encode("utf-8"))
    else:
        out.write_bytes(encode_to_binary(program))

    print(f"GENERATED: {out} ({steps} steps)")
    return out


if __name__ == "__main__":
    import sys

    # Usage:
    #   python tools/make_demo_program.py OUT_FILE [--steps N] [--seed S] [--text]

    args = [a for a in sys.argv[1:] if a]

    def pop_flag(arg_list: list[str], flag: str) -> tuple[bool, list[str]]:
        """Remove a boolean flag from an argv-style list."""
        if flag in arg_list:
            return True, [a for a in arg_list if a != flag]
        return False, arg_list

    def pop_int(arg_list: list[str], flag: str, default: int) -> tuple[int, list[str]]:
        if flag not in arg_list:
            return default, arg_list
        i = arg_list.index(flag)
        if i + 1 >= len(arg_list):
            raise SystemExit(f"{flag} requires a value")
        return int(arg_list[i + 1]), arg_list[:i] + arg_list[i + 2:]

    text, args = pop_flag(args, "--text")
    steps, args = pop_int(args, "--steps", 12)
    seed, args = pop_int(args, "--seed", 0)

    out = args[0] if len(args) > 0 else "demo.prg"
    write_program(out, steps, text=text, seed=seed)
