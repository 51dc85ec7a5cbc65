import subprocess
import sys
from pathlib import Path

REPO = Path(__file__).resolve().parents[1]


def run(args, cwd):
    return subprocess.run([sys.executable, *args], cwd=cwd, check=False, capture_output=True, text=True)


def convert(path, *flags):
    return run(["-m", "prg_convert.cli", str(path), *flags], cwd=REPO)


def test_binary_text_binary(tmp_path):
    prg = tmp_path / "demo.prg"
    r = run(["tools/make_demo_program.py", str(prg), "--steps", "20"], cwd=REPO)
    assert r.returncode == 0, r.stderr + r.stdout
    original = prg.read_bytes()
    assert len(original) == 1422

    # Binary -> text
    r = convert(prg)
    assert r.returncode == 0, r.stderr + r.stdout
    assert "Reading binary format" in r.stdout
    assert "Quote | 1 2 3 4 5 6 7 8 | L R" in r.stdout
    txt = tmp_path / "demo.txt"
    assert txt.exists()
    assert len(txt.read_text(encoding="utf-8").splitlines()) == 5 + 20

    # Text -> binary, demo.prg is taken
    r = convert(txt, "--pretty-print-off")
    assert r.returncode == 0, r.stderr + r.stdout
    assert "Reading text format" in r.stdout
    assert "Quote |" not in r.stdout
    assert (tmp_path / "demo_0.prg").read_bytes() == original


def test_oversized_text_fails_without_output(tmp_path):
    txt = tmp_path / "big.txt"
    r = run(["tools/make_demo_program.py", str(txt), "--steps", "101", "--text"], cwd=REPO)
    assert r.returncode == 0, r.stderr + r.stdout

    r = convert(txt, "-p")
    assert r.returncode == 1
    assert r.stdout.strip().splitlines()[-1].startswith("FATAL:")
    assert not (tmp_path / "big.prg").exists()


def test_bad_text_fails(tmp_path):
    txt = tmp_path / "bad.txt"
    txt.write_text("Wait L | Wait R\n 10 | 20\n\nQuote | 1 2 3 4 5 6 7 8 | L R\n---\n 5 | 1 2 3 | 4 5\n")

    r = convert(txt)
    assert r.returncode == 1
    assert "FATAL:" in r.stdout
    assert "p4" in r.stdout
    assert not (tmp_path / "bad.prg").exists()


def test_huge_header_value_fails_cleanly(tmp_path):
    txt = tmp_path / "huge.txt"
    txt.write_text("Wait L | Wait R\n" + "9" * 5000 + " | 1\n\nQuote | 1 2 3 4 5 6 7 8 | L R\n---\n")

    r = convert(txt)
    assert r.returncode == 1
    assert "FATAL:" in r.stdout
    assert "Traceback" not in r.stderr
    assert not (tmp_path / "huge.prg").exists()
