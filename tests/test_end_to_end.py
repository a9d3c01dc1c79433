import os
import subprocess
import sys
from pathlib import Path

REPO = Path(__file__).resolve().parents[1]


def run(args, cwd):
    env = dict(os.environ, PYTHONPATH=str(REPO / "src"))
    return subprocess.run([sys.executable, *args], cwd=cwd, env=env, check=False, capture_output=True, text=True)


def test_write_read_and_detect_corruption(tmp_path):
    # Writer with defaults drops persona.rec in the working directory
    r = run(["-m", "persona_write.cli"], cwd=tmp_path)
    assert r.returncode == 0, r.stderr + r.stdout
    rec = tmp_path / "persona.rec"
    assert rec.stat().st_size == 16

    r = run(["-m", "persona_read.cli", "show"], cwd=tmp_path)
    assert r.returncode == 0, r.stderr + r.stdout
    assert r.stdout.strip() == "Name: Juan, Age: 30"

    # Corrupt the format tag and ensure failure
    r = run([str(REPO / "scripts" / "corrupt_one_byte.py"), str(rec)], cwd=tmp_path)
    assert r.returncode == 0, r.stderr + r.stdout

    r = run(["-m", "persona_read.cli", "show", str(rec)], cwd=tmp_path)
    assert r.returncode != 0
    assert "E_UNKNOWN_FORMAT" in r.stdout


def test_corrupt_at_offset(tmp_path):
    r = run(["-m", "persona_write.cli", "Ana", "7"], cwd=tmp_path)
    assert r.returncode == 0, r.stderr + r.stdout
    rec = tmp_path / "persona.rec"

    # Offset past the end is refused without touching the file
    before = rec.read_bytes()
    r = run([str(REPO / "scripts" / "corrupt_one_byte.py"), str(rec), "100"], cwd=tmp_path)
    assert r.returncode == 2
    assert "outside file" in r.stdout
    assert rec.read_bytes() == before

    # High byte of the schema version: 1 -> 257
    r = run([str(REPO / "scripts" / "corrupt_one_byte.py"), str(rec), "4"], cwd=tmp_path)
    assert r.returncode == 0, r.stderr + r.stdout

    r = run(["-m", "persona_read.cli", "show", str(rec)], cwd=tmp_path)
    assert r.returncode != 0
    assert "E_UNSUPPORTED_VERSION" in r.stdout
