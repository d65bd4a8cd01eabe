import io
import os
import subprocess
import sys
from pathlib import Path

import pytest

from pywc.config_manager import WcSettings
from pywc.core.counter import WordCounter

REPO_ROOT = Path(__file__).resolve().parent.parent

TWO_LINES = "hello world\nfoo bar baz\n"
NO_NEWLINE = "one two"


def write(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(data, str):
        data = data.encode("utf-8")
    path.write_bytes(data)
    return path


@pytest.fixture
def counter() -> WordCounter:
    return WordCounter()


@pytest.fixture
def settings() -> WcSettings:
    return WcSettings()


@pytest.fixture
def sample_files(tmp_path: Path, monkeypatch):
    """Two small files in a temporary working directory."""
    write(tmp_path / "a.txt", TWO_LINES)
    write(tmp_path / "b.txt", NO_NEWLINE)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def fake_stdin(monkeypatch):
    """Replace standard input with the given bytes."""
    def _install(data: bytes):
        stream = io.TextIOWrapper(io.BytesIO(data), encoding="utf-8")
        monkeypatch.setattr(sys, "stdin", stream)
        return stream
    return _install


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    # Settings from the developer's environment must not leak into tests
    for key in list(os.environ):
        if key.startswith("PYWC_"):
            monkeypatch.delenv(key, raising=False)


def run_cli(cwd: Path, *args: str, input_bytes: bytes = b"") -> subprocess.CompletedProcess:
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(REPO_ROOT), env.get("PYTHONPATH")]))
    return subprocess.run(
        [sys.executable, "-m", "pywc", *args],
        cwd=cwd, env=env, input=input_bytes, capture_output=True
    )
