from pathlib import Path

import pytest

from junit_reporter.junit_parser import JUnitParser

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    return FIXTURES_DIR


@pytest.fixture
def parser():
    return JUnitParser()


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep a developer's .env or environment out of the tests."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("JUNIT_REPORTER_CONFIG", str(tmp_path / "missing.env"))
    for key in ("DEFAULT_FORMAT", "HTTP_TIMEOUT_SECONDS", "FASTMCP_PORT"):
        monkeypatch.delenv(key, raising=False)
