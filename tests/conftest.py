from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def fake_aws_env(monkeypatch, tmp_path: Path):
    """No test may reach real credentials, config or the network."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "no-credentials"))
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "no-config"))
    monkeypatch.delenv("AWS_PROFILE", raising=False)
    monkeypatch.delenv("AWS_DEFAULT_PROFILE", raising=False)


@pytest.fixture
def aws_config(tmp_path: Path):
    """Write an AWS config file and return its path."""

    def write(text: str) -> Path:
        path = tmp_path / "aws-config"
        path.write_text(text)
        return path

    return write
