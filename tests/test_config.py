"""
Tests — Configuration
======================
Credential loading from the environment and dotenv files.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator

import pytest

from township_resolver.common.exceptions import MissingCredentialError
from township_resolver.config import API_KEY_ENV_VARS, load_api_key


@pytest.fixture()
def clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Run from an empty directory with no API key variables set.

    ``load_dotenv`` writes straight into ``os.environ``, so the variables
    are removed again after the test.
    """
    monkeypatch.chdir(tmp_path)
    for name in API_KEY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield tmp_path
    for name in API_KEY_ENV_VARS:
        os.environ.pop(name, None)


class TestLoadApiKey:
    def test_reads_api_key(self, clean_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("API_KEY", "from-env")
        assert load_api_key() == "from-env"

    def test_falls_back_to_google_maps_api_key(
        self, clean_env: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("GOOGLE_MAPS_API_KEY", "google-key")
        assert load_api_key() == "google-key"

    def test_api_key_takes_priority(
        self, clean_env: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("API_KEY", "primary")
        monkeypatch.setenv("GOOGLE_MAPS_API_KEY", "secondary")
        assert load_api_key() == "primary"

    def test_reads_dotenv_in_working_directory(self, clean_env: Path) -> None:
        (clean_env / ".env").write_text("API_KEY=dotenv-key\n", encoding="utf-8")
        assert load_api_key() == "dotenv-key"

    def test_explicit_env_file(self, clean_env: Path) -> None:
        env_file = clean_env / "custom.env"
        env_file.write_text("API_KEY=custom-key\n", encoding="utf-8")
        assert load_api_key(env_file) == "custom-key"

    def test_environment_wins_over_dotenv(
        self, clean_env: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (clean_env / ".env").write_text("API_KEY=dotenv-key\n", encoding="utf-8")
        monkeypatch.setenv("API_KEY", "env-key")
        assert load_api_key() == "env-key"

    def test_missing_key_raises(self, clean_env: Path) -> None:
        with pytest.raises(MissingCredentialError, match="API_KEY"):
            load_api_key()

    def test_blank_key_raises(self, clean_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("API_KEY", "   ")
        with pytest.raises(MissingCredentialError):
            load_api_key()
