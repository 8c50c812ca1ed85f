"""Pytest configuration and fixtures for asset_migrator tests."""
import pytest

from asset_migrator.config import Settings

from tests.helpers import BASE_URL, ENV_VARS, UPLOAD_URL


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Environment without any migrator variables and no .env file."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture
def env(clean_env):
    """Complete, valid migrator environment."""
    values = {
        "BASE_URL": BASE_URL,
        "AUTH_TOKEN": "source-token",
        "CLOUDINARY_KEY": "key-123",
        "CLOUDINARY_SECRET": "s3cr3t",
        "CLOUDINARY_URL": UPLOAD_URL,
        "FOLDER_NAME": "media",
        "CHUNK_SIZE": "2",
    }
    for var, value in values.items():
        clean_env.setenv(var, value)
    return clean_env


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        base_url=BASE_URL,
        auth_token="source-token",
        cloudinary_key="key-123",
        cloudinary_secret="s3cr3t",
        cloudinary_url=UPLOAD_URL,
        folder_name="media",
        chunk_size=2,
    )
