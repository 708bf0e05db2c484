from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from config import Settings
from main import create_app


@pytest.fixture
def data_root(tmp_path: Path) -> Path:
    return tmp_path / "data"


@pytest.fixture
def make_client(data_root: Path):
    def _make(api_key: str = "") -> TestClient:
        settings = Settings(data_path=data_root, api_key=api_key)
        return TestClient(create_app(settings))

    return _make

