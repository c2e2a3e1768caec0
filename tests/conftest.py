from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
import sys

import pytest
from fastapi.testclient import TestClient


# Ensure `import geopin.*` works when pytest chooses an import mode that
# doesn't automatically add the project root to sys.path.
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))


@pytest.fixture()
def client(monkeypatch: pytest.MonkeyPatch) -> Iterator[TestClient]:
    # Small batch limit so the guard is cheap to exercise.
    monkeypatch.setenv("GEOPIN_BATCH_MAX_ITEMS", "5")
    monkeypatch.setenv("GEOPIN_COORDINATE_DECIMALS", "8")
    monkeypatch.setenv("GEOPIN_CORS_ALLOW_ORIGIN", "*")

    from geopin.core.settings import get_settings

    get_settings.cache_clear()

    from geopin.main import create_app

    app = create_app()
    yield TestClient(app)

    get_settings.cache_clear()
