from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from reactshift_cli.cli.ui import StepTracker
from tests.utils import FakeRunner, make_cra_project


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    home = tmp_path / "reactshift-home"
    home.mkdir()
    monkeypatch.setenv("REACTSHIFT_HOME", str(home))
    monkeypatch.delenv("REACTSHIFT_PACKAGE_MANAGER", raising=False)
    yield home


@pytest.fixture()
def js_project(tmp_path: Path) -> Path:
    return make_cra_project(tmp_path / "js-app")


@pytest.fixture()
def ts_project(tmp_path: Path) -> Path:
    return make_cra_project(tmp_path / "ts-app", typescript=True)


@pytest.fixture()
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture()
def tracker() -> StepTracker:
    return StepTracker("Test migration")
