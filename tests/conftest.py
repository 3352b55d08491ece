from pathlib import Path

import pytest

from clientcheck.config import Settings
from clientcheck.pipeline import ValidationRunner


@pytest.fixture()
def temp_workspace(tmp_path: Path) -> Path:
    (tmp_path / "data" / "input").mkdir(parents=True, exist_ok=True)
    (tmp_path / "outputs").mkdir(parents=True, exist_ok=True)
    return tmp_path


@pytest.fixture()
def test_settings(temp_workspace: Path) -> Settings:
    return Settings(
        app_name="clientcheck",
        log_level="INFO",
        output_dir=str(temp_workspace / "outputs"),
        report_prefix="erros",
    )


@pytest.fixture()
def runner(test_settings: Settings) -> ValidationRunner:
    return ValidationRunner(test_settings)
