import pytest

from userpipe.config import Settings
from userpipe.pipeline import PipelineRunner


@pytest.fixture()
def test_settings() -> Settings:
    return Settings(app_name="userpipe", log_level="INFO")


@pytest.fixture()
def runner(test_settings: Settings) -> PipelineRunner:
    return PipelineRunner(test_settings)
