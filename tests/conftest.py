import pytest
from map_params import config


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    # Keep a developer's .env from leaking into message assertions
    monkeypatch.setattr(config, "ARGS_LABEL", "job.Arg")
    monkeypatch.setattr(config, "LOG_ERRORS", False)
