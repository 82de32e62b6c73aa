"""Settings defaults and shared DTO tests."""
import pytest

from api.shared.dtos import HealthCheckResponse
from core.settings import AppSettings


@pytest.fixture(autouse=True)
def _no_json_logs_env(monkeypatch):
    monkeypatch.delenv("JSON_LOGS", raising=False)


def test_json_logs_default_on_in_prod():
    assert AppSettings(ENVIRONMENT="prod").JSON_LOGS is True


@pytest.mark.parametrize("environment", ["local", "dev", "test"])
def test_json_logs_default_off_outside_prod(environment):
    assert AppSettings(ENVIRONMENT=environment).JSON_LOGS is False


def test_explicit_json_logs_wins_over_environment(monkeypatch):
    assert AppSettings(ENVIRONMENT="prod", JSON_LOGS=False).JSON_LOGS is False

    monkeypatch.setenv("JSON_LOGS", "true")
    assert AppSettings(ENVIRONMENT="local").JSON_LOGS is True


def test_health_timestamp_is_timezone_aware():
    response = HealthCheckResponse(status="ok")
    assert response.timestamp.tzinfo is not None
    assert response.timestamp.utcoffset().total_seconds() == 0
