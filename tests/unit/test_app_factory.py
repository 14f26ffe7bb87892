"""
Unit tests for the FastAPI app factory.
"""

from unittest.mock import patch

import pytest

from plan_engine.api.main import create_app
from plan_engine.settings import Settings


def make_settings(**kwargs):
    return Settings(_env_file=None, **kwargs)


@pytest.mark.unit
@patch("plan_engine.api.main.sentry_sdk.init")
class TestSentryInit:
    def test_skipped_without_dsn(self, mock_init):
        create_app(make_settings(environment="production", sentry_dsn=None))
        mock_init.assert_not_called()

    def test_skipped_in_tests(self, mock_init):
        create_app(make_settings(environment="test", sentry_dsn="https://key@sentry.test/1"))
        mock_init.assert_not_called()

    def test_production_samples_traces(self, mock_init):
        create_app(make_settings(environment="production", sentry_dsn="https://key@sentry.test/1"))

        kwargs = mock_init.call_args.kwargs
        assert kwargs["environment"] == "production"
        assert kwargs["traces_sample_rate"] == 0.1

    def test_other_environments_trace_everything(self, mock_init):
        create_app(make_settings(environment="staging", sentry_dsn="https://key@sentry.test/1"))
        assert mock_init.call_args.kwargs["traces_sample_rate"] == 1.0


@pytest.mark.unit
def test_routes_are_registered(test_settings):
    paths = {route.path for route in create_app(test_settings).routes}
    assert {"/health", "/plans", "/generate-workout"} <= paths
