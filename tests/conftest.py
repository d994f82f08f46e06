"""Shared pytest fixtures for kube_resources tests."""

from __future__ import annotations

import os

import pytest

from kube_resources.integrations.kubernetes.config import ENV_PREFIX


@pytest.fixture(autouse=True)
def reset_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear KRES_K8S_ prefixed environment variables for each test."""
    for key in list(os.environ.keys()):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def capture_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Fixture to capture log output."""
    import logging

    caplog.set_level(logging.DEBUG)
    return caplog
