"""Shared fixtures for resource adapter tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from kube_resources.services.kubernetes.job_caller import CronJobCaller


@pytest.fixture
def cronjob_caller() -> MagicMock:
    """Runnable caller mock shaped like CronJobCaller."""
    return MagicMock(spec=CronJobCaller)


@pytest.fixture
def plain_caller() -> MagicMock:
    """Caller mock without the run capability."""
    return MagicMock(spec=["get", "list", "delete"])
