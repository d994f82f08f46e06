"""Shared fixtures for Kubernetes caller tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from kube_resources.integrations.kubernetes.exceptions import KubernetesNotFoundError


@pytest.fixture
def mock_k8s_client() -> MagicMock:
    """Create a mock Kubernetes client.

    ``core_v1``, ``apps_v1`` and ``batch_v1`` are auto-created sub-mocks.
    Translated API errors come back as ``KubernetesNotFoundError``.
    """
    mock_client = MagicMock()
    mock_client.default_namespace = "default"
    mock_client.translate_api_exception.side_effect = lambda e, **kwargs: KubernetesNotFoundError(
        resource_type=kwargs.get("resource_type"),
        resource_name=kwargs.get("resource_name"),
        namespace=kwargs.get("namespace"),
    )
    return mock_client


@pytest.fixture
def items_response() -> MagicMock:
    """List response whose ``items`` holds two sentinel objects."""
    response = MagicMock()
    response.items = [MagicMock(name="first"), MagicMock(name="second")]
    return response
