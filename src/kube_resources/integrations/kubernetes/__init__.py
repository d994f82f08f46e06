"""Kubernetes integration - API client, configuration and errors."""

from kube_resources.integrations.kubernetes.client import KubernetesClient
from kube_resources.integrations.kubernetes.config import ClusterConfig, KubernetesConfig
from kube_resources.integrations.kubernetes.exceptions import (
    KubernetesAuthError,
    KubernetesConflictError,
    KubernetesConnectionError,
    KubernetesError,
    KubernetesNotFoundError,
    KubernetesValidationError,
    ResourceKindError,
    ResourceNotLoadedError,
    UnknownResourceKindError,
    UnsupportedActionError,
)

__all__ = [
    "ClusterConfig",
    "KubernetesAuthError",
    "KubernetesClient",
    "KubernetesConfig",
    "KubernetesConflictError",
    "KubernetesConnectionError",
    "KubernetesError",
    "KubernetesNotFoundError",
    "KubernetesValidationError",
    "ResourceKindError",
    "ResourceNotLoadedError",
    "UnknownResourceKindError",
    "UnsupportedActionError",
]
