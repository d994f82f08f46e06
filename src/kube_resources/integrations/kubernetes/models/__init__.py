"""Kubernetes resource display models."""

from kube_resources.integrations.kubernetes.models.base import (
    NONE_PLACEHOLDER,
    UNKNOWN_PLACEHOLDER,
    K8sEntityBase,
    human_duration,
    to_age,
)
from kube_resources.integrations.kubernetes.models.cluster import NamespaceSummary
from kube_resources.integrations.kubernetes.models.jobs import CronJobSummary, JobSummary
from kube_resources.integrations.kubernetes.models.workloads import (
    ContainerStatus,
    DeploymentSummary,
    PodSummary,
)

__all__ = [
    "NONE_PLACEHOLDER",
    "UNKNOWN_PLACEHOLDER",
    "ContainerStatus",
    "CronJobSummary",
    "DeploymentSummary",
    "JobSummary",
    "K8sEntityBase",
    "NamespaceSummary",
    "PodSummary",
    "human_duration",
    "to_age",
]
