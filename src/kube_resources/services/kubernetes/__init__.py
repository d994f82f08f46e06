"""Per-kind Kubernetes callers.

Each caller wraps the shared :class:`KubernetesClient` for one object kind
and translates API failures into ``KubernetesError`` subclasses.
"""

from kube_resources.services.kubernetes.base import Caller, K8sBaseCaller, Runnable
from kube_resources.services.kubernetes.job_caller import CronJobCaller, JobCaller
from kube_resources.services.kubernetes.namespace_caller import NamespaceCaller
from kube_resources.services.kubernetes.workload_caller import DeploymentCaller, PodCaller

__all__ = [
    "Caller",
    "CronJobCaller",
    "DeploymentCaller",
    "JobCaller",
    "K8sBaseCaller",
    "NamespaceCaller",
    "PodCaller",
    "Runnable",
]
