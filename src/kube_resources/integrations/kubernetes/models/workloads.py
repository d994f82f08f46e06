"""Kubernetes workload resource display models."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from kube_resources.integrations.kubernetes.models.base import (
    K8sEntityBase,
    _common_fields,
    _safe_get,
)

# Container states that do not explain a pod's status on their own.
_QUIET_STATES = frozenset({"running", "unknown", "Completed"})


def _container_state(state: Any) -> str:
    """``running``, the waiting/terminated reason, or ``unknown``."""
    if state is None:
        return "unknown"
    if getattr(state, "running", None):
        return "running"
    for phase, fallback in (("waiting", "Waiting"), ("terminated", "Terminated")):
        if getattr(state, phase, None):
            return str(_safe_get(state, phase, "reason", default=fallback))
    return "unknown"


class ContainerStatus(K8sEntityBase):
    """One container of a pod."""

    ready: bool = Field(default=False, description="Whether container is ready")
    restart_count: int = Field(default=0, description="Number of restarts")
    state: str = Field(default="unknown", description="Current state or its reason")

    @classmethod
    def from_k8s_object(cls, obj: Any) -> ContainerStatus:
        """Create from a kubernetes V1ContainerStatus object."""
        return cls(
            name=getattr(obj, "name", "") or "",
            ready=bool(getattr(obj, "ready", False)),
            restart_count=getattr(obj, "restart_count", 0) or 0,
            state=_container_state(getattr(obj, "state", None)),
        )


class PodSummary(K8sEntityBase):
    """Pod display model."""

    phase: str = Field(default="Unknown", description="Pod phase")
    node_name: str | None = Field(default=None, description="Node the pod is scheduled on")
    pod_ip: str | None = Field(default=None, description="Pod IP address")
    qos_class: str | None = Field(default=None, description="Quality of service class")
    total_count: int = Field(default=0, description="Containers declared in the spec")
    containers: list[ContainerStatus] = Field(default_factory=list)

    @property
    def ready_count(self) -> int:
        return sum(1 for c in self.containers if c.ready)

    @property
    def restarts(self) -> int:
        return sum(c.restart_count for c in self.containers)

    @property
    def status(self) -> str:
        """First container reason worth showing, else the pod phase."""
        for container in self.containers:
            if container.state not in _QUIET_STATES:
                return container.state
        return self.phase

    @classmethod
    def from_k8s_object(cls, obj: Any) -> PodSummary:
        """Create from a kubernetes V1Pod object."""
        statuses = _safe_get(obj, "status", "container_statuses") or []

        return cls(
            **_common_fields(obj),
            phase=_safe_get(obj, "status", "phase", default="Unknown"),
            node_name=_safe_get(obj, "spec", "node_name"),
            pod_ip=_safe_get(obj, "status", "pod_ip"),
            qos_class=_safe_get(obj, "status", "qos_class"),
            total_count=len(_safe_get(obj, "spec", "containers") or []),
            containers=[ContainerStatus.from_k8s_object(cs) for cs in statuses],
        )


class DeploymentSummary(K8sEntityBase):
    """Deployment display model. Missing replica counts read as zero."""

    replicas: int = Field(default=0, description="Desired replicas")
    current_replicas: int = Field(default=0, description="Replicas currently created")
    available_replicas: int = Field(default=0, description="Available replicas")
    updated_replicas: int = Field(default=0, description="Replicas at the latest revision")

    @classmethod
    def from_k8s_object(cls, obj: Any) -> DeploymentSummary:
        """Create from a kubernetes V1Deployment object."""
        counts = {
            "current_replicas": "replicas",
            "available_replicas": "available_replicas",
            "updated_replicas": "updated_replicas",
        }
        return cls(
            **_common_fields(obj),
            replicas=_safe_get(obj, "spec", "replicas", default=0) or 0,
            **{field: _safe_get(obj, "status", attr) or 0 for field, attr in counts.items()},
        )
