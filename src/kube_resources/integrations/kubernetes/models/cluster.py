"""Kubernetes cluster-level resource display models."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from kube_resources.integrations.kubernetes.models.base import (
    K8sEntityBase,
    _common_fields,
    _safe_get,
)


class NamespaceSummary(K8sEntityBase):
    """Namespace display model."""

    status: str = Field(default="Active", description="Namespace phase")

    @classmethod
    def from_k8s_object(cls, obj: Any) -> NamespaceSummary:
        """Create from a kubernetes V1Namespace object."""
        fields = _common_fields(obj)
        fields["namespace"] = None
        return cls(**fields, status=_safe_get(obj, "status", "phase", default="Active"))
