"""Deployment resource adapter."""

from __future__ import annotations

from typing import ClassVar

from kube_resources.integrations.kubernetes.models.workloads import DeploymentSummary
from kube_resources.resource.access import Access
from kube_resources.resource.base import Resource, Row
from kube_resources.resource.registry import register
from kube_resources.services.kubernetes.workload_caller import DeploymentCaller


@register
class Deployment(Resource):
    """Tracks a deployment."""

    kind: ClassVar[str] = "deployment"
    aliases: ClassVar[tuple[str, ...]] = ("deployments", "deploy", "dp")
    api_version: ClassVar[str] = "apps/v1"
    api_kind: ClassVar[str] = "Deployment"
    sdk_type: ClassVar[str] = "V1Deployment"
    access: ClassVar[Access] = Access.ALL_VERBS | Access.DESCRIBE
    columns: ClassVar[tuple[str, ...]] = (
        "NAME",
        "DESIRED",
        "CURRENT",
        "UP-TO-DATE",
        "AVAILABLE",
        "AGE",
    )
    model = DeploymentSummary
    caller_type = DeploymentCaller

    def _row(self, instance: DeploymentSummary) -> Row:
        return [
            instance.name,
            str(instance.replicas),
            str(instance.current_replicas),
            str(instance.updated_replicas),
            str(instance.available_replicas),
            instance.age,
        ]
