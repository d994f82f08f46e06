"""Pod resource adapter."""

from __future__ import annotations

from typing import ClassVar

from kube_resources.integrations.kubernetes.models.base import NONE_PLACEHOLDER
from kube_resources.integrations.kubernetes.models.workloads import PodSummary
from kube_resources.resource.access import Access
from kube_resources.resource.base import Properties, Resource, Row
from kube_resources.resource.registry import register
from kube_resources.services.kubernetes.workload_caller import PodCaller


@register
class Pod(Resource):
    """Tracks a pod."""

    kind: ClassVar[str] = "pod"
    aliases: ClassVar[tuple[str, ...]] = ("pods", "po")
    api_version: ClassVar[str] = "v1"
    api_kind: ClassVar[str] = "Pod"
    sdk_type: ClassVar[str] = "V1Pod"
    access: ClassVar[Access] = Access.ALL_VERBS | Access.DESCRIBE
    columns: ClassVar[tuple[str, ...]] = (
        "NAME",
        "READY",
        "STATUS",
        "RESTARTS",
        "IP",
        "NODE",
        "AGE",
    )
    model = PodSummary
    caller_type = PodCaller

    def _row(self, instance: PodSummary) -> Row:
        return [
            instance.name,
            f"{instance.ready_count}/{instance.total_count}",
            instance.status,
            str(instance.restarts),
            instance.pod_ip or NONE_PLACEHOLDER,
            instance.node_name or NONE_PLACEHOLDER,
            instance.age,
        ]

    def ext_fields(self) -> Properties:
        """Pod phase and QoS class, used for row styling."""
        pod: PodSummary = self._loaded()
        return {"phase": pod.phase, "qos": pod.qos_class or NONE_PLACEHOLDER}
