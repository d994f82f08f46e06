"""Namespace resource adapter."""

from __future__ import annotations

from typing import ClassVar

from kube_resources.integrations.kubernetes.models.cluster import NamespaceSummary
from kube_resources.resource.access import Access
from kube_resources.resource.base import Resource, Row
from kube_resources.resource.registry import register
from kube_resources.services.kubernetes.namespace_caller import NamespaceCaller


@register
class Namespace(Resource):
    """Tracks a namespace. Cluster scoped: never shows a NAMESPACE column."""

    kind: ClassVar[str] = "namespace"
    aliases: ClassVar[tuple[str, ...]] = ("namespaces", "ns")
    api_version: ClassVar[str] = "v1"
    api_kind: ClassVar[str] = "Namespace"
    sdk_type: ClassVar[str] = "V1Namespace"
    namespaced: ClassVar[bool] = False
    access: ClassVar[Access] = Access.CRUD | Access.DESCRIBE | Access.SWITCH
    columns: ClassVar[tuple[str, ...]] = ("NAME", "STATUS", "AGE")
    model = NamespaceSummary
    caller_type = NamespaceCaller

    def _row(self, instance: NamespaceSummary) -> Row:
        return [instance.name, instance.status, instance.age]
