"""Caller for Kubernetes namespaces (cluster scoped)."""

from __future__ import annotations

import builtins
from typing import Any

from kube_resources.services.kubernetes.base import K8sBaseCaller


class NamespaceCaller(K8sBaseCaller):
    """Remote access for Namespaces. The namespace argument is ignored."""

    _entity_name = "namespace"
    _resource_type = "Namespace"

    def get(self, namespace: str, name: str) -> Any:
        self._log.debug("fetching_namespace", name=name)
        try:
            return self._client.core_v1.read_namespace(name=name)
        except Exception as e:
            self._handle_api_error(e, name)

    def list(self, namespace: str) -> builtins.list[Any]:
        self._log.debug("listing_namespaces")
        try:
            result = self._client.core_v1.list_namespace()
        except Exception as e:
            self._handle_api_error(e)
        self._log.debug("listed_namespaces", count=len(result.items))
        return list(result.items)

    def delete(self, namespace: str, name: str) -> None:
        self._log.info("deleting_namespace", name=name)
        try:
            self._client.core_v1.delete_namespace(name=name)
        except Exception as e:
            self._handle_api_error(e, name)
        self._log.info("deleted_namespace", name=name)
