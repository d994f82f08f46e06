"""Callers for Kubernetes pods and deployments."""

from __future__ import annotations

import builtins
from typing import Any

from kube_resources.services.kubernetes.base import K8sBaseCaller


class PodCaller(K8sBaseCaller):
    """Remote access for Pods."""

    _entity_name = "pod"
    _resource_type = "Pod"

    def get(self, namespace: str, name: str) -> Any:
        self._log.debug("fetching_pod", name=name, namespace=namespace)
        try:
            return self._client.core_v1.read_namespaced_pod(name=name, namespace=namespace)
        except Exception as e:
            self._handle_api_error(e, name, namespace)

    def list(self, namespace: str) -> builtins.list[Any]:
        self._log.debug("listing_pods", namespace=namespace or "*")
        try:
            if namespace:
                result = self._client.core_v1.list_namespaced_pod(namespace=namespace)
            else:
                result = self._client.core_v1.list_pod_for_all_namespaces()
        except Exception as e:
            self._handle_api_error(e, None, namespace)
        self._log.debug("listed_pods", count=len(result.items))
        return list(result.items)

    def delete(self, namespace: str, name: str) -> None:
        self._log.info("deleting_pod", name=name, namespace=namespace)
        try:
            self._client.core_v1.delete_namespaced_pod(name=name, namespace=namespace)
        except Exception as e:
            self._handle_api_error(e, name, namespace)
        self._log.info("deleted_pod", name=name, namespace=namespace)


class DeploymentCaller(K8sBaseCaller):
    """Remote access for Deployments."""

    _entity_name = "deployment"
    _resource_type = "Deployment"

    def get(self, namespace: str, name: str) -> Any:
        self._log.debug("fetching_deployment", name=name, namespace=namespace)
        try:
            return self._client.apps_v1.read_namespaced_deployment(name=name, namespace=namespace)
        except Exception as e:
            self._handle_api_error(e, name, namespace)

    def list(self, namespace: str) -> builtins.list[Any]:
        self._log.debug("listing_deployments", namespace=namespace or "*")
        try:
            if namespace:
                result = self._client.apps_v1.list_namespaced_deployment(namespace=namespace)
            else:
                result = self._client.apps_v1.list_deployment_for_all_namespaces()
        except Exception as e:
            self._handle_api_error(e, None, namespace)
        self._log.debug("listed_deployments", count=len(result.items))
        return list(result.items)

    def delete(self, namespace: str, name: str) -> None:
        self._log.info("deleting_deployment", name=name, namespace=namespace)
        try:
            self._client.apps_v1.delete_namespaced_deployment(name=name, namespace=namespace)
        except Exception as e:
            self._handle_api_error(e, name, namespace)
        self._log.info("deleted_deployment", name=name, namespace=namespace)
