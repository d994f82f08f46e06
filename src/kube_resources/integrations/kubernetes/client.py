"""Kubernetes API client wrapper.

Each :class:`KubernetesClient` owns an ``ApiClient`` built from the active
cluster entry, so two clients pointed at different contexts never share the
SDK's global default configuration. Calls are single attempts; nothing here
retries.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import structlog

from kube_resources.integrations.kubernetes.exceptions import (
    KubernetesAuthError,
    KubernetesConflictError,
    KubernetesConnectionError,
    KubernetesError,
    KubernetesNotFoundError,
    KubernetesValidationError,
)

if TYPE_CHECKING:
    from kubernetes.client import ApiClient, AppsV1Api, BatchV1Api, CoreV1Api

    from kube_resources.integrations.kubernetes.config import KubernetesConfig

logger = structlog.get_logger()

IN_CLUSTER_CONTEXT = "in-cluster"


def _status_message(e: Any) -> str | None:
    """The ``message`` of a ``Status`` response body, if the body is one."""
    try:
        body = json.loads(e.body or "")
    except (TypeError, ValueError):
        return None
    return body.get("message") if isinstance(body, dict) else None


class KubernetesClient:
    """Kubernetes API client shared by every resource caller.

    Example:
        ```python
        from kube_resources.integrations.kubernetes import KubernetesClient, KubernetesConfig

        with KubernetesClient(KubernetesConfig.from_env()) as client:
            cronjobs = client.batch_v1.list_namespaced_cron_job("batch")
        ```
    """

    def __init__(self, config: KubernetesConfig) -> None:
        self._config = config
        self._current_context: str | None = None
        self._apis: dict[str, Any] = {}
        self._api_client = self._build_api_client()

        logger.info(
            "kubernetes_client_initialized",
            context=self.current_context,
            default_namespace=self.default_namespace,
        )

    def _build_api_client(self) -> ApiClient:
        """Load kubeconfig for the active cluster, falling back to in-cluster config."""
        from kubernetes import client, config
        from kubernetes.config import ConfigException

        context = self._config.get_active_context()
        kubeconfig = self._config.get_active_kubeconfig()

        try:
            api_client = config.new_client_from_config(config_file=kubeconfig, context=context)
        except ConfigException as kube_error:
            logger.debug("kubeconfig_unavailable", kubeconfig=kubeconfig, error=str(kube_error))
        else:
            self._current_context = context
            logger.debug("loaded_kubeconfig", context=context, kubeconfig=kubeconfig)
            return api_client

        configuration = client.Configuration()
        try:
            config.load_incluster_config(client_configuration=configuration)
        except ConfigException as e:
            raise KubernetesConnectionError(
                message="Cannot load Kubernetes configuration. "
                "Ensure kubeconfig exists or running inside a cluster.",
                original_error=e,
            ) from e
        self._current_context = IN_CLUSTER_CONTEXT
        logger.debug("loaded_incluster_config")
        return client.ApiClient(configuration)

    def _group(self, name: str) -> Any:
        """API group instance bound to this client, created on first use."""
        api = self._apis.get(name)
        if api is None:
            import kubernetes.client

            api = getattr(kubernetes.client, name)(api_client=self._api_client)
            self._apis[name] = api
        return api

    @property
    def api_client(self) -> ApiClient:
        return self._api_client

    @property
    def core_v1(self) -> CoreV1Api:
        """CoreV1Api (pods, namespaces)."""
        api: CoreV1Api = self._group("CoreV1Api")
        return api

    @property
    def apps_v1(self) -> AppsV1Api:
        """AppsV1Api (deployments)."""
        api: AppsV1Api = self._group("AppsV1Api")
        return api

    @property
    def batch_v1(self) -> BatchV1Api:
        """BatchV1Api (jobs, cronjobs)."""
        api: BatchV1Api = self._group("BatchV1Api")
        return api

    @property
    def current_context(self) -> str:
        """The loaded context name, ``in-cluster`` inside a pod."""
        return self._current_context or "current-context"

    @property
    def default_namespace(self) -> str:
        return self._config.get_active_namespace()

    # =========================================================================
    # Error Translation
    # =========================================================================

    @staticmethod
    def translate_api_exception(
        e: Exception,
        resource_type: str | None = None,
        resource_name: str | None = None,
        namespace: str | None = None,
    ) -> KubernetesError:
        """Map an SDK exception onto the ``KubernetesError`` hierarchy.

        Errors that are already ``KubernetesError`` pass through unchanged.
        For API errors the ``Status`` message from the response body is
        preferred over the HTTP reason phrase.
        """
        from kubernetes.client import ApiException

        if isinstance(e, KubernetesError):
            return e

        target = {
            "resource_type": resource_type,
            "resource_name": resource_name,
            "namespace": namespace,
        }
        if not isinstance(e, ApiException):
            return KubernetesError(message=str(e), **target)

        status = e.status
        message = _status_message(e) or e.reason

        if status in (401, 403):
            return KubernetesAuthError(
                message=message or "Authentication/authorization failed",
                status_code=status,
                reason=e.reason,
            )
        if status == 404:
            return KubernetesNotFoundError(**target)
        if status == 409:
            return KubernetesConflictError(**target)
        if status in (400, 422):
            return KubernetesValidationError(
                message=message or "Validation failed",
                status_code=status,
            )
        return KubernetesError(
            message=message or f"Kubernetes API error: {status}",
            status_code=status,
            **target,
        )

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def close(self) -> None:
        """Drop API group instances and close the connection pool."""
        self._apis.clear()
        self._api_client.close()
        logger.debug("kubernetes_client_closed", context=self.current_context)

    def __enter__(self) -> KubernetesClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
