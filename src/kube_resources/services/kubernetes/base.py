"""Base caller for per-kind Kubernetes remote access.

A caller is the only component that talks to the API server. Resource
adapters receive one at construction and never reach the client directly.
"""

from __future__ import annotations

import builtins
from typing import TYPE_CHECKING, Any, NoReturn, Protocol, runtime_checkable

import structlog

if TYPE_CHECKING:
    from kube_resources.integrations.kubernetes.client import KubernetesClient

logger = structlog.get_logger()


class Caller(Protocol):
    """Remote access for one object kind.

    An empty ``namespace`` passed to :meth:`list` means every namespace.
    Cluster scoped kinds ignore the namespace argument entirely.
    """

    def get(self, namespace: str, name: str) -> Any: ...

    def list(self, namespace: str) -> builtins.list[Any]: ...

    def delete(self, namespace: str, name: str) -> None: ...


@runtime_checkable
class Runnable(Protocol):
    """Optional capability: trigger a one-off execution of an object."""

    def run(self, namespace: str, name: str) -> None: ...


class K8sBaseCaller:
    """Base class for Kubernetes callers.

    Provides the client reference, a logger bound to ``_entity_name`` and
    consistent API error translation. Subclasses set ``_entity_name`` and
    ``_resource_type`` (the API kind used in error messages).

    Example:
        >>> class JobCaller(K8sBaseCaller):
        ...     _entity_name = "job"
        ...     _resource_type = "Job"
    """

    _entity_name: str = ""
    _resource_type: str = ""

    def __init__(self, client: KubernetesClient) -> None:
        self._client = client
        self._log = logger.bind(entity=self._entity_name)

    @property
    def client(self) -> KubernetesClient:
        return self._client

    def _handle_api_error(
        self,
        e: Exception,
        resource_name: str | None = None,
        namespace: str | None = None,
    ) -> NoReturn:
        """Translate an API exception and re-raise.

        Raises:
            KubernetesError: Always raises an appropriate subclass.
        """
        raise self._client.translate_api_exception(
            e,
            resource_type=self._resource_type or None,
            resource_name=resource_name,
            namespace=namespace or None,
        ) from e
