"""Uniform resource adapter contract.

An adapter binds a per-kind caller to one shape every consumer can drive
without knowing the kind: ``new_instance`` loads a fetched object,
``header``/``fields`` render it as a table row, ``marshal`` serializes a live
copy and ``run`` dispatches the optional imperative action.

Adapters hold no locks and cache nothing across calls. ``fields`` renders the
snapshot loaded by ``new_instance`` while ``marshal`` always re-fetches, so the
two can disagree about an object that changed in between.
"""

from __future__ import annotations

import builtins
import functools
import json
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar, Self

import structlog
import yaml

from kube_resources.integrations.kubernetes.exceptions import (
    ResourceKindError,
    ResourceNotLoadedError,
    UnsupportedActionError,
)
from kube_resources.resource.access import Access
from kube_resources.resource.list import ResourceList
from kube_resources.services.kubernetes.base import Runnable

if TYPE_CHECKING:
    from kube_resources.integrations.kubernetes.client import KubernetesClient
    from kube_resources.integrations.kubernetes.models.base import K8sEntityBase
    from kube_resources.services.kubernetes.base import Caller, K8sBaseCaller

logger = structlog.get_logger()

ALL_NAMESPACES = ""

Row = list[str]
Properties = dict[str, str]


def namespaced(path: str) -> tuple[str, str]:
    """Split ``namespace/name`` into its parts; bare names have no namespace."""
    namespace, _, name = path.rpartition("/")
    return namespace, name


def namespaced_name(namespace: str | None, name: str) -> str:
    """Build the identity path of an object."""
    return f"{namespace}/{name}" if namespace else name


def bool_to_str(flag: bool) -> str:
    return "true" if flag else "false"


@functools.cache
def _api_client() -> Any:
    from kubernetes.client import ApiClient

    return ApiClient()


class _Payload:
    """Response stand-in accepted by ``ApiClient.deserialize``."""

    def __init__(self, manifest: Mapping[str, Any]) -> None:
        self.data = json.dumps(manifest, default=str)


def to_manifest(obj: Any) -> Any:
    """Convert an SDK model (or mapping) to plain API-shaped data."""
    return _api_client().sanitize_for_serialization(obj)


def from_manifest(manifest: Mapping[str, Any], sdk_type: str) -> Any:
    """Build an SDK model such as ``V1CronJob`` from its API mapping."""
    return _api_client().deserialize(_Payload(manifest), sdk_type)


def marshal_object(manifest: Mapping[str, Any]) -> str:
    return yaml.safe_dump(dict(manifest), default_flow_style=False, sort_keys=False)


class Resource(ABC):
    """Base adapter shared by every resource kind.

    Subclasses describe their kind through class attributes and implement
    :meth:`_row`. An instance created directly is an empty template: it owns
    a caller and builds populated adapters of its own class through
    :meth:`new_instance`.

    Attributes:
        kind: Registry name, e.g. ``cronjob``.
        aliases: Extra names the registry accepts.
        api_version: API group/version stamped by :meth:`marshal`.
        api_kind: API kind stamped by :meth:`marshal`, e.g. ``CronJob``.
        sdk_type: Name of the kubernetes SDK model class for this kind.
        namespaced: False for cluster scoped kinds.
        access: Verbs a browsing UI may offer for this kind.
        columns: Header columns, without the namespace column.
        model: Display model built from the raw object.
        caller_type: Caller class that fetches this kind.
    """

    kind: ClassVar[str]
    aliases: ClassVar[tuple[str, ...]] = ()
    api_version: ClassVar[str]
    api_kind: ClassVar[str]
    sdk_type: ClassVar[str]
    namespaced: ClassVar[bool] = True
    access: ClassVar[Access] = Access.ALL_VERBS
    columns: ClassVar[tuple[str, ...]]
    model: ClassVar[type[K8sEntityBase]]
    caller_type: ClassVar[type[K8sBaseCaller]]

    def __init__(self, caller: Caller) -> None:
        self._caller = caller
        self._runner: Runnable | None = caller if isinstance(caller, Runnable) else None
        self._path = ""
        self._instance: Any = None
        self._log = logger.bind(entity=self.kind)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self._path!r})"

    @classmethod
    def from_client(cls, client: KubernetesClient) -> Self:
        """Template adapter wired to this kind's caller."""
        return cls(cls.caller_type(client))

    @classmethod
    def new_list(cls, namespace: str, caller: Caller) -> ResourceList:
        """List of this kind in ``namespace`` (``ALL_NAMESPACES`` for every one)."""
        return ResourceList(namespace, cls.kind, cls(caller), cls.access)

    @property
    def caller(self) -> Caller:
        return self._caller

    @property
    def path(self) -> str:
        return self._path

    @property
    def instance(self) -> Any:
        """The loaded display model, ``None`` until :meth:`new_instance`."""
        return self._instance

    # =========================================================================
    # Loading
    # =========================================================================

    def new_instance(self, raw: Any) -> Self:
        """Build a populated adapter from a fetched object.

        ``raw`` may be the SDK model or its API mapping; both load the same
        way. The returned adapter shares this adapter's caller.

        Raises:
            ResourceKindError: ``raw`` is not an object of this kind.
        """
        obj = self._coerce(raw)
        resource = type(self)(self._caller)
        resource._instance = self.model.from_k8s_object(obj)
        resource._path = namespaced_name(resource._instance.namespace, resource._instance.name)
        return resource

    def _coerce(self, raw: Any) -> Any:
        import kubernetes.client

        sdk_class = getattr(kubernetes.client, self.sdk_type)
        if isinstance(raw, sdk_class):
            return raw
        if isinstance(raw, Mapping) and raw.get("kind", self.api_kind) == self.api_kind:
            return from_manifest(raw, self.sdk_type)

        received = raw.get("kind") if isinstance(raw, Mapping) else type(raw).__name__
        self._log.critical("resource_kind_mismatch", expected=self.api_kind, received=received)
        raise ResourceKindError(self.api_kind, received)

    def get(self, path: str) -> Self:
        """Fetch one object and return it as a populated adapter."""
        namespace, name = namespaced(path)
        return self.new_instance(self._caller.get(namespace, name))

    def list(self, namespace: str) -> builtins.list[Self]:
        """Fetch every object in ``namespace`` as populated adapters."""
        items = self._caller.list(namespace)
        return [self.new_instance(item) for item in items]

    def delete(self, path: str) -> None:
        namespace, name = namespaced(path)
        self._caller.delete(namespace, name)

    # =========================================================================
    # Serialization
    # =========================================================================

    def marshal(self, path: str) -> str:
        """Fetch ``path`` live and serialize it to YAML.

        The fetched object is stamped with ``apiVersion`` and ``kind``, which
        the API leaves out of objects returned by typed reads and lists.

        Raises:
            ResourceKindError: The caller returned an object of another kind.
        """
        namespace, name = namespaced(path)
        manifest = to_manifest(self._coerce(self._caller.get(namespace, name)))
        stamped = {"apiVersion": self.api_version, "kind": self.api_kind}
        stamped.update((k, v) for k, v in manifest.items() if k not in stamped)
        self._log.debug("marshaled_resource", path=path)
        return marshal_object(stamped)

    # =========================================================================
    # Rendering
    # =========================================================================

    def _shows_namespace(self, namespace: str) -> bool:
        return self.namespaced and namespace == ALL_NAMESPACES

    def header(self, namespace: str) -> Row:
        """Column names; ``NAMESPACE`` leads when every namespace is shown."""
        head: Row = ["NAMESPACE"] if self._shows_namespace(namespace) else []
        return head + list(self.columns)

    def fields(self, namespace: str) -> Row:
        """Row for the loaded object, positionally matching :meth:`header`."""
        instance = self._loaded()
        row: Row = [instance.namespace or ""] if self._shows_namespace(namespace) else []
        return row + self._row(instance)

    def ext_fields(self) -> Properties:
        """Display values outside the fixed header."""
        return {}

    def _loaded(self) -> Any:
        if self._instance is None:
            raise ResourceNotLoadedError(f"{self.kind} adapter has no loaded instance")
        return self._instance

    @abstractmethod
    def _row(self, instance: Any) -> Row:
        """Kind specific columns for ``instance``."""


class RunnableResource(Resource):
    """Adapter for kinds with an imperative run action."""

    def run(self, path: str) -> None:
        """Trigger the caller's run action for ``path``.

        Raises:
            UnsupportedActionError: The caller cannot run objects.
        """
        namespace, name = namespaced(path)
        if self._runner is None:
            raise UnsupportedActionError("run", path, resource_type=self.kind)
        self._log.info("running_resource", path=path)
        self._runner.run(namespace, name)
