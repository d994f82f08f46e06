"""Resource lists: one kind, one namespace scope, one access mask."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from kube_resources.resource.access import Access
    from kube_resources.resource.base import Properties, Resource, Row

logger = structlog.get_logger()


@dataclass(frozen=True)
class TableData:
    """Rendered rows of a list, keyed by object path in fetch order."""

    namespace: str
    header: list[str]
    rows: dict[str, list[str]] = field(default_factory=dict)
    properties: dict[str, dict[str, str]] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.rows)


class ResourceList:
    """The objects of one kind within a namespace scope.

    The template resource is used only as a factory for populated adapters;
    its own state is never rendered. A list keeps no connection and no
    results between calls: every :meth:`fetch` goes back to the caller.
    """

    def __init__(self, namespace: str, kind: str, resource: Resource, access: Access) -> None:
        # Cluster scoped kinds are always listed across the whole cluster.
        self._namespace = namespace if resource.namespaced else ""
        self._kind = kind
        self._resource = resource
        self._access = access
        self._log = logger.bind(entity=kind)

    def __repr__(self) -> str:
        return f"ResourceList(kind={self._kind!r}, namespace={self._namespace!r})"

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def resource(self) -> Resource:
        return self._resource

    @property
    def access(self) -> Access:
        return self._access

    @property
    def namespaced(self) -> bool:
        return self._resource.namespaced

    def has_access(self, flag: Access) -> bool:
        """Whether every verb in ``flag`` is allowed for this kind."""
        return flag in self._access

    def fetch(self) -> list[Resource]:
        """Fetch the current objects as populated adapters."""
        resources = self._resource.list(self._namespace)
        self._log.debug("fetched_list", namespace=self._namespace or "*", count=len(resources))
        return resources

    def header(self) -> Row:
        return self._resource.header(self._namespace)

    def table(self) -> TableData:
        """Fetch and render every object of the list."""
        rows: dict[str, Row] = {}
        properties: dict[str, Properties] = {}
        for resource in self.fetch():
            rows[resource.path] = resource.fields(self._namespace)
            if extra := resource.ext_fields():
                properties[resource.path] = extra
        return TableData(
            namespace=self._namespace,
            header=self.header(),
            rows=rows,
            properties=properties,
        )
