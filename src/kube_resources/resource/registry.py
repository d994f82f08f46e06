"""Registry mapping kind names to resource adapters.

Each adapter class declares the caller class it fetches with, so a list
built here can never pair a kind with another kind's caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import structlog

from kube_resources.integrations.kubernetes.exceptions import UnknownResourceKindError

if TYPE_CHECKING:
    from kube_resources.integrations.kubernetes.client import KubernetesClient
    from kube_resources.resource.base import Resource
    from kube_resources.resource.list import ResourceList

logger = structlog.get_logger()

R = TypeVar("R", bound="type[Resource]")

_RESOURCES: dict[str, type[Resource]] = {}
_ALIASES: dict[str, str] = {}

_REQUIRED_ATTRS = (
    "kind",
    "api_version",
    "api_kind",
    "sdk_type",
    "columns",
    "model",
    "caller_type",
)


def register(cls: R) -> R:
    """Class decorator adding an adapter to the registry.

    Raises:
        TypeError: The class does not declare its kind completely.
        ValueError: The kind or one of its aliases is already taken.
    """
    missing = [attr for attr in _REQUIRED_ATTRS if not hasattr(cls, attr)]
    if missing:
        raise TypeError(f"{cls.__name__} is missing {', '.join(missing)}")

    names = [cls.kind, *cls.aliases]
    taken = [n for n in names if n in _RESOURCES or n in _ALIASES]
    if taken:
        raise ValueError(f"kind name(s) already registered: {', '.join(taken)}")

    _RESOURCES[cls.kind] = cls
    for alias in cls.aliases:
        _ALIASES[alias] = cls.kind
    logger.debug("registered_resource", kind=cls.kind, aliases=list(cls.aliases))
    return cls


def unregister(kind: str) -> None:
    """Remove a kind and its aliases from the registry."""
    cls = _RESOURCES.pop(kind, None)
    if cls is None:
        raise UnknownResourceKindError(kind)
    for alias in cls.aliases:
        _ALIASES.pop(alias, None)


def get_resource_class(kind: str) -> type[Resource]:
    """Look up an adapter class by kind name or alias (case-insensitive).

    Raises:
        UnknownResourceKindError: Nothing is registered under ``kind``.
    """
    key = kind.strip().lower()
    key = _ALIASES.get(key, key)
    try:
        return _RESOURCES[key]
    except KeyError:
        raise UnknownResourceKindError(kind) from None


def registered_kinds() -> list[str]:
    return sorted(_RESOURCES)


def new_list(kind: str, client: KubernetesClient, namespace: str | None = None) -> ResourceList:
    """Build a list for ``kind`` wired to its own caller.

    Args:
        kind: Kind name or alias.
        client: Shared Kubernetes client.
        namespace: Namespace to list, ``ALL_NAMESPACES`` for every namespace,
            or ``None`` for the client's default namespace.
    """
    cls = get_resource_class(kind)
    resolved = client.default_namespace if namespace is None else namespace
    return cls.new_list(resolved, cls.caller_type(client))
