"""Exceptions raised by the Kubernetes integration and the resource layer.

Remote failures are ``KubernetesError`` subclasses and may be reported back
to a user. ``ResourceKindError`` and ``ResourceNotLoadedError`` are
programming errors and sit outside that hierarchy.
"""

from __future__ import annotations

from typing import Any


def _located(what: str, resource_type: str | None, name: str | None, namespace: str | None) -> str:
    """``CronJob 'nightly' <what> in namespace 'batch'``-style message."""
    message = f"{resource_type} '{name}' {what}"
    if namespace:
        message += f" in namespace '{namespace}'"
    return message


class KubernetesError(Exception):
    """Base exception for recoverable Kubernetes operations.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code from the API server, if any.
        resource_type: API kind involved (e.g. "CronJob").
        resource_name: Name of the object involved.
        namespace: Namespace of the object, if namespaced.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        resource_type: str | None = None,
        resource_name: str | None = None,
        namespace: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.resource_type = resource_type
        self.resource_name = resource_name
        self.namespace = namespace

    def __str__(self) -> str:
        text = self.message
        if self.status_code:
            text += f" (status: {self.status_code})"
        if self.resource_type and self.resource_name:
            where = f" in {self.namespace}" if self.namespace else ""
            text += f" [{self.resource_type}/{self.resource_name}{where}]"
        return text


class KubernetesConnectionError(KubernetesError):
    """No kubeconfig or in-cluster configuration could be loaded."""

    def __init__(
        self,
        message: str = "Failed to connect to Kubernetes cluster",
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message=message)
        self.original_error = original_error


class KubernetesAuthError(KubernetesError):
    """The API server answered 401 or 403."""

    def __init__(
        self,
        message: str = "Kubernetes authentication/authorization failed",
        status_code: int | None = 401,
        reason: str | None = None,
    ) -> None:
        super().__init__(message=message, status_code=status_code)
        self.reason = reason


class KubernetesNotFoundError(KubernetesError):
    """The requested object does not exist (404)."""

    def __init__(
        self,
        message: str = "Kubernetes resource not found",
        resource_type: str | None = None,
        resource_name: str | None = None,
        namespace: str | None = None,
    ) -> None:
        if resource_type and resource_name:
            message = _located("not found", resource_type, resource_name, namespace)
        super().__init__(message, 404, resource_type, resource_name, namespace)


class KubernetesConflictError(KubernetesError):
    """The object already exists or changed underneath the request (409)."""

    def __init__(
        self,
        message: str = "Resource conflict",
        resource_type: str | None = None,
        resource_name: str | None = None,
        namespace: str | None = None,
    ) -> None:
        if resource_type and resource_name:
            message = _located("already exists", resource_type, resource_name, namespace)
        super().__init__(message, 409, resource_type, resource_name, namespace)


class KubernetesValidationError(KubernetesError):
    """The API server rejected the request body (400 or 422)."""

    def __init__(
        self,
        message: str = "Invalid resource specification",
        status_code: int | None = 422,
    ) -> None:
        super().__init__(message=message, status_code=status_code)


class UnsupportedActionError(KubernetesError):
    """An action was requested on a resource that cannot perform it.

    Browsing code offers actions generically, so this is an expected outcome
    to report back to the user.

    Attributes:
        action: The requested action (e.g. "run").
        path: The ``namespace/name`` path the action targeted.
    """

    def __init__(self, action: str, path: str, resource_type: str | None = None) -> None:
        super().__init__(
            message=f"unable to {action} {resource_type or 'resource'} {path}",
            resource_type=resource_type,
        )
        self.action = action
        self.path = path


class UnknownResourceKindError(KubernetesError, KeyError):
    """No adapter is registered under a kind name or alias."""

    def __init__(self, kind: str) -> None:
        super().__init__(message=f"no resource registered for kind '{kind}'")
        self.kind = kind

    def __str__(self) -> str:
        return self.message


class ResourceKindError(TypeError):
    """An adapter was handed an object of another kind.

    Signals a wiring defect rather than a cluster condition. Not a
    ``KubernetesError``.
    """

    def __init__(self, expected: str, received: Any) -> None:
        super().__init__(f"expected {expected} object, got {received!r}")
        self.expected = expected
        self.received = received


class ResourceNotLoadedError(RuntimeError):
    """An empty adapter was asked to render fields."""
