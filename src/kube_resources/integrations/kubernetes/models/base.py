"""Base models for Kubernetes resource display."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

NONE_PLACEHOLDER = "<none>"
UNKNOWN_PLACEHOLDER = "<unknown>"


class K8sEntityBase(BaseModel):
    """Base class for all Kubernetes display models."""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    name: str = Field(description="Resource name")
    namespace: str | None = Field(default=None, description="Resource namespace")
    uid: str | None = Field(default=None, description="Kubernetes UID")
    creation_timestamp: str | None = Field(default=None, description="Creation time")
    labels: dict[str, str] | None = Field(default=None, description="Resource labels")
    annotations: dict[str, str] | None = Field(default=None, description="Resource annotations")

    @classmethod
    def from_k8s_object(cls, obj: Any) -> K8sEntityBase:
        """Create from a kubernetes SDK object. Each display model implements this."""
        raise NotImplementedError(f"{cls.__name__} does not load kubernetes objects")

    @property
    def age(self) -> str:
        """Human-readable age, ``<unknown>`` without a creation timestamp."""
        return to_age(self.creation_timestamp, placeholder=UNKNOWN_PLACEHOLDER)


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO 8601 timestamp, treating naive values as UTC."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def human_duration(delta: timedelta) -> str:
    """Format a duration the way kubectl prints ages (``45s``, ``3m20s``, ``5d``)."""
    seconds = int(delta.total_seconds())
    if seconds < -1:
        return "<invalid>"
    if seconds < 0:
        return "0s"
    if seconds < 60 * 2:
        return f"{seconds}s"

    minutes = seconds // 60
    if minutes < 10:
        s = seconds % 60
        return f"{minutes}m" if s == 0 else f"{minutes}m{s}s"
    if minutes < 60 * 3:
        return f"{minutes}m"

    hours = minutes // 60
    if hours < 8:
        m = minutes % 60
        return f"{hours}h" if m == 0 else f"{hours}h{m}m"
    if hours < 48:
        return f"{hours}h"
    if hours < 24 * 8:
        h = hours % 24
        return f"{hours // 24}d" if h == 0 else f"{hours // 24}d{h}h"
    if hours < 24 * 365 * 2:
        return f"{hours // 24}d"
    if hours < 24 * 365 * 8:
        days = (hours // 24) % 365
        years = hours // 24 // 365
        return f"{years}y" if days == 0 else f"{years}y{days}d"
    return f"{hours // 24 // 365}y"


def to_age(
    timestamp: str | None,
    *,
    now: datetime | None = None,
    placeholder: str = NONE_PLACEHOLDER,
) -> str:
    """Time elapsed since ``timestamp``, or ``placeholder`` when it is absent."""
    parsed = parse_timestamp(timestamp)
    if parsed is None:
        return placeholder
    return human_duration((now or datetime.now(UTC)) - parsed)


def _safe_get(obj: Any, *attrs: str, default: Any = None) -> Any:
    """Safely traverse nested attributes on kubernetes SDK objects."""
    current = obj
    for attr in attrs:
        if current is None:
            return default
        current = getattr(current, attr, None)
    return current if current is not None else default


def _get_timestamp(obj: Any) -> str | None:
    """Extract ISO timestamp string from a datetime or string."""
    if obj is None:
        return None
    if isinstance(obj, str):
        return obj
    if isinstance(obj, datetime):
        return obj.isoformat()
    return str(obj)


def _get_labels(obj: Any) -> dict[str, str] | None:
    labels = _safe_get(obj, "metadata", "labels")
    return dict(labels) if labels else None


def _get_annotations(obj: Any) -> dict[str, str] | None:
    annotations = _safe_get(obj, "metadata", "annotations")
    return dict(annotations) if annotations else None


def _common_fields(obj: Any) -> dict[str, Any]:
    """Metadata fields shared by every display model."""
    return {
        "name": _safe_get(obj, "metadata", "name", default=""),
        "namespace": _safe_get(obj, "metadata", "namespace"),
        "uid": _safe_get(obj, "metadata", "uid"),
        "creation_timestamp": _get_timestamp(_safe_get(obj, "metadata", "creation_timestamp")),
        "labels": _get_labels(obj),
        "annotations": _get_annotations(obj),
    }
