"""Unit tests for Kubernetes base models and utilities."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from kube_resources.integrations.kubernetes.models.base import (
    NONE_PLACEHOLDER,
    UNKNOWN_PLACEHOLDER,
    K8sEntityBase,
    _common_fields,
    _get_annotations,
    _get_labels,
    _get_timestamp,
    _safe_get,
    human_duration,
    parse_timestamp,
    to_age,
)
from kube_resources.integrations.kubernetes.models.cluster import NamespaceSummary
from kube_resources.integrations.kubernetes.models.jobs import CronJobSummary, JobSummary
from kube_resources.integrations.kubernetes.models.workloads import (
    ContainerStatus,
    DeploymentSummary,
    PodSummary,
)

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=UTC)


@pytest.mark.unit
@pytest.mark.kubernetes
class TestSafeGet:
    """Test _safe_get utility function."""

    def test_safe_get_nested_attrs(self) -> None:
        obj = MagicMock()
        obj.metadata.name = "nightly"
        assert _safe_get(obj, "metadata", "name") == "nightly"

    def test_safe_get_missing_attr(self) -> None:
        obj = SimpleNamespace(name="nightly")
        assert _safe_get(obj, "missing", default="fallback") == "fallback"

    def test_safe_get_none_intermediate(self) -> None:
        obj = SimpleNamespace(metadata=None)
        assert _safe_get(obj, "metadata", "name", default="unknown") == "unknown"

    def test_safe_get_none_object(self) -> None:
        assert _safe_get(None, "name", default="default") == "default"

    def test_safe_get_keeps_falsy_values(self) -> None:
        """Only None falls back to the default."""
        obj = SimpleNamespace(spec=SimpleNamespace(suspend=False, replicas=0))
        assert _safe_get(obj, "spec", "suspend", default=True) is False
        assert _safe_get(obj, "spec", "replicas", default=5) == 0


@pytest.mark.unit
@pytest.mark.kubernetes
class TestGetTimestamp:
    """Test _get_timestamp utility function."""

    def test_none(self) -> None:
        assert _get_timestamp(None) is None

    def test_string_passthrough(self) -> None:
        assert _get_timestamp("2024-01-15T10:30:00Z") == "2024-01-15T10:30:00Z"

    def test_datetime(self) -> None:
        dt = datetime(2024, 1, 15, 10, 30, tzinfo=UTC)
        assert _get_timestamp(dt) == "2024-01-15T10:30:00+00:00"


@pytest.mark.unit
@pytest.mark.kubernetes
class TestMetadataHelpers:
    """Test label, annotation and common field extraction."""

    def test_labels_and_annotations(self) -> None:
        obj = SimpleNamespace(
            metadata=SimpleNamespace(labels={"app": "etl"}, annotations={"note": "x"})
        )
        assert _get_labels(obj) == {"app": "etl"}
        assert _get_annotations(obj) == {"note": "x"}

    def test_empty_labels_are_none(self) -> None:
        obj = SimpleNamespace(metadata=SimpleNamespace(labels={}, annotations=None))
        assert _get_labels(obj) is None
        assert _get_annotations(obj) is None

    def test_common_fields(self) -> None:
        created = datetime(2024, 1, 15, 10, 30, tzinfo=UTC)
        obj = SimpleNamespace(
            metadata=SimpleNamespace(
                name="nightly",
                namespace="batch",
                uid="abc-123",
                creation_timestamp=created,
                labels=None,
                annotations=None,
            )
        )
        fields = _common_fields(obj)
        assert fields["name"] == "nightly"
        assert fields["namespace"] == "batch"
        assert fields["uid"] == "abc-123"
        assert fields["creation_timestamp"] == "2024-01-15T10:30:00+00:00"

    def test_common_fields_without_metadata(self) -> None:
        fields = _common_fields(SimpleNamespace(metadata=None))
        assert fields["name"] == ""
        assert fields["namespace"] is None


@pytest.mark.unit
@pytest.mark.kubernetes
class TestParseTimestamp:
    """Test parse_timestamp."""

    def test_zulu_suffix(self) -> None:
        assert parse_timestamp("2024-06-01T12:00:00Z") == NOW

    def test_naive_is_utc(self) -> None:
        assert parse_timestamp("2024-06-01T12:00:00") == NOW

    @pytest.mark.parametrize("value", [None, "", "yesterday"])
    def test_unparseable(self, value: str | None) -> None:
        assert parse_timestamp(value) is None


@pytest.mark.unit
@pytest.mark.kubernetes
class TestHumanDuration:
    """Test kubectl style duration formatting."""

    @pytest.mark.parametrize(
        ("delta", "expected"),
        [
            (timedelta(seconds=0), "0s"),
            (timedelta(seconds=-1), "0s"),
            (timedelta(seconds=-5), "<invalid>"),
            (timedelta(seconds=45), "45s"),
            (timedelta(seconds=119), "119s"),
            (timedelta(minutes=3), "3m"),
            (timedelta(minutes=3, seconds=20), "3m20s"),
            (timedelta(minutes=42), "42m"),
            (timedelta(hours=3, minutes=5), "3h5m"),
            (timedelta(hours=5), "5h"),
            (timedelta(hours=30), "30h"),
            (timedelta(days=3), "3d"),
            (timedelta(days=3, hours=4), "3d4h"),
            (timedelta(days=90), "90d"),
            (timedelta(days=365 * 3), "3y"),
            (timedelta(days=365 * 3 + 10), "3y10d"),
            (timedelta(days=365 * 9), "9y"),
        ],
    )
    def test_formats(self, delta: timedelta, expected: str) -> None:
        assert human_duration(delta) == expected


@pytest.mark.unit
@pytest.mark.kubernetes
class TestToAge:
    """Test to_age."""

    def test_elapsed(self) -> None:
        assert to_age("2024-06-01T11:15:00Z", now=NOW) == "45m"

    def test_missing_uses_none_placeholder(self) -> None:
        assert to_age(None, now=NOW) == NONE_PLACEHOLDER

    def test_custom_placeholder(self) -> None:
        assert to_age(None, now=NOW, placeholder="-") == "-"

    def test_defaults_to_current_time(self) -> None:
        recent = (datetime.now(UTC) - timedelta(days=3)).isoformat()
        assert to_age(recent) == "3d"


@pytest.mark.unit
@pytest.mark.kubernetes
class TestK8sEntityBase:
    """Test K8sEntityBase model."""

    def test_minimal(self) -> None:
        entity = K8sEntityBase(name="nightly")
        assert entity.namespace is None
        assert entity.labels is None

    def test_strips_whitespace(self) -> None:
        assert K8sEntityBase(name="  nightly  ").name == "nightly"

    def test_ignores_extra_fields(self) -> None:
        entity = K8sEntityBase(name="nightly", unexpected="value")  # type: ignore[call-arg]
        assert not hasattr(entity, "unexpected")

    def test_age_without_timestamp(self) -> None:
        assert K8sEntityBase(name="nightly").age == UNKNOWN_PLACEHOLDER

    def test_age(self) -> None:
        created = (datetime.now(UTC) - timedelta(hours=5)).isoformat()
        assert K8sEntityBase(name="nightly", creation_timestamp=created).age == "5h"

    def test_from_k8s_object_left_to_display_models(self) -> None:
        with pytest.raises(NotImplementedError, match="K8sEntityBase"):
            K8sEntityBase.from_k8s_object(MagicMock())

    @pytest.mark.parametrize(
        "model",
        [
            CronJobSummary,
            JobSummary,
            PodSummary,
            ContainerStatus,
            DeploymentSummary,
            NamespaceSummary,
        ],
    )
    def test_display_models_load_kubernetes_objects(self, model: type[K8sEntityBase]) -> None:
        assert "from_k8s_object" in vars(model)
