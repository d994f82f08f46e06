"""Display models for batch workloads: jobs and cronjobs."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from kube_resources.integrations.kubernetes.models.base import (
    K8sEntityBase,
    _common_fields,
    _get_timestamp,
    _safe_get,
)


def _status_time(obj: Any, attr: str) -> str | None:
    return _get_timestamp(_safe_get(obj, "status", attr))


class JobSummary(K8sEntityBase):
    """Job display model. Succeeded pods count as zero while the job has no status."""

    completions: int | None = Field(default=None, description="Desired completions")
    parallelism: int | None = Field(default=None, description="Maximum parallel pods")
    succeeded: int = Field(default=0, description="Succeeded pod count")
    start_time: str | None = Field(default=None, description="When the job controller started")
    completion_time: str | None = Field(default=None, description="When the job finished")

    @classmethod
    def from_k8s_object(cls, obj: Any) -> JobSummary:
        """Create from a kubernetes V1Job object."""
        return cls(
            **_common_fields(obj),
            succeeded=_safe_get(obj, "status", "succeeded") or 0,
            completions=_safe_get(obj, "spec", "completions"),
            parallelism=_safe_get(obj, "spec", "parallelism"),
            start_time=_status_time(obj, "start_time"),
            completion_time=_status_time(obj, "completion_time"),
        )


class CronJobSummary(K8sEntityBase):
    """CronJob display model.

    ``status.active`` holds references to the running jobs; only their
    number is kept.
    """

    schedule: str = Field(default="", description="Cron schedule expression")
    suspend: bool = Field(default=False, description="Unset counts as not suspended")
    active_count: int = Field(default=0, description="Jobs currently running")
    last_schedule_time: str | None = Field(default=None, description="Last scheduled run")

    @classmethod
    def from_k8s_object(cls, obj: Any) -> CronJobSummary:
        """Create from a kubernetes V1CronJob object."""
        return cls(
            **_common_fields(obj),
            schedule=_safe_get(obj, "spec", "schedule", default=""),
            suspend=bool(_safe_get(obj, "spec", "suspend")),
            active_count=len(_safe_get(obj, "status", "active") or ()),
            last_schedule_time=_status_time(obj, "last_schedule_time"),
        )
