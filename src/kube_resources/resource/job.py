"""Job resource adapter."""

from __future__ import annotations

from typing import ClassVar

from kube_resources.integrations.kubernetes.models.base import (
    NONE_PLACEHOLDER,
    human_duration,
    parse_timestamp,
    to_age,
)
from kube_resources.integrations.kubernetes.models.jobs import JobSummary
from kube_resources.resource.access import Access
from kube_resources.resource.base import Resource, Row
from kube_resources.resource.registry import register
from kube_resources.services.kubernetes.job_caller import JobCaller


def completions(job: JobSummary) -> str:
    """``succeeded/desired`` the way kubectl reports it."""
    if job.completions is not None:
        return f"{job.succeeded}/{job.completions}"
    if job.parallelism and job.parallelism > 1:
        return f"{job.succeeded}/1 of {job.parallelism}"
    return f"{job.succeeded}/1"


def duration(job: JobSummary) -> str:
    """Run time of a finished job, or time since start of a running one."""
    started = parse_timestamp(job.start_time)
    if started is None:
        return NONE_PLACEHOLDER
    finished = parse_timestamp(job.completion_time)
    if finished is None:
        return to_age(job.start_time)
    return human_duration(finished - started)


@register
class Job(Resource):
    """Tracks a job."""

    kind: ClassVar[str] = "job"
    aliases: ClassVar[tuple[str, ...]] = ("jobs",)
    api_version: ClassVar[str] = "batch/v1"
    api_kind: ClassVar[str] = "Job"
    sdk_type: ClassVar[str] = "V1Job"
    access: ClassVar[Access] = Access.ALL_VERBS | Access.DESCRIBE
    columns: ClassVar[tuple[str, ...]] = ("NAME", "COMPLETIONS", "DURATION", "AGE")
    model = JobSummary
    caller_type = JobCaller

    def _row(self, instance: JobSummary) -> Row:
        return [instance.name, completions(instance), duration(instance), instance.age]
