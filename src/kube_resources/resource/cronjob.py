"""CronJob resource adapter."""

from __future__ import annotations

from typing import ClassVar

from kube_resources.integrations.kubernetes.models.base import to_age
from kube_resources.integrations.kubernetes.models.jobs import CronJobSummary
from kube_resources.resource.access import Access
from kube_resources.resource.base import Row, RunnableResource, bool_to_str
from kube_resources.resource.registry import register
from kube_resources.services.kubernetes.job_caller import CronJobCaller


@register
class CronJob(RunnableResource):
    """Tracks a cronjob; running one starts a job from its template."""

    kind: ClassVar[str] = "cronjob"
    aliases: ClassVar[tuple[str, ...]] = ("cronjobs", "cj")
    api_version: ClassVar[str] = "batch/v1"
    api_kind: ClassVar[str] = "CronJob"
    sdk_type: ClassVar[str] = "V1CronJob"
    access: ClassVar[Access] = Access.ALL_VERBS | Access.DESCRIBE | Access.RUN
    columns: ClassVar[tuple[str, ...]] = (
        "NAME",
        "SCHEDULE",
        "SUSPEND",
        "ACTIVE",
        "LAST_SCHEDULE",
        "AGE",
    )
    model = CronJobSummary
    caller_type = CronJobCaller

    def _row(self, instance: CronJobSummary) -> Row:
        return [
            instance.name,
            instance.schedule,
            bool_to_str(instance.suspend),
            str(instance.active_count),
            to_age(instance.last_schedule_time),
            instance.age,
        ]
