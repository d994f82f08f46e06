"""Factories for kubernetes SDK objects used across unit tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest
from kubernetes.client import (
    ApiClient,
    V1Container,
    V1ContainerState,
    V1ContainerStateRunning,
    V1ContainerStateWaiting,
    V1ContainerStatus,
    V1CronJob,
    V1CronJobSpec,
    V1CronJobStatus,
    V1Deployment,
    V1DeploymentSpec,
    V1DeploymentStatus,
    V1Job,
    V1JobSpec,
    V1JobStatus,
    V1JobTemplateSpec,
    V1LabelSelector,
    V1Namespace,
    V1NamespaceStatus,
    V1ObjectMeta,
    V1ObjectReference,
    V1Pod,
    V1PodSpec,
    V1PodStatus,
    V1PodTemplateSpec,
)


def _pod_template(app: str) -> V1PodTemplateSpec:
    return V1PodTemplateSpec(
        metadata=V1ObjectMeta(labels={"app": app}),
        spec=V1PodSpec(
            containers=[V1Container(name="main", image="busybox:1.36")],
            restart_policy="Never",
        ),
    )


@pytest.fixture
def created_at() -> datetime:
    """Creation time three days ago, rendered as age ``3d``."""
    return datetime.now(UTC) - timedelta(days=3)


@pytest.fixture
def as_manifest() -> Callable[[Any], dict[str, Any]]:
    """Convert an SDK object to its API mapping form."""
    client = ApiClient()

    def _convert(obj: Any) -> dict[str, Any]:
        manifest: dict[str, Any] = client.sanitize_for_serialization(obj)
        return manifest

    return _convert


@pytest.fixture
def make_cronjob(created_at: datetime) -> Callable[..., V1CronJob]:
    def _make(
        name: str = "nightly",
        namespace: str = "batch",
        schedule: str = "* * * * *",
        suspend: bool | None = True,
        active: int = 0,
        last_schedule: datetime | None = None,
    ) -> V1CronJob:
        return V1CronJob(
            metadata=V1ObjectMeta(
                name=name,
                namespace=namespace,
                uid=f"{name}-uid",
                creation_timestamp=created_at,
            ),
            spec=V1CronJobSpec(
                schedule=schedule,
                suspend=suspend,
                job_template=V1JobTemplateSpec(
                    metadata=V1ObjectMeta(labels={"app": name}),
                    spec=V1JobSpec(template=_pod_template(name)),
                ),
            ),
            status=V1CronJobStatus(
                active=[V1ObjectReference(name=f"{name}-{i}") for i in range(active)] or None,
                last_schedule_time=last_schedule,
            ),
        )

    return _make


@pytest.fixture
def make_job(created_at: datetime) -> Callable[..., V1Job]:
    def _make(
        name: str = "etl",
        namespace: str = "batch",
        completions: int | None = 1,
        parallelism: int | None = None,
        succeeded: int | None = None,
        start_time: datetime | None = None,
        completion_time: datetime | None = None,
    ) -> V1Job:
        return V1Job(
            metadata=V1ObjectMeta(
                name=name, namespace=namespace, uid=f"{name}-uid", creation_timestamp=created_at
            ),
            spec=V1JobSpec(
                completions=completions,
                parallelism=parallelism,
                template=_pod_template(name),
            ),
            status=V1JobStatus(
                succeeded=succeeded,
                start_time=start_time,
                completion_time=completion_time,
            ),
        )

    return _make


@pytest.fixture
def make_pod(created_at: datetime) -> Callable[..., V1Pod]:
    def _make(
        name: str = "web-0",
        namespace: str = "prod",
        phase: str = "Running",
        ready: bool = True,
        restarts: int = 2,
        waiting_reason: str | None = None,
        pod_ip: str | None = "10.0.0.7",
        node_name: str | None = "node-a",
        qos_class: str | None = "Burstable",
    ) -> V1Pod:
        if waiting_reason:
            state = V1ContainerState(waiting=V1ContainerStateWaiting(reason=waiting_reason))
        else:
            state = V1ContainerState(running=V1ContainerStateRunning(started_at=created_at))
        return V1Pod(
            metadata=V1ObjectMeta(
                name=name, namespace=namespace, uid=f"{name}-uid", creation_timestamp=created_at
            ),
            spec=V1PodSpec(
                containers=[
                    V1Container(name="web", image="nginx:1.25"),
                    V1Container(name="sidecar", image="envoy:1.29"),
                ],
                node_name=node_name,
            ),
            status=V1PodStatus(
                phase=phase,
                pod_ip=pod_ip,
                qos_class=qos_class,
                container_statuses=[
                    V1ContainerStatus(
                        name="web",
                        image="nginx:1.25",
                        image_id="docker://nginx",
                        ready=ready,
                        restart_count=restarts,
                        state=state,
                    ),
                ],
            ),
        )

    return _make


@pytest.fixture
def make_deployment(created_at: datetime) -> Callable[..., V1Deployment]:
    def _make(
        name: str = "api",
        namespace: str = "prod",
        replicas: int = 3,
        current: int | None = 3,
        updated: int | None = 2,
        available: int | None = 1,
    ) -> V1Deployment:
        return V1Deployment(
            metadata=V1ObjectMeta(
                name=name, namespace=namespace, uid=f"{name}-uid", creation_timestamp=created_at
            ),
            spec=V1DeploymentSpec(
                replicas=replicas,
                selector=V1LabelSelector(match_labels={"app": name}),
                template=_pod_template(name),
            ),
            status=V1DeploymentStatus(
                replicas=current,
                updated_replicas=updated,
                available_replicas=available,
            ),
        )

    return _make


@pytest.fixture
def make_namespace(created_at: datetime) -> Callable[..., V1Namespace]:
    def _make(name: str = "batch", phase: str = "Active") -> V1Namespace:
        return V1Namespace(
            metadata=V1ObjectMeta(name=name, uid=f"{name}-uid", creation_timestamp=created_at),
            status=V1NamespaceStatus(phase=phase),
        )

    return _make
