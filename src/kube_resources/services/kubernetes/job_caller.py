"""Callers for Kubernetes jobs and cronjobs.

The cronjob caller is the one runnable caller: it can start a job from a
cronjob's template outside of its schedule.
"""

from __future__ import annotations

import builtins
import random
from typing import Any

from kube_resources.services.kubernetes.base import K8sBaseCaller

MANUAL_RUN_ANNOTATION = "cronjob.kubernetes.io/instantiate"
MAX_JOB_PREFIX = 42
_SUFFIX_ALPHABET = "bcdfghjklmnpqrstvwxz2456789"


def manual_job_name(cronjob_name: str) -> str:
    """Name for a manually triggered job, kept within the 63 char label limit."""
    suffix = "".join(random.choices(_SUFFIX_ALPHABET, k=3))
    return f"{cronjob_name[:MAX_JOB_PREFIX]}-manual-{suffix}"


class JobCaller(K8sBaseCaller):
    """Remote access for Jobs."""

    _entity_name = "job"
    _resource_type = "Job"

    def get(self, namespace: str, name: str) -> Any:
        self._log.debug("fetching_job", name=name, namespace=namespace)
        try:
            return self._client.batch_v1.read_namespaced_job(name=name, namespace=namespace)
        except Exception as e:
            self._handle_api_error(e, name, namespace)

    def list(self, namespace: str) -> builtins.list[Any]:
        self._log.debug("listing_jobs", namespace=namespace or "*")
        try:
            if namespace:
                result = self._client.batch_v1.list_namespaced_job(namespace=namespace)
            else:
                result = self._client.batch_v1.list_job_for_all_namespaces()
        except Exception as e:
            self._handle_api_error(e, None, namespace)
        self._log.debug("listed_jobs", count=len(result.items))
        return list(result.items)

    def delete(self, namespace: str, name: str) -> None:
        from kubernetes.client import V1DeleteOptions

        self._log.info("deleting_job", name=name, namespace=namespace)
        try:
            self._client.batch_v1.delete_namespaced_job(
                name=name,
                namespace=namespace,
                body=V1DeleteOptions(propagation_policy="Background"),
            )
        except Exception as e:
            self._handle_api_error(e, name, namespace)
        self._log.info("deleted_job", name=name, namespace=namespace)


class CronJobCaller(K8sBaseCaller):
    """Remote access for CronJobs, including on-demand runs."""

    _entity_name = "cronjob"
    _resource_type = "CronJob"

    def get(self, namespace: str, name: str) -> Any:
        self._log.debug("fetching_cronjob", name=name, namespace=namespace)
        try:
            return self._client.batch_v1.read_namespaced_cron_job(name=name, namespace=namespace)
        except Exception as e:
            self._handle_api_error(e, name, namespace)

    def list(self, namespace: str) -> builtins.list[Any]:
        self._log.debug("listing_cronjobs", namespace=namespace or "*")
        try:
            if namespace:
                result = self._client.batch_v1.list_namespaced_cron_job(namespace=namespace)
            else:
                result = self._client.batch_v1.list_cron_job_for_all_namespaces()
        except Exception as e:
            self._handle_api_error(e, None, namespace)
        self._log.debug("listed_cronjobs", count=len(result.items))
        return list(result.items)

    def delete(self, namespace: str, name: str) -> None:
        self._log.info("deleting_cronjob", name=name, namespace=namespace)
        try:
            self._client.batch_v1.delete_namespaced_cron_job(name=name, namespace=namespace)
        except Exception as e:
            self._handle_api_error(e, name, namespace)
        self._log.info("deleted_cronjob", name=name, namespace=namespace)

    def run(self, namespace: str, name: str) -> None:
        """Create a job from the cronjob's job template right now."""
        from kubernetes.client import V1Job, V1ObjectMeta, V1OwnerReference

        cronjob = self.get(namespace, name)
        template = cronjob.spec.job_template
        template_meta = template.metadata
        annotations = dict(template_meta.annotations or {}) if template_meta else {}
        annotations[MANUAL_RUN_ANNOTATION] = "manual"

        job = V1Job(
            api_version="batch/v1",
            kind="Job",
            metadata=V1ObjectMeta(
                name=manual_job_name(cronjob.metadata.name),
                namespace=namespace,
                labels=dict(template_meta.labels or {}) if template_meta else None,
                annotations=annotations,
                owner_references=[
                    V1OwnerReference(
                        api_version="batch/v1",
                        kind="CronJob",
                        name=cronjob.metadata.name,
                        uid=cronjob.metadata.uid,
                        controller=True,
                    )
                ],
            ),
            spec=template.spec,
        )

        self._log.info("running_cronjob", name=name, namespace=namespace, job=job.metadata.name)
        try:
            self._client.batch_v1.create_namespaced_job(namespace=namespace, body=job)
        except Exception as e:
            self._handle_api_error(e, name, namespace)
        self._log.info("ran_cronjob", name=name, namespace=namespace, job=job.metadata.name)
