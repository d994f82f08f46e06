"""Kubernetes connection configuration models."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

ENV_PREFIX = "KRES_K8S_"


class ClusterConfig(BaseModel):
    """Connection settings for one named cluster."""

    model_config = ConfigDict(extra="forbid")

    context: str = ""
    kubeconfig: str = "~/.kube/config"
    namespace: str = "default"

    @field_validator("kubeconfig")
    @classmethod
    def validate_kubeconfig(cls, v: str) -> str:
        """Expand ~ in kubeconfig path."""
        return str(Path(v).expanduser())

    @field_validator("namespace")
    @classmethod
    def validate_namespace(cls, v: str) -> str:
        """Reject an empty default namespace."""
        if not v.strip():
            raise ValueError("namespace must not be empty")
        return v.strip()


class KubernetesConfig(BaseModel):
    """Cluster selection for the resource browser."""

    model_config = ConfigDict(extra="forbid")

    clusters: dict[str, ClusterConfig] = {}
    active_cluster: str | None = None

    @classmethod
    def from_env(cls, base_config: dict[str, Any] | None = None) -> KubernetesConfig:
        """Create configuration with environment variable overrides.

        Supported environment variables:
            KRES_K8S_CONTEXT: Active cluster name or raw kubeconfig context
            KRES_K8S_KUBECONFIG: Kubeconfig path applied to every cluster
            KRES_K8S_NAMESPACE: Default namespace applied to every cluster
        """
        config_dict = base_config.copy() if base_config else {}
        config_dict.setdefault("clusters", {})

        if context := os.environ.get(f"{ENV_PREFIX}CONTEXT"):
            config_dict["active_cluster"] = context

        instance = cls.model_validate(config_dict)

        if kubeconfig := os.environ.get(f"{ENV_PREFIX}KUBECONFIG"):
            for cluster_cfg in instance.clusters.values():
                cluster_cfg.kubeconfig = str(Path(kubeconfig).expanduser())
        if namespace := os.environ.get(f"{ENV_PREFIX}NAMESPACE"):
            if not instance.clusters:
                instance.clusters["default"] = ClusterConfig()
            for cluster_cfg in instance.clusters.values():
                cluster_cfg.namespace = namespace

        return instance

    @property
    def active(self) -> ClusterConfig | None:
        """The selected cluster, or the first configured one."""
        if self.active_cluster and self.active_cluster in self.clusters:
            return self.clusters[self.active_cluster]
        if self.clusters and not self.active_cluster:
            return next(iter(self.clusters.values()))
        return None

    def get_active_context(self) -> str | None:
        """Get the kubeconfig context to load.

        An ``active_cluster`` that names no configured cluster is treated as
        a raw kubeconfig context name.
        """
        if cluster := self.active:
            return cluster.context or None
        return self.active_cluster

    def get_active_kubeconfig(self) -> str | None:
        """Get the kubeconfig path of the active cluster, if any."""
        cluster = self.active
        return cluster.kubeconfig if cluster else None

    def get_active_namespace(self) -> str:
        """Get the default namespace for the active cluster."""
        cluster = self.active
        return cluster.namespace if cluster else "default"
