"""Uniform resource adapters for browsing Kubernetes objects."""

from kube_resources.__version__ import __version__

__all__ = ["__version__"]
