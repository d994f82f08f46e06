"""Version information for kube_resources."""

__version__ = "0.3.0"
