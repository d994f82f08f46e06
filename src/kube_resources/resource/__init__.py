"""Resource adapters: one uniform contract over every browsable kind.

Importing this package registers the built-in kinds.

Example:
    >>> from kube_resources.resource import ALL_NAMESPACES, new_list
    >>> cronjobs = new_list("cj", client, ALL_NAMESPACES)
    >>> table = cronjobs.table()
"""

from kube_resources.resource.access import Access
from kube_resources.resource.base import (
    ALL_NAMESPACES,
    Properties,
    Resource,
    Row,
    RunnableResource,
    bool_to_str,
    namespaced,
    namespaced_name,
)
from kube_resources.resource.cronjob import CronJob
from kube_resources.resource.deployment import Deployment
from kube_resources.resource.job import Job
from kube_resources.resource.list import ResourceList, TableData
from kube_resources.resource.namespace import Namespace
from kube_resources.resource.pod import Pod
from kube_resources.resource.registry import (
    get_resource_class,
    new_list,
    register,
    registered_kinds,
)

__all__ = [
    "ALL_NAMESPACES",
    "Access",
    "CronJob",
    "Deployment",
    "Job",
    "Namespace",
    "Pod",
    "Properties",
    "Resource",
    "ResourceList",
    "Row",
    "RunnableResource",
    "TableData",
    "bool_to_str",
    "get_resource_class",
    "namespaced",
    "namespaced_name",
    "new_list",
    "register",
    "registered_kinds",
]
