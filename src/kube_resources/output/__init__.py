"""Terminal output for resource tables.

Usage:
    from kube_resources.output import render_table

    render_table(new_list("pods", client).table(), title="Pods")
"""

from kube_resources.output.table import Table, build_table, render_properties, render_table

__all__ = ["Table", "build_table", "render_properties", "render_table"]
