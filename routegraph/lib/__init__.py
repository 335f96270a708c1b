"""Graph model and route algorithms for routegraph."""

from routegraph.lib.graph import RouteGraph

__all__ = ["RouteGraph"]
