"""Configuration classes for routegraph components."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class RouteSearchConfig:
    """Defaults for route searches and input formats."""

    # Upper bound on routes recorded by one enumeration; None keeps it unbounded
    max_routes: Optional[int] = None

    # A node is one uppercase letter
    node_pattern: str = r"[A-Z]"

    # Two nodes followed by a positive integer cost without a leading zero
    edge_pattern: str = r"[A-Z]{2}[1-9][0-9]*"

    def resolve_max_routes(self, max_routes: Optional[int]) -> Optional[int]:
        """Return the per-call cap if given, else the configured default."""
        return self.max_routes if max_routes is None else max_routes


# Global configuration instance
SEARCH_CONFIG = RouteSearchConfig()
