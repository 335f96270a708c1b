from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

#: A node is identified by a single uppercase letter ("A".."Z").
NodeID = str

#: Represents numeric cost of an edge or a route.
Cost = Union[int, float]

#: An ordered walk through the graph, as a sequence of node IDs.
Route = Sequence[NodeID]


@dataclass(frozen=True)
class RouteCost:
    """
    Outcome of evaluating the cost of a literal route.

    A route either has a total cost, or it does not exist in the graph
    (some consecutive pair lacks a direct edge). The latter is represented
    by ``cost=None`` and is available as the ``NO_SUCH_ROUTE`` constant.

    Attributes:
        cost: Sum of edge costs along the route, or None if the route does not exist.
    """

    cost: Optional[Cost] = None

    @property
    def found(self) -> bool:
        return self.cost is not None

    def __str__(self) -> str:
        return str(self.cost) if self.found else "No Such Route"


#: The "no such route" outcome of route cost evaluation.
NO_SUCH_ROUTE = RouteCost()


@dataclass(frozen=True)
class CheapestRoute:
    """
    Result of a cheapest-route query.

    Attributes:
        cost: Cost of the cheapest route (``math.inf`` if the end is unreachable).
        route: Nodes from start to end, or None if the end is unreachable.
    """

    cost: Cost
    route: Optional[List[NodeID]]
