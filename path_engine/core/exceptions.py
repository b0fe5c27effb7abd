"""
Exceptions raised by the shortest-path engine.
"""


class ShortestPathError(Exception):
    """Base class for all shortest-path engine errors."""


class UnknownNodeError(ShortestPathError, LookupError):
    """A node was queried that does not exist in the graph."""

    def __init__(self, node, message=None):
        self.node = node
        super().__init__(message or f"Node '{node}' is not in the graph")


class UnknownStartNodeError(UnknownNodeError):
    """The start node of a shortest-path computation is not in the graph."""

    def __init__(self, node):
        super().__init__(node, f"Start node '{node}' is not in the graph")


class InvalidGraphError(ShortestPathError, ValueError):
    """The graph (or the data it is built from) is malformed."""


class NegativeCycleError(ShortestPathError, ValueError):
    """A negative-weight cycle is reachable from the start node."""

    def __init__(self, source, target, weight):
        self.source = source
        self.target = target
        self.weight = weight
        super().__init__(
            f"Graph contains a negative-weight cycle: edge '{source}' -> '{target}' "
            f"with weight {weight} can still be relaxed"
        )
