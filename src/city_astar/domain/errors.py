# city_astar/domain/errors.py


class GraphError(Exception):
    """Base class for graph and search failures."""


class InvalidNodeError(GraphError, ValueError):
    "Node id is not an int, out of range, or names an empty slot."


class DuplicateNodeError(InvalidNodeError):
    "Slot is already populated."


class GraphClosedError(GraphError, RuntimeError):
    "Graph was torn down."


class ResourceExhaustedError(GraphError, MemoryError):
    "Storage for the graph or its nodes could not be allocated."


class EmptyQueueError(IndexError):
    "extract_min on an empty open set."


class StaleResultError(GraphError, RuntimeError):
    "Parent pointers were overwritten by a later search on the same graph."


class DuplicateEntryError(ValueError):
    "insert of an id that is already live in the open set."
