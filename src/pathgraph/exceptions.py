"""Exception hierarchy for pathgraph."""


class PathGraphError(Exception):
    """Base exception for all pathgraph errors."""

    pass


class GraphError(PathGraphError):
    """Precondition violations on the graph model."""

    pass


class NodeNotFoundError(GraphError):
    """A node referenced by id does not exist in the graph."""

    def __init__(self, node_id: str) -> None:
        self.node_id = node_id
        super().__init__(f"Node {node_id} is not found.")


class EdgeNotFoundError(GraphError):
    """An edge referenced by its endpoint ids does not exist in the graph."""

    def __init__(self, node_id1: str, node_id2: str) -> None:
        self.node_id1 = node_id1
        self.node_id2 = node_id2
        super().__init__(f"Edge {node_id1}-{node_id2} is not found.")


class IsolatedNodeError(GraphError):
    """A walk reached a node that has no edges to leave by."""

    def __init__(self, node_id: str) -> None:
        self.node_id = node_id
        super().__init__(f"Node {node_id} has no edges.")


class InvalidArgumentError(GraphError):
    """A polar argument was requested for a degenerate node pair."""

    def __init__(self, node_id: str) -> None:
        self.node_id = node_id
        super().__init__(f"from and to should be different: {node_id}")


class DocumentError(PathGraphError):
    """Errors related to loading or saving documents."""

    pass


class DocumentLoadError(DocumentError):
    """Error loading a document file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load document '{path}': {reason}")


class DocumentSaveError(DocumentError):
    """Error saving a document file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save document '{path}': {reason}")


class EntityFormatError(DocumentError):
    """Serialized entity is missing fields or references unknown nodes."""

    def __init__(self, entity_id: str, details: str) -> None:
        self.entity_id = entity_id
        self.details = details
        super().__init__(f"Invalid path entity '{entity_id}': {details}")
