"""TreeNode dataclass and NodeKind StrEnum for parsed YAML/JSON documents.

Provides the foundational data types produced by TreeBuilder and consumed by
the classifier, the key search functions and the query facade.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any


class NodeKind(StrEnum):
    """Enumeration of the kinds a document node can have.

    StrEnum values are the lowercased member names:
    - MAP       -> "map"      : mapping (JSON object)
    - SEQUENCE  -> "sequence" : sequence (JSON array)
    - STRING    -> "string"   : ``!!str`` scalar
    - INTEGER   -> "integer"  : ``!!int`` scalar
    - FLOAT     -> "float"    : ``!!float`` scalar
    - BOOLEAN   -> "boolean"  : ``!!bool`` scalar
    - NULL      -> "null"     : ``!!null`` scalar
    - OTHER     -> "other"    : any other scalar (timestamps, binary, custom tags)
    """

    MAP = auto()
    SEQUENCE = auto()
    STRING = auto()
    INTEGER = auto()
    FLOAT = auto()
    BOOLEAN = auto()
    NULL = auto()
    OTHER = auto()


@dataclass(slots=True)
class TreeNode:
    """A node in a parsed document tree.

    Nodes are read-only by convention once TreeBuilder returns them: nothing
    in this package mutates a tree after construction.

    Attributes:
        kind:      Which kind of node this is (see NodeKind).
        tag:       Resolved YAML tag in short form (``!!map``, ``!!str``, ...)
                   or a custom tag verbatim (``!include``).
        label:     Scalar text exactly as written in the source; empty string
                   for MAP and SEQUENCE nodes.
        value:     Typed Python value for scalar nodes; None for collections.
        children:  For MAP nodes, key and value nodes alternating in document
                   order. For SEQUENCE nodes, the items. Empty for scalars.
        line:      1-based source line of the node, 0 when unknown.
        column:    1-based source column of the node, 0 when unknown.
    """

    kind: NodeKind
    tag: str
    label: str = ""
    value: Any = None
    children: list[TreeNode] = field(default_factory=list)
    line: int = 0
    column: int = 0

    @property
    def is_scalar(self) -> bool:
        """True for every node that is neither a MAP nor a SEQUENCE."""
        return self.kind not in (NodeKind.MAP, NodeKind.SEQUENCE)
