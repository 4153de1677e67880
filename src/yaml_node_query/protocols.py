"""IndexPolicy Protocol for the path normalizer's numeric-segment extension point.

A numeric path segment is ambiguous: ``items.0`` means "first item" while
``responses.404`` means "the key named 404". An index policy decides which
reading applies. Any class with a conformant ``is_index`` method passes
``isinstance`` checks, no inheritance required.

Example::

    from yaml_node_query.protocols import IndexPolicy

    class AlwaysIndex:
        def is_index(self, value: int) -> bool:
            return True

    assert isinstance(AlwaysIndex(), IndexPolicy)  # True, structural conformance
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IndexPolicy(Protocol):
    """Structural protocol for numeric-segment disambiguation.

    ``is_index`` receives the integer value of a numeric path segment and
    returns True when the segment is an array index to be folded into the
    previous segment, or False when it is a literal map key.
    """

    def is_index(self, value: int) -> bool: ...
