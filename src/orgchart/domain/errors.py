from __future__ import annotations

"""
Domain Error Types.

The org chart model is a closed set of two variants. Python cannot enforce
that statically, so every consumer raises the error below when it meets a
value outside that set.
"""

from typing import Any


class UnsupportedNodeError(TypeError):
    """
    Raised when a value that is neither a Person nor an OrganizationalUnit
    reaches a consumer of the org chart model.

    Attributes:
        value: The offending object.
    """

    def __init__(self, value: Any, context: str = "") -> None:
        self.value = value
        where = f" in {context}" if context else ""
        super().__init__(
            f"Unsupported org chart node{where}: {type(value).__name__!r} "
            f"(expected Person or OrganizationalUnit)"
        )
