"""Debug logger port.

Any object with a ``debug`` method, including :class:`logging.Logger`,
satisfies this protocol.
"""

from typing import Any, Protocol


class DebugLogger(Protocol):
    """Protocol for the sink that receives executed command lines."""

    def debug(self, msg: str, *args: Any) -> None:
        """Record a debug-level message."""
        ...
