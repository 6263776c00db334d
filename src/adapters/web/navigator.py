"""
Recording navigator adapter - Implements Navigator protocol.

The HTTP layer cannot move a browser mid-request, so navigation is
recorded and returned to the client as ``redirect_to``.
"""

import logging

logger = logging.getLogger(__name__)


class RecordingNavigator:
    """
    Implements Navigator protocol by remembering the requested target.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self) -> None:
        self.history: list[str] = []

    @property
    def target(self) -> str | None:
        """Most recent navigation target, or None if none was requested."""
        return self.history[-1] if self.history else None

    def navigate(self, target: str) -> None:
        logger.debug("Navigate to %s", target.split("?", 1)[0])
        self.history.append(target)
