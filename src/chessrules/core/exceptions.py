"""Exceptions raised by the rules layer."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessrules.core.enums import RejectReason
    from chessrules.core.move import Move


class MoveRejected(ValueError):
    """A move request that the current position does not allow."""

    def __init__(self, move: Move, reason: RejectReason) -> None:
        super().__init__(f"Illegal move {move}: {reason.value}")
        self.move = move
        self.reason = reason
