"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessrules.core.board import Board
from chessrules.core.ruleset import LEGACY, STANDARD


@pytest.fixture()
def board() -> Board:
    """Fresh standard-rules game from the starting position."""
    return Board(STANDARD)


@pytest.fixture()
def legacy_board() -> Board:
    """Fresh game played under the historical rule quirks."""
    return Board(LEGACY)
