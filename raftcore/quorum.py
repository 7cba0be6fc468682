"""Shared quorum types: vote outcomes and acknowledged log positions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

U64_MAX = (1 << 64) - 1
"""The largest log index; stands for "no limit" in commit computations."""


class VoteResult(Enum):
    """The outcome of a vote."""

    PENDING = "VotePending"
    """Neither "yes" nor "no" has reached quorum yet."""

    LOST = "VoteLost"
    """The quorum has voted "no"."""

    WON = "VoteWon"
    """The quorum has voted "yes"."""

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Index:
    """A raft log position acknowledged by a voter, with its commit group."""

    index: int = 0
    group_id: int = 0

    def __str__(self) -> str:
        shown = "∞" if self.index == U64_MAX else str(self.index)
        if self.group_id == 0:
            return shown
        return f"[{self.group_id}]{shown}"