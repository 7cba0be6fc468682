"""Joint quorums made of two majority configurations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional, Set, Tuple

from .majority import MajorityConfig
from .quorum import Index, VoteResult


@dataclass
class JointConfig:
    """Two possibly overlapping majority configurations; decisions need both."""

    incoming: MajorityConfig = field(default_factory=MajorityConfig)
    outgoing: MajorityConfig = field(default_factory=MajorityConfig)

    def committed_index(
        self, use_group_commit: bool, acked: Mapping[int, Index]
    ) -> Tuple[int, bool]:
        """The largest index committed in both majorities.

        The flag is true only when both majorities used group commit.
        """
        i_idx, i_gc = self.incoming.committed_index(use_group_commit, acked)
        o_idx, o_gc = self.outgoing.committed_index(use_group_commit, acked)
        return min(i_idx, o_idx), i_gc and o_gc

    def vote_result(self, check: Callable[[int], Optional[bool]]) -> VoteResult:
        """Won if won in both majorities, lost if lost in either, else pending."""
        i = self.incoming.vote_result(check)
        o = self.outgoing.vote_result(check)
        if i is VoteResult.WON and o is VoteResult.WON:
            return VoteResult.WON
        if VoteResult.LOST in (i, o):
            return VoteResult.LOST
        return VoteResult.PENDING

    def clear(self) -> None:
        """Remove every voter from both majorities."""
        self.incoming.clear()
        self.outgoing.clear()

    def is_singleton(self) -> bool:
        """Whether there is exactly one voter and no outgoing majority."""
        return not self.outgoing and len(self.incoming) == 1

    def ids(self) -> Set[int]:
        """All voters of both majorities."""
        return set(self.incoming) | set(self.outgoing)

    def contains(self, voter_id: int) -> bool:
        """Whether ``voter_id`` votes in either majority."""
        return voter_id in self.incoming or voter_id in self.outgoing

    def describe(self, acked: Mapping[int, Index]) -> str:
        """A multi-line picture of the acknowledged indexes of all voters."""
        return MajorityConfig(self.ids()).describe(acked)