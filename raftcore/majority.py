"""Majority quorums over a single set of voters."""

from __future__ import annotations

from typing import Callable, Iterator, List, Mapping, Optional, Tuple

from .quorum import U64_MAX, Index, VoteResult


def _majority(total: int) -> int:
    return total // 2 + 1


class MajorityConfig(set):
    """A set of voter ids that uses majority quorums to make decisions."""

    def __str__(self) -> str:
        return "(" + " ".join(str(v) for v in sorted(self)) + ")"

    def ids(self) -> Iterator[int]:
        """Iterate over the voters."""
        return iter(self)

    def slice(self) -> List[int]:
        """The voters as a sorted list."""
        return sorted(self)

    def raw_slice(self) -> List[int]:
        """The voters as a list in no particular order."""
        return list(self)

    def committed_index(
        self, use_group_commit: bool, acked: Mapping[int, Index]
    ) -> Tuple[int, bool]:
        """The largest index acknowledged by a majority.

        The flag tells whether the index was computed by the group commit
        algorithm. An empty configuration commits everything.
        """
        if not self:
            return U64_MAX, True

        matched = sorted(
            (acked.get(v, Index()) for v in self),
            key=lambda i: i.index,
            reverse=True,
        )
        quorum_index = matched[_majority(len(matched)) - 1]
        if not use_group_commit:
            return quorum_index.index, False

        quorum_commit_index = quorum_index.index
        checked_group_id = quorum_index.group_id
        single_group = True
        for m in matched:
            if m.group_id == 0:
                single_group = False
                continue
            if checked_group_id == 0:
                checked_group_id = m.group_id
                continue
            if checked_group_id == m.group_id:
                continue
            return min(m.index, quorum_commit_index), True
        if single_group:
            return quorum_commit_index, False
        return matched[-1].index, False

    def vote_result(self, check: Callable[[int], Optional[bool]]) -> VoteResult:
        """Tally yes/no/missing votes; an empty configuration always wins."""
        if not self:
            return VoteResult.WON

        yes = missing = 0
        for v in self:
            vote = check(v)
            if vote is True:
                yes += 1
            elif vote is None:
                missing += 1
        q = _majority(len(self))
        if yes >= q:
            return VoteResult.WON
        if yes + missing >= q:
            return VoteResult.PENDING
        return VoteResult.LOST

    def describe(self, acked: Mapping[int, Index]) -> str:
        """A multi-line picture of each voter's acknowledged index."""
        n = len(self)
        if n == 0:
            return "<empty majority quorum>"

        def position(row):
            return (row[1].index if row[1] is not None else 0, row[0])

        info = sorted(([vid, acked.get(vid), 0] for vid in self), key=position)
        for i, (prev, cur) in enumerate(zip(info, info[1:]), start=1):
            if position(prev)[0] < position(cur)[0]:
                cur[2] = i
        info.sort(key=lambda row: row[0])

        lines = [" " * n + "    idx\n"]
        for vid, idx, bar in info:
            if idx is not None:
                lines.append("x" * bar + ">" + " " * (n - bar) + f" {str(idx):>5}    (id={vid})\n")
            else:
                lines.append("?" + " " * n + f" {str(Index()):>5}    (id={vid})\n")
        return "".join(lines)