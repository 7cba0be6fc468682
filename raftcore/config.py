"""Parameters for starting a raft peer, and their validation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import ConfigInvalid

NO_LIMIT = (1 << 64) - 1
"""A size limit that never applies."""

INVALID_ID = 0
"""A node id that no raft peer may use."""

_HEARTBEAT_TICK = 2


class ReadOnlyOption(Enum):
    """How read-only requests are served."""

    SAFE = "safe"
    """Guarantee linearizability by talking to a quorum."""

    LEASE_BASED = "lease_based"
    """Rely on the leader lease; requires check_quorum."""


@dataclass
class Config:
    """The parameters to start a raft peer."""

    id: int = 0
    election_tick: int = _HEARTBEAT_TICK * 10
    heartbeat_tick: int = _HEARTBEAT_TICK
    applied: int = 0
    max_size_per_msg: int = 0
    max_inflight_msgs: int = 256
    check_quorum: bool = False
    pre_vote: bool = False
    min_election_tick: int = 0
    max_election_tick: int = 0
    read_only_option: ReadOnlyOption = ReadOnlyOption.SAFE
    skip_bcast_commit: bool = False
    batch_append: bool = False
    priority: int = 0
    max_uncommitted_size: int = NO_LIMIT

    def effective_min_election_tick(self) -> int:
        """The minimum number of ticks before an election."""
        return self.election_tick if self.min_election_tick == 0 else self.min_election_tick

    def effective_max_election_tick(self) -> int:
        """The maximum number of ticks before an election."""
        return 2 * self.election_tick if self.max_election_tick == 0 else self.max_election_tick

    def validate(self) -> None:
        """Check the configuration, raising ConfigInvalid on the first problem."""
        if self.id == INVALID_ID:
            raise ConfigInvalid("invalid node id")

        if self.heartbeat_tick == 0:
            raise ConfigInvalid("heartbeat tick must greater than 0")

        if self.election_tick <= self.heartbeat_tick:
            raise ConfigInvalid("election tick must be greater than heartbeat tick")

        min_timeout = self.effective_min_election_tick()
        max_timeout = self.effective_max_election_tick()
        if min_timeout < self.election_tick:
            raise ConfigInvalid(
                f"min election tick {min_timeout} must not be less than "
                f"election_tick {self.election_tick}"
            )

        if min_timeout >= max_timeout:
            raise ConfigInvalid(
                f"min election tick {min_timeout} should be less than "
                f"max election tick {max_timeout}"
            )

        if self.max_inflight_msgs == 0:
            raise ConfigInvalid("max inflight messages must be greater than 0")

        if self.read_only_option is ReadOnlyOption.LEASE_BASED and not self.check_quorum:
            raise ConfigInvalid("read_only_option == LeaseBased requires check_quorum == true")

        if self.max_uncommitted_size < self.max_size_per_msg:
            raise ConfigInvalid("max uncommitted size should greater than max_size_per_msg")