import pytest

from raftcore.config import NO_LIMIT, Config, ReadOnlyOption
from raftcore.errors import ConfigInvalid


def test_defaults():
    cfg = Config()
    assert cfg.id == 0
    assert cfg.heartbeat_tick == 2
    assert cfg.election_tick == cfg.heartbeat_tick * 10
    assert cfg.max_inflight_msgs == 256
    assert cfg.max_uncommitted_size == NO_LIMIT
    assert cfg.read_only_option is ReadOnlyOption.SAFE
    assert cfg.check_quorum is False


def test_new_with_id_keeps_defaults():
    cfg = Config(id=7)
    assert cfg.id == 7
    assert cfg.election_tick == Config().election_tick


def test_effective_ticks_default_to_election_tick():
    cfg = Config(id=1, election_tick=10)
    assert cfg.effective_min_election_tick() == cfg.election_tick
    assert cfg.effective_max_election_tick() == 2 * cfg.election_tick


def test_effective_ticks_use_explicit_values():
    cfg = Config(id=1, election_tick=10, min_election_tick=12, max_election_tick=30)
    assert cfg.effective_min_election_tick() == 12
    assert cfg.effective_max_election_tick() == 30


def test_valid_config_keeps_fields():
    cfg = Config(id=1, election_tick=10, heartbeat_tick=3)
    assert cfg.validate() is None
    assert cfg.election_tick == 10


def test_lease_based_with_check_quorum_is_valid():
    cfg = Config(id=1, read_only_option=ReadOnlyOption.LEASE_BASED, check_quorum=True)
    assert cfg.validate() is None
    assert cfg.read_only_option is ReadOnlyOption.LEASE_BASED


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"id": 0}, "invalid node id"),
        ({"id": 1, "heartbeat_tick": 0}, "heartbeat tick must greater than 0"),
        (
            {"id": 1, "election_tick": 2, "heartbeat_tick": 2},
            "election tick must be greater than heartbeat tick",
        ),
        (
            {"id": 1, "election_tick": 10, "min_election_tick": 5},
            "min election tick 5 must not be less than election_tick 10",
        ),
        (
            {"id": 1, "election_tick": 10, "min_election_tick": 15, "max_election_tick": 15},
            "min election tick 15 should be less than max election tick 15",
        ),
        ({"id": 1, "max_inflight_msgs": 0}, "max inflight messages must be greater than 0"),
        (
            {"id": 1, "read_only_option": ReadOnlyOption.LEASE_BASED},
            "read_only_option == LeaseBased requires check_quorum == true",
        ),
        (
            {"id": 1, "max_uncommitted_size": 10, "max_size_per_msg": 11},
            "max uncommitted size should greater than max_size_per_msg",
        ),
    ],
)
def test_validate_errors(kwargs, message):
    with pytest.raises(ConfigInvalid) as info:
        Config(**kwargs).validate()
    assert info.value == ConfigInvalid(message)
    assert str(info.value) == message