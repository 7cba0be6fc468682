import pytest

from raftcore.quorum import U64_MAX, Index, VoteResult


@pytest.mark.parametrize(
    "result, text",
    [
        (VoteResult.WON, "VoteWon"),
        (VoteResult.LOST, "VoteLost"),
        (VoteResult.PENDING, "VotePending"),
    ],
)
def test_vote_result_display(result, text):
    assert str(result) == text


def test_index_display_without_group():
    assert str(Index(index=42)) == "42"


def test_index_display_infinite():
    assert str(Index(index=U64_MAX)) == "∞"


def test_index_display_with_group():
    assert str(Index(index=7, group_id=3)) == "[3]7"


def test_index_display_infinite_with_group():
    assert str(Index(index=U64_MAX, group_id=2)) == "[2]∞"


def test_index_default_is_zero():
    assert Index() == Index(index=0, group_id=0)
    assert str(Index()) == "0"


def test_index_is_immutable():
    idx = Index(index=1, group_id=1)
    with pytest.raises(AttributeError):
        idx.index = 2
    assert idx == Index(index=1, group_id=1)
    assert str(idx) == "[1]1"