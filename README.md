# raftcore

Pieces of the Raft consensus algorithm in plain Python. It needs nothing
outside the standard library.

## What is in the package

- `raftcore.config`: `Config`, the parameters of a raft peer, with
  `validate()`, `effective_min_election_tick()` and
  `effective_max_election_tick()`. Also the `ReadOnlyOption` enum (`SAFE`,
  `LEASE_BASED`) and the constants `NO_LIMIT` and `INVALID_ID`.
- `raftcore.errors`: the exceptions. `RaftError` is the root of `IoError`,
  `StoreError`, `StepLocalMsg`, `StepPeerNotFound`, `ProposalDropped`,
  `RequestSnapshotDropped`, `ConfigInvalid`, `ConfChangeError`, `CodecError`,
  `Exists` and `NotExists`. `StorageError` is the root of `Compacted`,
  `Unavailable`, `SnapshotOutOfDate`, `SnapshotTemporarilyUnavailable` and
  `OtherStorageError`. Two errors compare equal when they have the same type
  and the same message (`ConfigInvalid`, `ConfChangeError`), the same wrapped
  storage error (`StoreError`) or the same I/O error kind (`IoError`).
  `OtherStorageError`, `CodecError`, `Exists` and `NotExists` never compare
  equal.
- `raftcore.quorum`: `VoteResult` (`PENDING`, `LOST`, `WON`) and `Index`. An
  `Index` is a log position together with a commit group id.
- `raftcore.majority`: `MajorityConfig`, a set of voter ids. It offers
  `committed_index`, with or without group commit, `vote_result` and
  `describe`.
- `raftcore.joint`: `JointConfig`, which holds an `incoming` and an `outgoing`
  `MajorityConfig`. A decision needs both of them.
- `raftcore.datadriven.parser` and `raftcore.datadriven.runner`: a runner for
  data-driven test files.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

### Validating a configuration

`validate()` raises `ConfigInvalid` at the first problem it finds:

```python
from raftcore.config import Config, ReadOnlyOption
from raftcore.errors import ConfigInvalid

Config(id=1).validate()

try:
    Config(id=0).validate()
except ConfigInvalid as exc:
    print(exc)  # invalid node id

try:
    Config(id=1, read_only_option=ReadOnlyOption.LEASE_BASED).validate()
except ConfigInvalid as exc:
    print(exc)  # read_only_option == LeaseBased requires check_quorum == true
```

### Quorums

The acknowledged indexes are passed as a mapping from voter id to `Index`. A
voter with no entry in the mapping counts as index 0. A vote check is a
callable that returns `True`, `False` or `None`, where `None` means the voter
has not voted.

```python
from raftcore.joint import JointConfig
from raftcore.majority import MajorityConfig
from raftcore.quorum import Index, VoteResult

cfg = MajorityConfig({1, 2, 3})
acked = {1: Index(100), 2: Index(101), 3: Index(99)}
assert cfg.committed_index(False, acked) == (100, False)

assert cfg.vote_result({1: True, 2: True}.get) is VoteResult.WON
assert cfg.vote_result({1: False, 2: False}.get) is VoteResult.LOST

joint = JointConfig(MajorityConfig({1, 2, 3}), MajorityConfig({2, 3, 4}))
assert joint.ids() == {1, 2, 3, 4}
assert not joint.is_singleton()
print(joint.describe(acked))
```

An empty majority commits every index: `committed_index` returns
`(2**64 - 1, True)`, and an election in it is always `WON`. Because of this, a
joint configuration with an empty outgoing half behaves like its incoming
half alone.

### Data-driven tests

A test file is a sequence of directives. Each directive has a command line,
an optional input block, a `----` separator and the expected output. The
expected output ends at the first blank line:

```
sum a=(1,2) b=3
----
a=3
b=3
```

Arguments take the forms `key`, `key=`, `key=a`, `key=a,b,c` (a single value)
and `key=(a,b,c)` (several values). A line that ends in `\` continues on the
next line. Lines that start with `#` are comments. If the expected output has
to contain blank lines, put it between a double `----` line and a closing
double `----` line.

```python
from raftcore.datadriven.runner import run_test

def handle(d):
    return "\n".join(
        f"{arg.key}={sum(int(v) for v in arg.vals)}" for arg in d.cmd_args
    )

run_test("testdata", handle)
```

`run_test` accepts either a single file or a directory. With a directory it
runs every entry in it. If an output differs from the expected output, it
raises `ExpectationMismatch`, which carries a unified diff. If a line cannot
be parsed, it raises `DirectiveError`. With `rewrite=True`, each file is
overwritten with the actual outputs instead.

`run_directives(source_name, content, func, rewrite)` does the same work on a
string. In rewrite mode it returns the rewritten text. `walk(path, func)`
calls `func` for each file. `parse_line` and `split_directives` expose the
line parser.

## What the package does not do

This package contains the parts listed above and nothing more. It does not
include:

- a raft peer or state machine;
- log entry, snapshot or message types;
- the unstable log;
- configuration changes or their text form;
- storage, networking, or a command-line program.

The errors module names failures that happen in those areas, but no code in
this package raises them.