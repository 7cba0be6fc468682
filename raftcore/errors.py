"""Errors raised by the raft implementation and by its storage."""

from __future__ import annotations

from typing import Optional, Tuple


class _ComparableError(Exception):
    """Errors equal when of the same type and equal on the compared fields.

    A class whose ``_compared_fields`` is None never compares equal.
    """

    message = "error"
    _compared_fields: Optional[Tuple[str, ...]] = None

    def __init__(self, message: str | None = None):
        super().__init__(message if message is not None else self.message)

    def __eq__(self, other):
        if not isinstance(other, _ComparableError):
            return NotImplemented
        fields = self._compared_fields
        if type(self) is not type(other) or fields is None:
            return False
        return all(getattr(self, name) == getattr(other, name) for name in fields)

    def __hash__(self):
        return hash(type(self))


class StorageError(_ComparableError):
    """An error with the storage."""

    message = "storage error"


class Compacted(StorageError):
    """The storage was compacted and is not accessible."""

    message = "log compacted"
    _compared_fields = ()


class Unavailable(StorageError):
    """The log is not available."""

    message = "log unavailable"
    _compared_fields = ()


class SnapshotOutOfDate(StorageError):
    """The snapshot is out of date."""

    message = "snapshot out of date"
    _compared_fields = ()


class SnapshotTemporarilyUnavailable(StorageError):
    """The snapshot is being created."""

    message = "snapshot is temporarily unavailable"
    _compared_fields = ()


class OtherStorageError(StorageError):
    """Some other storage failure; never equal to another error."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"unknown error {cause!r}")


class RaftError(_ComparableError):
    """The base error type for raft."""

    message = "raft error"


class IoError(RaftError):
    """An I/O error occurred; equal when the underlying kinds agree."""

    _compared_fields = ("kind",)

    def __init__(self, cause: BaseException):
        self.cause = cause
        self.kind = (type(cause), getattr(cause, "errno", None))
        super().__init__(str(cause))


class StoreError(RaftError):
    """A storage error occurred."""

    _compared_fields = ("error",)

    def __init__(self, error: StorageError):
        self.error = error
        super().__init__(str(error))


class StepLocalMsg(RaftError):
    """Raft cannot step the local message."""

    message = "raft: cannot step raft local message"
    _compared_fields = ()


class StepPeerNotFound(RaftError):
    """The raft peer is not found and thus cannot step."""

    message = "raft: cannot step as peer not found"
    _compared_fields = ()


class ProposalDropped(RaftError):
    """The proposal of changes was dropped."""

    message = "raft: proposal dropped"
    _compared_fields = ()


class RequestSnapshotDropped(RaftError):
    """The request snapshot is dropped."""

    message = "raft: request snapshot dropped"
    _compared_fields = ()


class ConfigInvalid(RaftError):
    """The configuration is invalid."""

    _compared_fields = ("description",)

    def __init__(self, description: str):
        self.description = description
        super().__init__(description)


class ConfChangeError(RaftError):
    """A configuration change proposal is invalid."""

    _compared_fields = ("description",)

    def __init__(self, description: str):
        self.description = description
        super().__init__(description)


class CodecError(RaftError):
    """A message codec failed."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"protobuf codec error {cause!r}")


class Exists(RaftError):
    """The node exists, but should not."""

    def __init__(self, node_id: int, set_name: str):
        self.node_id = node_id
        self.set_name = set_name
        super().__init__(f"The node {node_id} already exists in the {set_name} set.")


class NotExists(RaftError):
    """The node does not exist, but should."""

    def __init__(self, node_id: int, set_name: str):
        self.node_id = node_id
        self.set_name = set_name
        super().__init__(f"The node {node_id} is not in the {set_name} set.")