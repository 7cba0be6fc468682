"""Raft building blocks: peer configuration, errors, majority and joint quorums, and a data-driven test runner."""

__version__ = "0.1.0"