from __future__ import annotations


class LifeError(Exception):
    """Base class for errors raised by the simulator.

    Covers every failure the command line reports and exits on; built-in
    errors such as ValueError are left to propagate.
    """

    def __init__(self, msg: str):
        super().__init__(msg)
        self.msg = msg

    def __str__(self) -> str:
        return self.msg


class UsageError(LifeError):
    """Missing, conflicting or malformed command-line arguments."""


class IoError(LifeError):
    """Input file missing or unreadable."""


class FormatError(LifeError):
    """Board text that cannot be turned into a valid board."""


class AllocationError(LifeError):
    """Board or scratch buffer could not be allocated."""
