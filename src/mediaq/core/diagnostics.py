"""
Error policy for emitting media blocks.

The engine always stops at the first error in a block. What happens next
is decided here: under ``raise`` the error propagates and halts the
build; under ``warn`` it is logged, recorded and the block is dropped
while processing continues with the next one.

Usage:
    diagnostics = Diagnostics(ErrorPolicy.WARN)
    with diagnostics.guard() as outcome:
        css = media(">=tablet", body=body, context=context)
    if outcome.aborted:
        css = ""
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import StrEnum
from typing import NoReturn

from mediaq.core.errors import MediaQueryError

logger = logging.getLogger(__name__)


class ErrorPolicy(StrEnum):
    """What to do when a block cannot be compiled."""

    RAISE = "raise"
    WARN = "warn"


class BlockAborted(Exception):
    """Signal that the current block was dropped after a reported error."""

    def __init__(self, error: MediaQueryError) -> None:
        super().__init__(str(error))
        self.error = error


@dataclass
class BlockOutcome:
    """Result of a guarded block."""

    aborted: bool = False
    error: MediaQueryError | None = None


@dataclass
class Diagnostics:
    """Collects reported errors and applies the error policy."""

    policy: ErrorPolicy = ErrorPolicy.RAISE
    errors: list[MediaQueryError] = field(default_factory=list)

    @property
    def strict(self) -> bool:
        return self.policy == ErrorPolicy.RAISE

    def report(self, error: MediaQueryError) -> NoReturn:
        """Stop the current block.

        Raises:
            MediaQueryError: The error itself under the ``raise`` policy.
            BlockAborted: Under the ``warn`` policy, after logging.
        """
        self.errors.append(error)
        if self.strict:
            raise error
        logger.warning("%s", error)
        raise BlockAborted(error)

    @contextmanager
    def guard(self) -> Iterator[BlockOutcome]:
        """Run one block, routing engine errors through report().

        Errors that are not recoverable propagate under every policy.
        """
        outcome = BlockOutcome()
        try:
            try:
                yield outcome
            except MediaQueryError as e:
                if not e.recoverable:
                    raise
                self.report(e)
        except BlockAborted as aborted:
            outcome.aborted = True
            outcome.error = aborted.error
