#! /usr/bin/env python3

# SPDX-License-Identifier: GPL-3.0-or-later

# Copyright (C) 2026 The naiveregex authors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

import abc
import dataclasses
import enum
import logging
import typing

from .transitions import Rule, RuleLike, S, T, TransitionRelation

logger = logging.getLogger(__name__)


class AutomatonError(Exception):
    @property
    def message(self) -> str:
        return str(self.args[0])


class UnknownTransition(AutomatonError):
    """Raised when a deterministic automaton has no rule for the
       current state and the symbol being read."""
    def __init__(self, state: typing.Hashable, symbol: typing.Hashable):
        super().__init__(f"no transition from state {state!r} on symbol {symbol!r}")
        self.state = state
        self.symbol = symbol


class AmbiguousTransition(AutomatonError):
    """Raised when a deterministic automaton is built from rules that
       include an epsilon move, or more than one target for the same
       state and symbol."""
    def __init__(self, state: typing.Hashable, symbol: typing.Hashable):
        what = "epsilon move" if symbol is None else f"more than one transition on symbol {symbol!r}"
        super().__init__(f"{what} from state {state!r} in a deterministic automaton")
        self.state = state
        self.symbol = symbol


class Outcome(enum.Enum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    MALFORMED = "malformed"


class Runtime(typing.Generic[S, T], metaclass=abc.ABCMeta):
    """A single visit of an automaton.  It owns the cursor and borrows
       the accept states and the transition relation from the model."""

    def __init__(self, model: 'AutomatonModel[S, T]') -> None:
        self.accept_states = model.accept_states
        self.transitions = model.transitions

    @abc.abstractmethod
    def read_symbol(self, symbol: T) -> None:
        """Advance the cursor by reading ``symbol``."""
        pass

    @abc.abstractmethod
    def accepted(self) -> bool:
        """Return True if the symbols read so far are accepted."""
        pass

    def is_failure(self) -> bool:
        """Return True if no further input can lead to acceptance."""
        return False

    def read_sequence(self, symbols: typing.Iterable[T]) -> None:
        """Read each symbol of ``symbols`` in order."""
        for symbol in symbols:
            if self.is_failure():
                return
            self.read_symbol(symbol)


@dataclasses.dataclass(frozen=True)
class AutomatonModel(typing.Generic[S, T], metaclass=abc.ABCMeta):
    start_state: S
    accept_states: frozenset[S]
    transitions: TransitionRelation[S, T]

    def __post_init__(self) -> None:
        # accept any iterable of states and any iterable of rules
        if not isinstance(self.accept_states, frozenset):
            object.__setattr__(self, 'accept_states', frozenset(self.accept_states))
        if not isinstance(self.transitions, TransitionRelation):
            object.__setattr__(self, 'transitions', TransitionRelation(self.transitions))

    @abc.abstractmethod
    def runtime(self) -> Runtime[S, T]:
        """Return a fresh runtime positioned at the start state."""
        pass

    def accepts(self, sequence: typing.Iterable[T]) -> bool:
        """Return True if the automaton accepts the sequence of symbols
           in ``sequence``."""
        runtime = self.runtime()
        runtime.read_sequence(sequence)
        return runtime.accepted()

    def run(self, sequence: typing.Iterable[T]) -> Outcome:
        """Like ``accepts``, but report an automaton that does not
           define a transition for the input as ``Outcome.MALFORMED``
           instead of raising."""
        try:
            accepted = self.accepts(sequence)
        except UnknownTransition as e:
            logger.debug("%s", e.message)
            return Outcome.MALFORMED
        return Outcome.ACCEPTED if accepted else Outcome.REJECTED


__all__ = [
    'AmbiguousTransition', 'AutomatonError', 'AutomatonModel', 'Outcome',
    'Rule', 'RuleLike', 'Runtime', 'S', 'T', 'TransitionRelation', 'UnknownTransition',
]
