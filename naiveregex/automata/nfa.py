#! /usr/bin/env python3

# SPDX-License-Identifier: GPL-3.0-or-later

# Copyright (C) 2026 The naiveregex authors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from . import AutomatonModel, Runtime, S, T, TransitionRelation
import dataclasses
import logging
import typing

logger = logging.getLogger(__name__)


def epsilon_closure(transitions: TransitionRelation[S, T],
                    states: typing.Iterable[S]) -> frozenset[S]:
    """Return ``states`` together with every state reachable from them
       through epsilon moves only."""
    closure = set(states)
    pending = list(closure)
    while pending:
        state = pending.pop()
        for dest in transitions.lookup_all(state, None):
            if dest not in closure:
                closure.add(dest)
                pending.append(dest)
    return frozenset(closure)


class NFARuntime(Runtime[S, T]):
    def __init__(self, model: 'NFAModel[S, T]') -> None:
        """Start from the epsilon closure of the start state rather than
           the bare start state, so that the empty input is accepted
           when an accept state is reachable through epsilon moves."""
        super().__init__(model)
        self._states = self.epsilon_closure((model.start_state,))

    @property
    def states(self) -> frozenset[S]:
        return self._states

    def epsilon_closure(self, states: typing.Iterable[S]) -> frozenset[S]:
        return epsilon_closure(self.transitions, states)

    def read_symbol(self, symbol: T) -> None:
        """Move to the states reached by reading ``symbol`` from any
           of the current states, possibly none."""
        states = self.epsilon_closure(self._states)
        states = self.transitions.next_states(states, symbol)
        self._states = self.epsilon_closure(states)

    def is_failure(self) -> bool:
        return not self._states

    def accepted(self) -> bool:
        return not self._states.isdisjoint(self.accept_states)


@dataclasses.dataclass(frozen=True)
class NFAModel(AutomatonModel[S, T]):
    def __post_init__(self) -> None:
        AutomatonModel.__post_init__(self)
        logger.debug("NFA with %d rules, start state %r, %d accept states",
                     len(self.transitions), self.start_state, len(self.accept_states))

    def runtime(self) -> NFARuntime[S, T]:
        return NFARuntime(self)
