#! /usr/bin/env python3

# SPDX-License-Identifier: GPL-3.0-or-later

# Copyright (C) 2026 The naiveregex authors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from . import AmbiguousTransition, AutomatonModel, Runtime, S, T, UnknownTransition
import dataclasses
import logging

logger = logging.getLogger(__name__)

_NO_TRANSITION = object()


class DFARuntime(Runtime[S, T]):
    def __init__(self, model: 'DFAModel[S, T]') -> None:
        super().__init__(model)
        self._state = model.start_state

    @property
    def state(self) -> S:
        return self._state

    def read_symbol(self, symbol: T) -> None:
        """Advance through the transition labeled with ``symbol``.
           Raise ``UnknownTransition`` if there is none; the runtime
           is then left in the state it had before the call."""
        dest = self.transitions.lookup_deterministic(self._state, symbol, _NO_TRANSITION)
        if dest is _NO_TRANSITION:
            raise UnknownTransition(self._state, symbol)
        self._state = dest

    def accepted(self) -> bool:
        return self._state in self.accept_states


@dataclasses.dataclass(frozen=True)
class DFAModel(AutomatonModel[S, T]):
    def __post_init__(self) -> None:
        AutomatonModel.__post_init__(self)
        ambiguity = next(self.transitions.ambiguities(), None)
        if ambiguity is not None:
            raise AmbiguousTransition(*ambiguity)
        logger.debug("DFA with %d rules, start state %r, %d accept states",
                     len(self.transitions), self.start_state, len(self.accept_states))

    def runtime(self) -> DFARuntime[S, T]:
        return DFARuntime(self)
