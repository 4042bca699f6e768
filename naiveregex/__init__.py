"""Regular expression patterns and finite automata."""

# SPDX-License-Identifier: GPL-3.0-or-later

# Copyright (C) 2026 The naiveregex authors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

import logging

from .automata import (
    AmbiguousTransition, AutomatonError, AutomatonModel, Outcome, Rule,
    Runtime, TransitionRelation, UnknownTransition
)
from .automata.dfa import DFAModel, DFARuntime
from .automata.nfa import NFAModel, NFARuntime, epsilon_closure
from .pattern import Choose, Concatenate, Empty, Literal, Pattern, Repeat

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'AmbiguousTransition', 'AutomatonError', 'AutomatonModel', 'Choose',
    'Concatenate', 'DFAModel', 'DFARuntime', 'Empty', 'Literal', 'NFAModel',
    'NFARuntime', 'Outcome', 'Pattern', 'Repeat', 'Rule', 'Runtime',
    'TransitionRelation', 'UnknownTransition', 'epsilon_closure',
]
