#! /usr/bin/env python3

# SPDX-License-Identifier: GPL-3.0-or-later

# Copyright (C) 2026 The naiveregex authors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""Transition rules and the relation that indexes them."""

from collections import defaultdict
import dataclasses
import typing

from ..util import dataclass_args

S = typing.TypeVar('S', bound=typing.Hashable)
T = typing.TypeVar('T', bound=typing.Hashable)


@dataclasses.dataclass(**dataclass_args)
class Rule(typing.Generic[S, T]):
    """A single edge of an automaton.  A ``symbol`` of None denotes
       an epsilon move, i.e. one that consumes no input."""
    state: S
    symbol: typing.Optional[T]
    next_state: S

    @property
    def is_epsilon(self) -> bool:
        return self.symbol is None

    def applies_to(self, state: S, symbol: typing.Optional[T]) -> bool:
        """Return True if the rule fires from ``state`` on ``symbol``."""
        return self.state == state and self.symbol == symbol


RuleLike = typing.Union[Rule[S, T], typing.Tuple[S, typing.Optional[T], S]]


@dataclasses.dataclass(eq=True)
class TransitionRelation(typing.Generic[S, T]):
    rules: frozenset[Rule[S, T]]

    def __init__(self, rules: typing.Iterable[RuleLike[S, T]] = ()):
        self.rules = frozenset(
            rule if isinstance(rule, Rule) else Rule(*rule)
            for rule in rules)

        # (state, symbol) -> targets, built once; the relation is
        # never modified after construction
        index: dict[tuple[S, typing.Optional[T]], list[S]] = defaultdict(list)
        for rule in self.rules:
            index[rule.state, rule.symbol].append(rule.next_state)
        self._index = {key: tuple(targets) for key, targets in index.items()}

    def __hash__(self) -> int:
        return hash(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def __iter__(self) -> typing.Iterator[Rule[S, T]]:
        return iter(self.rules)

    def __contains__(self, rule: object) -> bool:
        return rule in self.rules

    def lookup_deterministic(self, state: S, symbol: typing.Optional[T],
                             default: typing.Any = None) -> typing.Any:
        """Return the state reached from ``state`` on ``symbol``, or
           ``default`` if no rule applies.  If more than one rule applies,
           any of the targets can be returned."""
        targets = self._index.get((state, symbol))
        return targets[0] if targets else default

    def lookup_all(self, state: S, symbol: typing.Optional[T]) -> frozenset[S]:
        """Return all the states reached from ``state`` on ``symbol``.
           A ``symbol`` of None looks up epsilon moves only."""
        return frozenset(self._index.get((state, symbol), ()))

    def rules_for(self, state: S, symbol: typing.Optional[T]) -> frozenset[Rule[S, T]]:
        """Return the rules that apply to ``state`` and ``symbol``."""
        return frozenset(Rule(state, symbol, target)
                         for target in self._index.get((state, symbol), ()))

    def next_states(self, states: typing.Iterable[S], symbol: typing.Optional[T]) -> frozenset[S]:
        """Return the union of ``lookup_all`` over all of ``states``."""
        index = self._index
        dest: set[S] = set()
        for state in states:
            dest.update(index.get((state, symbol), ()))
        return frozenset(dest)

    def ambiguities(self) -> typing.Iterator[tuple[S, typing.Optional[T]]]:
        """Yield the (state, symbol) pairs that prevent the relation
           from being deterministic: epsilon moves, and pairs with
           more than one target."""
        for (state, symbol), targets in self._index.items():
            if symbol is None or len(targets) > 1:
                yield state, symbol

    def states(self) -> frozenset[S]:
        """Return every state mentioned by a rule."""
        result: set[S] = set()
        for rule in self.rules:
            result.add(rule.state)
            result.add(rule.next_state)
        return frozenset(result)

    def alphabet(self) -> frozenset[T]:
        """Return every symbol read by a non-epsilon rule."""
        return frozenset(rule.symbol for rule in self.rules
                         if rule.symbol is not None)
