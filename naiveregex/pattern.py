#! /usr/bin/env python3

# SPDX-License-Identifier: GPL-3.0-or-later

# Copyright (C) 2026 The naiveregex authors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""Structural representation of regular expressions.

Patterns are immutable trees.  Each variant has a fixed precedence,
from 0 for alternation (binding most loosely) to 3 for atoms, and
``render`` brackets a subpattern only if its precedence is lower
than the one of the pattern that contains it."""

from abc import ABCMeta, abstractmethod
import dataclasses
import typing
import typing_extensions

from .util import dataclass_args


@dataclasses.dataclass(**dataclass_args)
class RegexAST(metaclass=ABCMeta):
    PRECEDENCE: typing.ClassVar[int]

    def precedence(self) -> int:
        return self.PRECEDENCE

    @abstractmethod
    def render(self) -> str:
        """Return the textual form of the pattern."""
        pass

    def bracket(self, outer_precedence: int) -> str:
        """Render the pattern as a part of a pattern whose precedence
           is ``outer_precedence``."""
        if self.precedence() < outer_precedence:
            return f"({self.render()})"
        return self.render()

    def inspect(self) -> str:
        return f"/{self.render()}/"

    def __str__(self) -> str:
        return self.render()


@dataclasses.dataclass(**dataclass_args)
class Empty(RegexAST):
    PRECEDENCE: typing.ClassVar[int] = 3

    def render(self) -> str:
        return ""


@dataclasses.dataclass(**dataclass_args)
class Literal(RegexAST):
    PRECEDENCE: typing.ClassVar[int] = 3
    character: str

    def __post_init__(self) -> None:
        if len(self.character) != 1:
            raise ValueError(f"a literal must be a single character, not {self.character!r}")

    def render(self) -> str:
        return self.character


@dataclasses.dataclass(**dataclass_args)
class Concatenate(RegexAST):
    PRECEDENCE: typing.ClassVar[int] = 1
    first: 'Pattern'
    second: 'Pattern'

    def render(self) -> str:
        return self.first.bracket(self.PRECEDENCE) + self.second.bracket(self.PRECEDENCE)


@dataclasses.dataclass(**dataclass_args)
class Choose(RegexAST):
    PRECEDENCE: typing.ClassVar[int] = 0
    first: 'Pattern'
    second: 'Pattern'

    def render(self) -> str:
        return self.first.bracket(self.PRECEDENCE) + "|" + self.second.bracket(self.PRECEDENCE)


@dataclasses.dataclass(**dataclass_args)
class Repeat(RegexAST):
    PRECEDENCE: typing.ClassVar[int] = 2
    pattern: 'Pattern'

    def render(self) -> str:
        return self.pattern.bracket(self.PRECEDENCE) + "*"


Pattern: typing_extensions.TypeAlias = typing.Union[Empty, Literal, Concatenate, Choose, Repeat]
