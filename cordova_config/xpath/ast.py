"""
Node path AST models.

These data structures represent a parsed path expression such as
``./platform[@name="ios"]/preference``.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Axis(str, Enum):
    """Relation between two consecutive steps."""

    CHILD = "/"
    DESCENDANT = "//"


class PredicateKind(str, Enum):
    """What a predicate tests."""

    ATTR_EXISTS = "attr_exists"
    ATTR_COMPARE = "attr_compare"
    CHILD_EXISTS = "child_exists"
    CHILD_TEXT = "child_text"
    POSITION = "position"


class PredicateOp(str, Enum):
    """Comparison operator for attribute and child-text predicates."""

    EQ = "="
    NE = "!="


@dataclass(frozen=True)
class Predicate:
    """Filter like [@name="foo"], [param], [param="x"] or [2]."""

    kind: PredicateKind
    name: Optional[str] = None
    op: Optional[PredicateOp] = None
    value: Optional[str] = None
    index: Optional[int] = None


# Special node tests
SELF = "."
PARENT = ".."
ANY = "*"


@dataclass(frozen=True)
class PathStep:
    """
    A single path step.

    `node_test` can be:
    - "." (context node), ".." (parent), "*" (any element)
    - an element tag, matched literally (e.g. "preference", "android:name")
    - None for a predicate-only step that filters the previous selection
    """

    node_test: Optional[str]
    predicates: tuple[Predicate, ...] = ()


@dataclass(frozen=True)
class PathQuery:
    """A full path, e.g. ./platform[@name="ios"]/preference[@name="a"]."""

    first: PathStep
    rest: tuple[tuple[Axis, PathStep], ...] = ()

    @property
    def steps(self) -> tuple[PathStep, ...]:
        return (self.first,) + tuple(step for _axis, step in self.rest)
