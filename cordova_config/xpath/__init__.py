"""
Node paths - a small ElementPath-like language for addressing config.xml nodes.

Public API:
  - parse_path(path: str) -> PathQuery
  - select(store, context, path) -> list of nodes
  - fix_absolute_xpath(path, root_tag) -> relative path
  - PathSyntaxError

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from ..core.exceptions import PathSyntaxError
from .ast import (
    Axis,
    PathQuery,
    PathStep,
    Predicate,
    PredicateKind,
    PredicateOp,
)
from .parser import parse_path
from .executor import select
from .resolver import fix_absolute_xpath

__all__ = [
    "PathSyntaxError",
    "Axis",
    "PathQuery",
    "PathStep",
    "Predicate",
    "PredicateKind",
    "PredicateOp",
    "parse_path",
    "select",
    "fix_absolute_xpath",
]
