"""
Node path parser (Lark).

Supported features (the subset of ElementPath used by config.xml tooling):
- Steps: `tag`, `*`, `.`, `..`
- Separators: child (`/`) and descendant (`//`)
- Predicates: [@attr], [@attr="v"], [@attr!="v"], [tag], [tag="v"], [N]
- Predicate-only steps: `./access/[@origin="*"]` filters the previous step

Notes:
- Values are quoted with single or double quotes and taken literally.
- Absolute paths are rejected; translate them with fix_absolute_xpath first.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Optional

from lark import Lark, Token, Transformer, UnexpectedInput
from lark.exceptions import VisitError

from ..core.exceptions import PathSyntaxError
from .ast import (
    Axis,
    PathQuery,
    PathStep,
    Predicate,
    PredicateKind,
    PredicateOp,
)


_GRAMMAR = r"""
?start: path

path: step (SEP step)*
SEP: "//" | "/"

step: node_test predicate*
    | predicate+
node_test: PARENT | SELF | STAR | NAME
PARENT: ".."
SELF: "."
STAR: "*"

predicate: "[" "@" NAME "]"           -> attr_exists
         | "[" "@" NAME OP value "]"  -> attr_compare
         | "[" NAME "]"               -> child_exists
         | "[" NAME OP value "]"      -> child_text
         | "[" INT "]"                -> position
OP: "!=" | "="
?value: STRING | SQ_STRING

NAME: /[A-Za-z_][A-Za-z0-9_.:\-]*/
INT: /[0-9]+/
SQ_STRING: /'[^']*'/

%import common.ESCAPED_STRING -> STRING
%import common.WS_INLINE -> WS
%ignore WS
"""


_parser = Lark(_GRAMMAR, parser="lalr", start="start")


class _ToAst(Transformer):
    def NAME(self, t: Token) -> str:  # noqa: N802
        return str(t)

    def INT(self, t: Token) -> int:  # noqa: N802
        return int(str(t))

    def STRING(self, t: Token) -> str:  # noqa: N802
        return str(t)[1:-1]

    def SQ_STRING(self, t: Token) -> str:  # noqa: N802
        return str(t)[1:-1]

    def OP(self, t: Token) -> PredicateOp:  # noqa: N802
        return PredicateOp(str(t))

    def node_test(self, items: list[Any]) -> str:
        return str(items[0])

    def attr_exists(self, items: list[Any]) -> Predicate:
        return Predicate(kind=PredicateKind.ATTR_EXISTS, name=items[0])

    def attr_compare(self, items: list[Any]) -> Predicate:
        return Predicate(
            kind=PredicateKind.ATTR_COMPARE,
            name=items[0],
            op=items[1],
            value=items[2],
        )

    def child_exists(self, items: list[Any]) -> Predicate:
        return Predicate(kind=PredicateKind.CHILD_EXISTS, name=items[0])

    def child_text(self, items: list[Any]) -> Predicate:
        return Predicate(
            kind=PredicateKind.CHILD_TEXT,
            name=items[0],
            op=items[1],
            value=items[2],
        )

    def position(self, items: list[Any]) -> Predicate:
        index = int(items[0])
        if index < 1:
            raise PathSyntaxError("Position predicates are 1-based, got [0]")
        return Predicate(kind=PredicateKind.POSITION, index=index)

    def step(self, items: list[Any]) -> PathStep:
        node_test: Optional[str] = None
        predicates: list[Predicate] = []
        for it in items:
            if isinstance(it, str):
                node_test = it
            elif isinstance(it, Predicate):
                predicates.append(it)
            else:
                raise PathSyntaxError(f"Unexpected step item: {it!r}")
        return PathStep(node_test=node_test, predicates=tuple(predicates))

    def path(self, items: list[Any]) -> PathQuery:
        first = items[0]
        if not isinstance(first, PathStep) or first.node_test is None:
            raise PathSyntaxError("Path must start with a node test")

        rest: list[tuple[Axis, PathStep]] = []
        for i in range(1, len(items), 2):
            sep, step = items[i], items[i + 1]
            axis = Axis(str(sep))
            if axis == Axis.DESCENDANT and step.node_test is None:
                raise PathSyntaxError("A predicate cannot directly follow '//'")
            rest.append((axis, step))
        return PathQuery(first=first, rest=tuple(rest))


@lru_cache(maxsize=256)
def parse_path(path: str) -> PathQuery:
    """
    Parse a relative node path into a PathQuery.

    Raises:
        PathSyntaxError
    """
    if not path or not path.strip():
        raise PathSyntaxError("Empty path", path=path)
    if path.lstrip().startswith("/"):
        raise PathSyntaxError(
            f"Absolute paths are not supported: {path!r}", path=path
        )
    try:
        tree = _parser.parse(path)
        return _ToAst().transform(tree)
    except UnexpectedInput as e:
        raise PathSyntaxError(f"Invalid path {path!r}: {e}", path=path) from e
    except VisitError as e:
        if isinstance(e.orig_exc, PathSyntaxError):
            raise PathSyntaxError(
                f"Invalid path {path!r}: {e.orig_exc.message}", path=path
            ) from e.orig_exc
        raise
