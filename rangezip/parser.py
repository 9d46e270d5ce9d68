"""
rangezip expression parser - textual range chains using Lark

A chain is a comma separated list of segments. A segment with a single
point is a stop; points joined with ``..`` are steps. Any point may carry a
source, either a literal list or a nested chain::

    1..10, -17, 2@[0, 1, 34231], 2@(1..10), 21..30
"""

import ast
from typing import Any, List, Optional, Tuple

from lark import Lark, Transformer, v_args
from lark.exceptions import UnexpectedInput

from rangezip.error_msg import RangeSyntaxError
from rangezip.point import Point
from rangezip.range import Direction, NumberRange, Range

# (value, source) before the point's role is known
RawPoint = Tuple[Any, Any]


grammar = r"""
    chain: [segment ("," segment)*]

    segment: point (".." point)*

    point: literal source?

    source: "@" "[" [literal ("," literal)*] "]"   -> list_source
          | "@" "(" chain ")"                       -> range_source

    literal: SIGNED_INT      -> integer
           | ESCAPED_STRING  -> string

    %import common.SIGNED_INT
    %import common.ESCAPED_STRING
    %import common.WS
    %ignore WS
"""


def _build_range(points: List[Point], direction: Direction = Direction.FORWARD) -> Range:
    if (
        direction is Direction.FORWARD
        and len(points) == 2
        and all(point.is_step and point.source is None for point in points)
        and all(isinstance(point.value, int) for point in points)
    ):
        return NumberRange(points[0].value, points[1].value)
    return Range(points, direction=direction)


class RangeTransformer(Transformer):
    """Transform the parse tree into points and ranges"""

    @v_args(inline=True)
    def chain(self, *segments: List[Point]) -> List[Point]:
        return [point for segment in segments for point in segment]

    @v_args(inline=True)
    def segment(self, *raw_points: RawPoint) -> List[Point]:
        if len(raw_points) == 1:
            value, source = raw_points[0]
            return [Point.stop(value, source)]
        return [Point.step(value, source) for value, source in raw_points]

    @v_args(inline=True)
    def point(self, value: Any, source: Optional[Any] = None) -> RawPoint:
        return (value, source)

    @v_args(inline=True)
    def list_source(self, *items: Any) -> List[Any]:
        return list(items)

    @v_args(inline=True)
    def range_source(self, points: List[Point]) -> Range:
        return _build_range(points)

    @v_args(inline=True)
    def integer(self, token):
        return int(token)

    @v_args(inline=True)
    def string(self, token):
        # Remove the quotes and decode escape sequences
        return ast.literal_eval(str(token))


# Create the parser
parser = Lark(
    grammar,
    start="chain",
    parser="lalr",
    transformer=RangeTransformer(),
    maybe_placeholders=False,
)


def parse_points(text: str) -> List[Point]:
    """
    Parse a range expression into its points

    Args:
        text: Range expression, e.g. ``"1..10, -17"``

    Returns:
        The points of the chain in order

    Raises:
        RangeSyntaxError: If the text is not a valid expression
    """
    try:
        return parser.parse(text)
    except UnexpectedInput as exc:
        line = getattr(exc, "line", 0)
        column = getattr(exc, "column", 0)
        raise RangeSyntaxError(
            f"Invalid range expression at line {line}, column {column}",
            text,
            line,
            column,
        ) from exc


def parse_range(text: str, direction: Direction = Direction.FORWARD) -> Range:
    """
    Parse a range expression into a Range

    A chain made of exactly one source-free integer step pair becomes a
    NumberRange when scanned forward.
    """
    return _build_range(parse_points(text), Direction(direction))
