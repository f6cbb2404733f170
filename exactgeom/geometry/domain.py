"""Primitive class families bound to a configured coordinate strategy.

``ExactPoint`` and friends use the default 64-bit strategy. A ``Domain`` is the
same family of point, line and segment classes rebuilt around another
strategy, e.g. one created from loaded settings:

    exact = build_domain(IntegerCoordinates(bits=32))
    p = exact.point.from_pair(1, 2)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .coordinates import CoordinateStrategy, IntegerCoordinates
from .line import ExactLine, FloatLine, Line
from .point import ExactPoint, FloatPoint, Point
from .segment import ExactSegment, FloatSegment, Segment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Domain:
    """Point, line and segment classes sharing one coordinate strategy."""

    coords: CoordinateStrategy
    point: type[Point]
    line: type[Line]
    segment: type[Segment]


def build_domain(coords: CoordinateStrategy, name: Optional[str] = None) -> Domain:
    """Create primitive classes that store values through ``coords``.

    The new classes subclass the built-in family of the matching domain
    (``ExactPoint`` for integer strategies, ``FloatPoint`` otherwise), so
    points of both interoperate in orderings, lines and hulls.

    Args:
        coords: Strategy attached to the new point class
        name: Class name prefix, derived from the strategy if omitted

    Returns:
        Domain with the new classes
    """
    if isinstance(coords, IntegerCoordinates):
        point_base, line_base, segment_base = ExactPoint, ExactLine, ExactSegment
        name = name or f"Exact{coords.bits}"
    else:
        point_base, line_base, segment_base = FloatPoint, FloatLine, FloatSegment
        name = name or "Float"

    point = type(f"{name}Point", (point_base,), {"__slots__": (), "coords": coords})
    line = type(f"{name}Line", (line_base,), {"__slots__": (), "point_cls": point})
    segment = type(
        f"{name}Segment",
        (segment_base,),
        {"__slots__": (), "point_cls": point, "line_cls": line},
    )
    point.segment_cls = segment

    logger.debug(f"Built {name} domain with {coords!r}")
    return Domain(coords=coords, point=point, line=line, segment=segment)
