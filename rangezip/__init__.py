"""
rangezip - lazy stop/step ranges and zip-longest aggregation
"""

from rangezip.config import RangeSettings, current_settings, load_settings, settings_scope
from rangezip.container import Container
from rangezip.error_msg import RangeSyntaxError, RangeZipError, RunLengthError
from rangezip.parser import parse_range
from rangezip.point import Point, PointKind
from rangezip.range import Direction, NumberRange, Range
from rangezip.sequence import SequenceValue
from rangezip.version import __version__

__all__ = [
    "Container",
    "Direction",
    "NumberRange",
    "Point",
    "PointKind",
    "Range",
    "RangeSettings",
    "RangeSyntaxError",
    "RangeZipError",
    "RunLengthError",
    "SequenceValue",
    "__version__",
    "current_settings",
    "load_settings",
    "parse_range",
    "settings_scope",
]
