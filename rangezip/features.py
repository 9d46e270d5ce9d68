"""
This module defines all rangezip features using a unified registry system.
The CLI dispatches through it.
"""

from typing import (
    Dict,
    Any,
    Callable,
    List,
    Optional,
    TypeVar,
    Generic,
)
from dataclasses import dataclass
import logging

from rangezip.container import Container
from rangezip.error_msg import RangeZipError, fail
from rangezip.range import Direction, NumberRange, Range
from rangezip.parser import parse_range

logger = logging.getLogger("rangezip.features")

T = TypeVar("T")


class OperationResult(Generic[T]):
    """Wrapper for operation results with success/error handling"""

    def __init__(
        self, success: bool, data: Optional[T] = None, error: Optional[str] = None
    ):
        self.success = success
        self.data = data
        self.error = error

    @classmethod
    def ok(cls, data: Optional[T] = None) -> "OperationResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "OperationResult[T]":
        return cls(success=False, error=error)


@dataclass
class Feature:
    """A named operation exposed on the command line"""

    name: str
    description: str
    handler: Callable[..., OperationResult]


class FeatureRegistry:
    """Registry for all rangezip features"""

    _features: Dict[str, Feature] = {}

    @classmethod
    def register(cls, feature: Feature) -> Feature:
        """Register a new feature"""
        cls._features[feature.name] = feature
        return feature

    @classmethod
    def get_feature(cls, name: str) -> Optional[Feature]:
        """Get a feature by name"""
        return cls._features.get(name)

    @classmethod
    def get_all_features(cls) -> Dict[str, Feature]:
        """Get all registered features"""
        return cls._features.copy()


# ----------------- Feature Handlers -----------------


def handle_version(**kwargs) -> OperationResult[Dict[str, str]]:
    """Handle version request"""
    from rangezip.version import get_version

    return OperationResult.ok({"version": get_version()})


def handle_collect(
    expression: str,
    backward: bool = False,
    offset: int = 0,
    limit: Optional[int] = None,
    **kwargs,
) -> OperationResult[Dict[str, Any]]:
    """Materialize a range expression, optionally one page of it"""
    if offset < 0:
        return OperationResult.fail("offset must be non-negative")
    direction = Direction.BACKWARD if backward else Direction.FORWARD
    try:
        range_ = parse_range(expression, direction)
        sequence = range_.sequence()
        if limit is None:
            values = list(sequence)[offset:]
        else:
            values = sequence.page(offset, limit)
    except (RangeZipError, ValueError) as e:
        return OperationResult.fail(str(e))

    logger.debug("Collected %d values from %r", len(values), expression)
    return OperationResult.ok(
        {"values": values, "offset": offset, "total": sequence.total_size}
    )


def handle_bounds(expression: str, **kwargs) -> OperationResult[Dict[str, Any]]:
    """Report the first and last effective values of a range expression"""
    try:
        range_ = parse_range(expression)
        bounds = list(range_.bounds())
    except (RangeZipError, ValueError) as e:
        return OperationResult.fail(str(e))
    return OperationResult.ok({"bounds": bounds})


def handle_zip(
    expressions: Optional[List[str]] = None,
    values: Optional[List[Any]] = None,
    **kwargs,
) -> OperationResult[Dict[str, Any]]:
    """Zip range expressions and scalar values to the longest source"""
    expressions = expressions or []
    values = values or []
    try:
        if not expressions and not values:
            fail("zip requires at least one expression or value")
        container = Container()
        container.add_sources(*(parse_range(expression) for expression in expressions))
        container.add_sources(*values)
        rows = container.zip().value
    except (RangeZipError, ValueError) as e:
        return OperationResult.fail(str(e))
    return OperationResult.ok({"rows": rows})


def demo_scenarios() -> List[Dict[str, Any]]:
    """Build the demonstration scenarios shown by the ``demo`` command"""
    scenarios: List[Dict[str, Any]] = []

    ascending = NumberRange(1, 10)
    scenarios.append(
        {"title": "Ascending number range", "bounds": list(ascending.bounds()), "value": ascending.collect()}
    )

    mixed = (
        Container()
        .add_number_range(-10, -1)
        .add_number_range(1, 10)
        .add_number_range(11, 20)
        .add_number_range(21, 30)
        .add_sources(3612, 4323, "874342", "test")
    )
    scenarios.append({"title": "Ranges zipped with scalars", "value": mixed.zip().value})

    negative = NumberRange(-10, -1)
    scenarios.append(
        {"title": "Negative number range", "bounds": list(negative.bounds()), "value": negative.collect()}
    )

    words = (
        Container()
        .add_sources("This is a test".split(), "This is another test".split())
        .zip()
        .value
    )
    scenarios.append({"title": "Zipped word lists", "value": words})

    chain = (
        Range()
        .append_step(1)
        .append_step(10)
        .append_stop(-17)
        .append_stop(2, [0, 1, 34231])
        .append_stop(2, NumberRange(1, 10))
        .append_step(21)
        .append_step(30)
    )
    scenarios.append(
        {"title": "Mixed stops and steps", "bounds": list(chain.bounds()), "value": chain.collect()}
    )

    opposed = Container().add_number_range(1, 100).add_number_range(100, 1).zip()
    scenarios.append({"title": "Opposed number ranges", "value": opposed.value})

    return scenarios


def handle_demo(**kwargs) -> OperationResult[List[Dict[str, Any]]]:
    """Run the demonstration scenarios"""
    return OperationResult.ok(demo_scenarios())


FeatureRegistry.register(
    Feature(name="version", description="Show the rangezip version", handler=handle_version)
)
FeatureRegistry.register(
    Feature(name="collect", description="Materialize a range expression", handler=handle_collect)
)
FeatureRegistry.register(
    Feature(name="bounds", description="Show the bounds of a range expression", handler=handle_bounds)
)
FeatureRegistry.register(
    Feature(name="zip", description="Zip ranges and values to the longest", handler=handle_zip)
)
FeatureRegistry.register(
    Feature(name="demo", description="Run the demonstration scenarios", handler=handle_demo)
)
