"""
rangezip command line interface
"""

import json
import logging
import time
from typing import Any, List, Optional

import typer

from rangezip.features import FeatureRegistry, Feature, OperationResult
from rangezip.version import get_version

# Module-level logger
logger = logging.getLogger("rangezip.main")


# Create CLI app with Typer
app = typer.Typer(
    name="rangezip",
    help="rangezip - materialize range expressions and zip them",
    add_completion=False,
)


# ----------------- Helper Functions -----------------


class ElapsedMsFormatter(logging.Formatter):
    """Formatter that shows milliseconds since program start, right-aligned for up to 9999 seconds."""
    def __init__(self, fmt=None, datefmt=None, *args, **kwargs):
        super().__init__(fmt, datefmt, *args, **kwargs)
        self.start_time = time.monotonic()
        self.width = 8  # Enough for '9999000ms'

    def format(self, record):
        elapsed_ms = int((time.monotonic() - self.start_time) * 1000)
        if elapsed_ms < 10**7:
            elapsed = f"[{elapsed_ms:>{self.width}}ms]"
        else:
            elapsed = f"[{elapsed_ms}ms]"
        record.elapsed = elapsed
        return super().format(record)


VERBOSE_LEVEL = 15  # Between INFO (20) and DEBUG (10)
logging.addLevelName(VERBOSE_LEVEL, "VERBOSE")


def setup_logging(debug: bool = False, verbose: bool = False) -> None:
    """Set up logging configuration"""
    if debug:
        log_level = logging.DEBUG
    elif verbose:
        log_level = VERBOSE_LEVEL
    else:
        log_level = logging.INFO
    formatter = ElapsedMsFormatter('%(elapsed)s %(message)s')
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers = []  # Remove any existing handlers
    root.addHandler(handler)
    root.setLevel(log_level)


def _feature_or_exit(feature_name: str) -> Feature:
    feature = FeatureRegistry.get_feature(feature_name)
    if not feature:
        logger.error("Unknown feature: %s", feature_name)
        raise typer.Exit(code=1)
    return feature


def _handle_cli_result(feature_name: str, result: OperationResult) -> Any:
    if not result.success:
        logger.error("%s failed: %s", feature_name, result.error or "Unknown error")
        raise typer.Exit(code=1)
    logger.log(VERBOSE_LEVEL, "%s completed", feature_name)
    return result.data


def _run_feature(feature_name: str, **kwargs: Any) -> Any:
    feature = _feature_or_exit(feature_name)
    return _handle_cli_result(feature_name, feature.handler(**kwargs))


def _coerce_value(raw: str) -> Any:
    try:
        return int(raw)
    except ValueError:
        return raw


def _print_json(data: Any) -> None:
    print(json.dumps(data, default=str))


# ----------------- CLI Commands -----------------


@app.command()
def version() -> None:
    """Show the rangezip version"""
    setup_logging(False)
    data = _run_feature("version")
    logger.info("rangezip version: %s", data.get("version", "unknown"))


@app.command()
def collect(
    expression: str = typer.Argument(..., help="Range expression, e.g. '1..10, -17'"),
    backward: bool = typer.Option(False, "--backward", help="Scan the chain from its last point"),
    offset: int = typer.Option(0, "--offset", min=0, help="Skip this many values"),
    limit: Optional[int] = typer.Option(None, "--limit", min=0, help="Return at most this many values"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging (between info and debug)"),
) -> None:
    """Print the values of a range expression as JSON"""
    setup_logging(debug, verbose)
    data = _run_feature(
        "collect", expression=expression, backward=backward, offset=offset, limit=limit
    )
    _print_json(data["values"])


@app.command()
def bounds(
    expression: str = typer.Argument(..., help="Range expression"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
) -> None:
    """Print the first and last effective values of a range expression"""
    setup_logging(debug)
    data = _run_feature("bounds", expression=expression)
    _print_json(data["bounds"])


@app.command("zip")
def zip_command(
    expressions: Optional[List[str]] = typer.Argument(None, help="Range expressions to zip"),
    value: Optional[List[str]] = typer.Option(
        None, "--value", "-v", help="Scalar source; integers are parsed as numbers"
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging (between info and debug)"),
) -> None:
    """Zip range expressions and values, padding with null"""
    setup_logging(debug, verbose)
    values = [_coerce_value(raw) for raw in value or []]
    data = _run_feature("zip", expressions=list(expressions or []), values=values)
    for row in data["rows"]:
        _print_json(row)


@app.command()
def demo() -> None:
    """Run the demonstration scenarios"""
    setup_logging(False)
    scenarios = _run_feature("demo")
    for scenario in scenarios:
        print(scenario["title"])
        print("=" * len(scenario["title"]))
        if "bounds" in scenario:
            _print_json(scenario["bounds"])
        _print_json(scenario["value"])


if __name__ == "__main__":
    app()
