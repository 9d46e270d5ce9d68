from __future__ import annotations

import json
import logging

import pytest
import typer
from typer.testing import CliRunner

from rangezip import main as main_mod
from rangezip.features import OperationResult


runner = CliRunner()


@pytest.mark.unit
def test_feature_or_exit_unknown():
    with pytest.raises(typer.Exit):
        main_mod._feature_or_exit("does-not-exist")


@pytest.mark.unit
def test_handle_cli_result():
    with pytest.raises(typer.Exit):
        main_mod._handle_cli_result("zip", OperationResult.fail("boom"))
    assert main_mod._handle_cli_result("zip", OperationResult.ok({"rows": []})) == {"rows": []}


@pytest.mark.unit
def test_setup_logging_levels():
    main_mod.setup_logging(debug=True)
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, main_mod.ElapsedMsFormatter)

    main_mod.setup_logging(verbose=True)
    assert root.level == main_mod.VERBOSE_LEVEL
    assert logging.getLevelName(main_mod.VERBOSE_LEVEL) == "VERBOSE"

    main_mod.setup_logging()
    assert root.level == logging.INFO


@pytest.mark.unit
def test_elapsed_formatter():
    formatter = main_mod.ElapsedMsFormatter("%(elapsed)s %(message)s")
    record = logging.LogRecord("rangezip", logging.INFO, __file__, 1, "hello", None, None)
    rendered = formatter.format(record)
    assert rendered.startswith("[")
    assert rendered.endswith("ms] hello")


@pytest.mark.integration
def test_collect_command():
    result = runner.invoke(main_mod.app, ["collect", "1..5"])
    assert result.exit_code == 0
    assert json.loads(result.stdout.strip().splitlines()[-1]) == [1, 2, 3, 4]

    paged = runner.invoke(main_mod.app, ["collect", "10..0", "--offset", "2", "--limit", "3"])
    assert paged.exit_code == 0
    assert json.loads(paged.stdout.strip().splitlines()[-1]) == [8, 7, 6]

    backward = runner.invoke(main_mod.app, ["collect", "1, 2, 3", "--backward"])
    assert json.loads(backward.stdout.strip().splitlines()[-1]) == [3, 2, 1]


@pytest.mark.integration
def test_collect_command_rejects_bad_expression():
    result = runner.invoke(main_mod.app, ["collect", "1.."])
    assert result.exit_code == 1


@pytest.mark.integration
def test_bounds_command():
    result = runner.invoke(main_mod.app, ["bounds", "2@(1..10), 30"])
    assert result.exit_code == 0
    assert json.loads(result.stdout.strip().splitlines()[-1]) == [3, 30]

    too_long = runner.invoke(main_mod.app, ["bounds", "5@(1, 0..2000000), 3"])
    assert too_long.exit_code == 1


@pytest.mark.integration
def test_zip_command():
    result = runner.invoke(main_mod.app, ["zip", "1..4", "10..12", "--value", "7", "-v", "x"])
    assert result.exit_code == 0
    rows = [json.loads(line) for line in result.stdout.strip().splitlines()]
    assert rows == [
        [1, 10, 7, "x"],
        [2, 11, None, None],
        [3, None, None, None],
    ]

    empty = runner.invoke(main_mod.app, ["zip"])
    assert empty.exit_code == 1


@pytest.mark.integration
def test_demo_and_version_commands():
    demo = runner.invoke(main_mod.app, ["demo"])
    assert demo.exit_code == 0
    assert "Ascending number range" in demo.stdout
    assert "[1, 2, 3, 4, 5, 6, 7, 8, 9]" in demo.stdout

    version = runner.invoke(main_mod.app, ["version"])
    assert version.exit_code == 0
