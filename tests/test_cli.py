"""Tests for the tallykit command-line interface."""
from __future__ import annotations

import json

from typer.testing import CliRunner

from tallykit.cli import app

runner = CliRunner()


def test_sum_command():
    result = runner.invoke(app, ["sum", "10", "20", "30", "40"])
    assert result.exit_code == 0
    assert "sum(10, 20, 30, 40) = 100" in result.output


def test_sum_command_without_operands():
    result = runner.invoke(app, ["sum"])
    assert result.exit_code == 0
    assert "sum() = 0" in result.output


def test_sum_command_json():
    result = runner.invoke(app, ["sum", "--json", "1", "2.5"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload == {"operation": "sum", "operands": [1, 2.5], "count": 2, "result": 3.5}


def test_json_from_environment():
    result = runner.invoke(app, ["add", "2", "3"], env={"TALLYKIT_JSON": "1"})
    assert result.exit_code == 0
    assert json.loads(result.stdout)["result"] == 5


def test_fractions_rendered_as_strings():
    result = runner.invoke(app, ["sum", "--json", "1/3", "1/6"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["result"] == "1/2"


def test_invalid_operand_exits_with_error():
    result = runner.invoke(app, ["sum", "1", "abc"])
    assert result.exit_code == 1
    assert "Invalid input" in result.output


def test_sub_command_with_negative_operand():
    result = runner.invoke(app, ["sub", "--", "5", "-3"])
    assert result.exit_code == 0
    assert "sub(5, -3) = 8" in result.output


def test_combine_command():
    result = runner.invoke(app, ["combine", "10", "20"])
    assert result.exit_code == 0
    assert "callback received 30" in result.output
    assert "combine(10, 20) = 30" in result.output


def test_combine_command_json():
    result = runner.invoke(app, ["combine", "--json", "10", "20"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["result"] == 30
    assert payload["callback_calls"] == 1
