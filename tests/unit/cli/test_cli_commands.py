"""Tests for the reqsweep CLI."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from reqsweep.cli import app

runner = CliRunner()


class TestMainApp:
    def test_help_displays(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "Combinatorial request template expansion" in result.stdout

    def test_version_displays(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "reqsweep v" in result.stdout


class TestPlanCommand:
    def test_plan_table(self, write_suite):
        path = write_suite(
            {"test": [{"message": "units", "xml_request_body": "%s", "replace": [["a", "b"]]}]}
        )
        result = runner.invoke(app, ["--quiet", "plan", str(path)])
        assert result.exit_code == 0
        assert "units" in result.stdout
        assert "2 requests" in result.stdout

    def test_plan_json(self, write_suite):
        path = write_suite(
            {"test": [{"message": "ids", "xml_request_body": "%s", "replace": [[1, 1, 4]]}]}
        )
        result = runner.invoke(app, ["--quiet", "--json", "plan", str(path)])
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload[0]["total_requests"] == 4
        assert payload[0]["cases"][0]["list_entries"] == 4

    def test_plan_with_skipped_case_exits_1(self, write_suite, sdbus_suite):
        path = write_suite(sdbus_suite)
        result = runner.invoke(app, ["--quiet", "plan", str(path)])
        assert result.exit_code == 1
        assert "Broken range" in result.stdout

    def test_plan_missing_file_exits_2(self, tmp_path):
        result = runner.invoke(app, ["--quiet", "plan", str(tmp_path / "missing.yaml")])
        assert result.exit_code == 2

    def test_plan_rejects_zero_cap(self, write_suite):
        path = write_suite({"test": []})
        result = runner.invoke(app, ["--quiet", "plan", str(path), "--max-axis-values", "0"])
        assert result.exit_code == 2

    def test_plan_disabled_suite(self, write_suite):
        path = write_suite({"login": {"enabled": False}, "test": [{"xml_request_body": "x"}]})
        result = runner.invoke(app, ["--quiet", "plan", str(path)])
        assert result.exit_code == 0
        assert "disabled" in result.stdout


class TestExpandCommand:
    def test_expand_prints_requests(self, write_suite):
        path = write_suite(
            {"test": [{"xml_request_body": "<u>%s</u>", "replace": [["x", "y"]]}]}
        )
        result = runner.invoke(app, ["--quiet", "expand", str(path)])
        assert result.exit_code == 0
        assert "<u>x</u>" in result.stdout
        assert "<u>y</u>" in result.stdout

    def test_expand_case_and_limit(self, write_suite, sdbus_suite):
        path = write_suite(sdbus_suite)
        result = runner.invoke(
            app, ["--quiet", "--json", "expand", str(path), "--case", "1", "--limit", "2"]
        )
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert len(payload) == 1
        assert payload[0]["requests"] == [
            "<unit>a.service</unit><idx>0</idx>",
            "<unit>a.service</unit><idx>1</idx>",
        ]
        assert payload[0]["list_entries"] == 6

    def test_expand_broken_case_exits_1(self, write_suite, sdbus_suite):
        path = write_suite(sdbus_suite)
        result = runner.invoke(app, ["--quiet", "expand", str(path), "--case", "3"])
        assert result.exit_code == 1

    def test_expand_empty_axis_not_fatal(self, write_suite):
        path = write_suite({"test": [{"message": "none", "xml_request_body": "%s", "replace": [[]]}]})
        result = runner.invoke(app, ["--quiet", "expand", str(path)])
        assert result.exit_code == 0
        assert "no requests" in result.stdout

    def test_expand_case_out_of_range_exits_2(self, write_suite, sdbus_suite):
        path = write_suite(sdbus_suite)
        result = runner.invoke(app, ["--quiet", "expand", str(path), "--case", "4"])
        assert result.exit_code == 2
        assert "Invalid --case" in result.stdout

    def test_expand_case_on_disabled_suite_exits_2(self, write_suite):
        path = write_suite({"login": {"enabled": False}, "test": [{"xml_request_body": "x"}]})
        result = runner.invoke(app, ["--quiet", "expand", str(path), "--case", "1"])
        assert result.exit_code == 2

    def test_expand_empty_setup_axis_keeps_parent(self, write_suite):
        path = write_suite(
            {
                "test": [
                    {
                        "xml_request_body": "<u>%s</u>",
                        "replace": [["a", "b"]],
                        "setup": [{"xml_request_body": "%s", "replace": [[]]}],
                    }
                ]
            }
        )
        result = runner.invoke(app, ["--quiet", "expand", str(path)])
        assert result.exit_code == 0
        assert "(2 requests, 2 list entries)" in result.stdout
        assert "<u>b</u>" in result.stdout

    def test_expand_bad_setup_range_exits_1(self, write_suite):
        path = write_suite(
            {
                "test": [
                    {
                        "xml_request_body": "<x/>",
                        "setup": [{"xml_request_body": "%s", "replace": [[1, 0, 2]]}],
                    }
                ]
            }
        )
        result = runner.invoke(app, ["--quiet", "expand", str(path)])
        assert result.exit_code == 1
        assert "setup case #1" in result.stdout

    def test_plan_lists_skipped_record(self, write_suite, sdbus_suite):
        path = write_suite(sdbus_suite)
        result = runner.invoke(app, ["--quiet", "plan", str(path)])
        assert "Skipped #3 Broken range:" in result.stdout
        assert "step must be positive" in result.stdout
