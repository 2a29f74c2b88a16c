"""Tests for request assembly from test case templates."""

from __future__ import annotations

import pytest

from reqsweep.config.models import TestCaseConfig
from reqsweep.exceptions import EmptyAxisError, InvalidRangeError, RenderError
from reqsweep.rendering import fill_template, render_case


class TestFillTemplate:
    def test_positional_placeholders(self):
        assert fill_template("<a>%s</a><b>%s</b>", ("1", "2")) == "<a>1</a><b>2</b>"

    def test_too_few_values(self):
        with pytest.raises(RenderError, match="1 value"):
            fill_template("%s %s", ("only",))

    def test_too_many_values(self):
        with pytest.raises(RenderError):
            fill_template("%s", ("a", "b"))


class TestRenderCase:
    def test_no_replace_uses_body_verbatim(self):
        case = TestCaseConfig(
            xml_request_head="<rpc>", xml_request_body="<get/>", xml_request_tail="</rpc>"
        )
        rendered = render_case(case)
        assert rendered.requests == ["<rpc><get/></rpc>"]
        assert rendered.list_entries == 0

    def test_verbatim_body_not_formatted(self):
        case = TestCaseConfig(xml_request_body="100% literal %s")
        assert render_case(case).requests == ["100% literal %s"]

    def test_standalone_requests_without_head_or_tail(self):
        case = TestCaseConfig(
            message="per unit",
            xml_request_body="<u>%s</u><i>%s</i>",
            replace=[["x", "y"], [0, 1, 2]],
        )
        rendered = render_case(case)
        assert rendered.message == "per unit"
        assert rendered.requests == [
            "<u>x</u><i>0</i>",
            "<u>x</u><i>1</i>",
            "<u>x</u><i>2</i>",
            "<u>y</u><i>0</i>",
            "<u>y</u><i>1</i>",
            "<u>y</u><i>2</i>",
        ]
        assert rendered.list_entries == 6
        assert rendered.request_count == 6

    def test_head_and_tail_wrap_single_request(self):
        case = TestCaseConfig(
            xml_request_head="<edit>",
            xml_request_body="<n>%s</n>",
            xml_request_tail="</edit>",
            replace=[[1, 1, 3]],
        )
        rendered = render_case(case)
        assert rendered.requests == ["<edit><n>1</n><n>2</n><n>3</n></edit>"]
        assert rendered.list_entries == 3

    def test_head_only_still_single_request(self):
        case = TestCaseConfig(
            xml_request_head="<h/>", xml_request_body="%s", replace=[["a", "b"]]
        )
        assert render_case(case).requests == ["<h/>ab"]

    def test_empty_template_without_axes(self):
        assert render_case(TestCaseConfig()).requests == [""]

    def test_expected_response_carried(self):
        case = TestCaseConfig(xml_request_body="<x/>", xml_response="<ok/>")
        assert render_case(case).expected_response == "<ok/>"

    def test_setup_and_teardown_rendered(self):
        case = TestCaseConfig(
            xml_request_body="<main/>",
            setup=[{"xml_request_body": "<s>%s</s>", "replace": [["1", "2"]]}],
            teardown=[{"xml_request_body": "<t/>"}],
        )
        rendered = render_case(case)
        assert rendered.setup[0].requests == ["<s>1</s>", "<s>2</s>"]
        assert rendered.teardown[0].requests == ["<t/>"]

    def test_empty_setup_axis_renders_no_requests(self):
        case = TestCaseConfig(
            xml_request_body="<main/>",
            setup=[{"xml_request_body": "%s", "replace": [[]]}, {"xml_request_body": "<s/>"}],
        )
        rendered = render_case(case)
        assert rendered.requests == ["<main/>"]
        assert [s.requests for s in rendered.setup] == [[], ["<s/>"]]

    def test_nested_range_error_names_position(self):
        case = TestCaseConfig(
            xml_request_body="<main/>",
            teardown=[{"message": "drop", "xml_request_body": "%s", "replace": [[1, -1, 5]]}],
        )
        with pytest.raises(RenderError, match=r"teardown case #1 \(drop\)") as exc:
            render_case(case)
        assert isinstance(exc.value.__cause__, InvalidRangeError)

    def test_nested_errors_carry_full_path(self):
        case = TestCaseConfig(
            setup=[{"setup": [{"xml_request_body": "%s %s", "replace": [["a"]]}]}],
        )
        with pytest.raises(RenderError, match=r"setup case #1 \(\): setup case #1 \(\):"):
            render_case(case)

    def test_expansion_errors_propagate(self):
        with pytest.raises(InvalidRangeError):
            render_case(TestCaseConfig(xml_request_body="%s", replace=[[1, 0, 5]]))
        with pytest.raises(EmptyAxisError):
            render_case(TestCaseConfig(xml_request_body="%s", replace=[[]]))

    def test_cap_applied(self):
        case = TestCaseConfig(xml_request_body="%s", replace=[[1, 1, 100]])
        with pytest.raises(InvalidRangeError):
            render_case(case, max_axis_values=50)

    def test_placeholder_mismatch(self):
        case = TestCaseConfig(xml_request_body="%s %s", replace=[["a"]])
        with pytest.raises(RenderError):
            render_case(case)
