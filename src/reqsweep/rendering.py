"""Request assembly from a test case template and its expanded tuples."""

from __future__ import annotations

from loguru import logger
from pydantic import BaseModel, Field

from reqsweep.config.models import TestCaseConfig
from reqsweep.constants import DEFAULT_MAX_AXIS_VALUES
from reqsweep.exceptions import EmptyAxisError, ExpansionError, RenderError
from reqsweep.expansion import NO_EXPANSION, generate, normalize


class RenderedCase(BaseModel):
    """Requests produced from one test case."""

    message: str = ""
    requests: list[str] = Field(default_factory=list)
    """Payloads to send, in order."""

    list_entries: int = 0
    """Number of tuples substituted into the body (0 when not expanded)."""

    expected_response: str = ""
    setup: list[RenderedCase] = Field(default_factory=list)
    teardown: list[RenderedCase] = Field(default_factory=list)

    @property
    def request_count(self) -> int:
        return len(self.requests)


def fill_template(template: str, values: tuple[str, ...]) -> str:
    """Substitute one tuple into a ``%s``-style body template.

    Raises:
        RenderError: Placeholder count does not match the tuple length, or the
            template holds an unsupported conversion.
    """
    try:
        return template % values
    except (TypeError, ValueError) as e:
        raise RenderError(
            f"Cannot fill template with {len(values)} value(s) {values!r}: {e}"
        ) from e


def render_case(
    case: TestCaseConfig,
    *,
    max_axis_values: int = DEFAULT_MAX_AXIS_VALUES,
) -> RenderedCase:
    """Build the request payloads for a test case.

    The head opens a single request buffer and the tail closes it. Without
    replace axes the body is copied verbatim. With axes, each tuple fills the
    body once: if the case has neither head nor tail every filled body is sent
    as its own request, otherwise all of them go into the shared buffer.

    Setup and teardown cases are rendered the same way. One of them with an
    empty axis renders to no requests without affecting its parent.

    Raises:
        ExpansionError: Normalization or product generation failed.
        RenderError: A tuple did not fit the body template, or a setup or
            teardown case failed to render.
    """
    tuples = generate(normalize(case.replace, max_axis_values=max_axis_values))

    buffer: list[str] = []
    separate: list[str] = []
    list_entries = 0
    standalone = not case.xml_request_head and not case.xml_request_tail

    if case.xml_request_head:
        buffer.append(case.xml_request_head)

    if tuples is NO_EXPANSION:
        if case.xml_request_body:
            buffer.append(case.xml_request_body)
    else:
        for values in tuples:
            list_entries += 1
            body = fill_template(case.xml_request_body, values)
            if standalone:
                separate.append(body)
            else:
                buffer.append(body)

    if case.xml_request_tail:
        buffer.append(case.xml_request_tail)

    requests = separate if separate else ["".join(buffer)]

    return RenderedCase(
        message=case.message,
        requests=requests,
        list_entries=list_entries,
        expected_response=case.xml_response,
        setup=_render_nested(case.setup, "setup", max_axis_values),
        teardown=_render_nested(case.teardown, "teardown", max_axis_values),
    )


def _render_nested(
    cases: list[TestCaseConfig], role: str, max_axis_values: int
) -> list[RenderedCase]:
    rendered: list[RenderedCase] = []
    for position, nested in enumerate(cases):
        label = f"{role} case #{position + 1}"
        try:
            rendered.append(render_case(nested, max_axis_values=max_axis_values))
        except EmptyAxisError as e:
            logger.warning("{} ({}) produces no requests: {}", label, nested.message, e)
            rendered.append(
                RenderedCase(message=nested.message, expected_response=nested.xml_response)
            )
        except (ExpansionError, RenderError) as e:
            raise RenderError(f"{label} ({nested.message}): {e}") from e
    return rendered
