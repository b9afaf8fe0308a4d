"""Tests for format_result mode selection."""

import json

from menagerie.output.formatters import OutputSettings, format_result
from menagerie.services.result import ServiceResult

RESULT = ServiceResult(
    ok=True,
    op="collect_records",
    data={"count": 1, "records": [{"name": "Rex", "species": "Dog", "age": 3}]},
)


class TestFormatResult:
    def test_default_is_rich(self) -> None:
        output = format_result(RESULT)
        assert output.startswith("OK")
        assert "Rex" in output

    def test_json(self) -> None:
        output = format_result(RESULT, settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["data"]["records"][0]["name"] == "Rex"

    def test_quiet(self) -> None:
        output = format_result(RESULT, settings=OutputSettings(quiet=True))
        assert output == "OK: collect_records"

    def test_json_wins_over_quiet(self) -> None:
        output = format_result(RESULT, settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["op"] == "collect_records"
