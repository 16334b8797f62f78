import json
from datetime import date, datetime

from nfl_stadium_factors.data.stadiums import STADIUM_PROFILES
from nfl_stadium_factors.export.formatters import JSONFormatter, MarkdownFormatter
from nfl_stadium_factors.models.results import StadiumFactorReport
from nfl_stadium_factors.scoring.assembler import build_stadium_result


def make_report(snowy_cold):
    results = (
        build_stadium_result(STADIUM_PROFILES["Lambeau Field"], "Green Bay Packers", "Miami Dolphins", snowy_cold),
        build_stadium_result(STADIUM_PROFILES["Ford Field"], "Detroit Lions", "Chicago Bears", None),
    )
    return StadiumFactorReport(
        stadium_factors=results,
        generated_at=datetime(2025, 12, 14, 9, 30),
        game_date=date(2025, 12, 14),
        data_sources=("NFL Next Gen Stats weather analysis",),
    )


def empty_report():
    return StadiumFactorReport(
        stadium_factors=(),
        generated_at=datetime(2025, 12, 14, 9, 30),
        game_date=date(2025, 12, 14),
        message="No games scheduled for 2025-12-14",
    )


class TestJSONFormatter:

    def test_format_report(self, snowy_cold):
        data = json.loads(JSONFormatter().format_report(make_report(snowy_cold)))

        assert data["date"] == "2025-12-14"
        assert data["last_updated"] == "2025-12-14T09:30:00"
        assert data["message"] is None
        assert [s["stadium"] for s in data["stadium_factors"]] == ["Lambeau Field", "Ford Field"]

        lambeau = data["stadium_factors"][0]
        assert lambeau["passing_factor"] == 0.582
        assert lambeau["weather"] == "15°F, 22 mph wind, snow"
        assert lambeau["weather_details"]["precipitation"] == "snow"
        assert data["stadium_factors"][1]["weather_details"] is None

    def test_degree_sign_is_not_escaped(self, snowy_cold):
        assert "°F" in JSONFormatter().format_report(make_report(snowy_cold))

    def test_compact_output(self, snowy_cold):
        assert "\n" not in JSONFormatter(indent=None).format_report(make_report(snowy_cold))

    def test_sorted_keys(self, snowy_cold):
        text = JSONFormatter(sort_keys=True).format_report(make_report(snowy_cold))

        assert list(json.loads(text)) == ["data_sources", "date", "last_updated", "message", "stadium_factors"]

    def test_empty_report(self):
        data = json.loads(JSONFormatter().format_report(empty_report()))

        assert data["stadium_factors"] == []
        assert data["message"] == "No games scheduled for 2025-12-14"

    def test_write_to_file(self, tmp_path, snowy_cold):
        path = tmp_path / "out" / "factors.json"
        JSONFormatter().write_to_file(make_report(snowy_cold), str(path))

        assert json.loads(path.read_text(encoding="utf-8"))["date"] == "2025-12-14"


class TestMarkdownFormatter:

    def test_format_report(self, snowy_cold):
        md = MarkdownFormatter().format_report(make_report(snowy_cold))

        assert md.startswith("# NFL Stadium Weather Factors (2025-12-14)")
        assert "| 1 | Lambeau Field | Miami Dolphins @ Green Bay Packers | 0.582 |" in md
        assert "| 2 | Ford Field | Chicago Bears @ Detroit Lions |" in md
        assert "Indoor (Dome)" in md
        assert "### Legend" in md
        assert "- NFL Next Gen Stats weather analysis" in md

    def test_without_legend(self, snowy_cold):
        md = MarkdownFormatter(include_legend=False).format_report(make_report(snowy_cold), title="Week 15")

        assert md.startswith("# Week 15")
        assert "### Legend" not in md

    def test_empty_report_shows_message(self):
        md = MarkdownFormatter().format_report(empty_report())

        assert "No games scheduled for 2025-12-14" in md
        assert "| # |" not in md
