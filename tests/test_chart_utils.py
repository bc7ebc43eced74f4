"""Tests for the Altair chart builders (checked through their Vega-Lite specs)."""

from shared.chart_utils import (
    GENDER_ORDER,
    earnings_bubble_chart,
    gender_bar_chart,
    trend_line_chart,
)
from shared.majors_utils import (
    build_trend_table,
    gender_long_form,
    summarize_earnings_by_category,
    summarize_gender_by_category,
)


def mark_type(spec):
    mark = spec["mark"]
    return mark if isinstance(mark, str) else mark["type"]


def tooltip_fields(encoding):
    return [tooltip["field"] for tooltip in encoding["tooltip"]]


class TestTrendLineChart:
    """Multi-series line chart."""

    def test_line_per_field(self, degrees_wide_df) -> None:
        spec = trend_line_chart(build_trend_table(degrees_wide_df)).to_dict()
        assert mark_type(spec) == "line"
        assert spec["encoding"]["color"]["field"] == "Field of study"

    def test_years_in_file_order(self, degrees_wide_df) -> None:
        spec = trend_line_chart(build_trend_table(degrees_wide_df)).to_dict()
        assert spec["encoding"]["x"]["field"] == "Year"
        assert spec["encoding"]["x"]["sort"] == ["1970-71", "1980-81", "1990-91"]

    def test_tooltip_formats_counts(self, degrees_wide_df) -> None:
        spec = trend_line_chart(build_trend_table(degrees_wide_df)).to_dict()
        graduates_tooltip = spec["encoding"]["tooltip"][-1]
        assert graduates_tooltip["field"] == "Graduates"
        assert graduates_tooltip["format"] == ",.0f"


class TestEarningsBubbleChart:
    """Bubble scatter of earnings vs. employment."""

    def test_encodings(self, majors_df) -> None:
        spec = earnings_bubble_chart(summarize_earnings_by_category(majors_df)).to_dict()
        assert mark_type(spec) == "circle"
        assert spec["encoding"]["x"]["field"] == "Median"
        assert spec["encoding"]["y"]["field"] == "Employment_rate"
        assert spec["encoding"]["size"]["field"] == "Total"

    def test_tooltip_shows_category(self, majors_df) -> None:
        spec = earnings_bubble_chart(summarize_earnings_by_category(majors_df)).to_dict()
        assert "Major_category" in tooltip_fields(spec["encoding"])


class TestGenderBarChart:
    """Horizontal grouped bars with share labels."""

    def test_bars_and_labels(self, majors_df) -> None:
        summary = summarize_gender_by_category(majors_df)
        chart = gender_bar_chart(gender_long_form(summary), summary["Major_category"].tolist())
        spec = chart.to_dict()
        assert len(spec["layer"]) == 2
        assert mark_type(spec["layer"][0]) == "bar"
        assert mark_type(spec["layer"][1]) == "text"

    def test_largest_category_on_top(self, majors_df) -> None:
        summary = summarize_gender_by_category(majors_df)
        chart = gender_bar_chart(gender_long_form(summary), summary["Major_category"].tolist())
        bars = chart.to_dict()["layer"][0]
        assert bars["encoding"]["y"]["sort"] == ["Engineering", "Education", "Arts"]

    def test_grouped_by_gender(self, majors_df) -> None:
        summary = summarize_gender_by_category(majors_df)
        chart = gender_bar_chart(gender_long_form(summary), summary["Major_category"].tolist())
        bars = chart.to_dict()["layer"][0]
        assert bars["encoding"]["yOffset"]["field"] == "Gender"
        assert bars["encoding"]["yOffset"]["sort"] == GENDER_ORDER
        assert "Share" in tooltip_fields(bars["encoding"])
