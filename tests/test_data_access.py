"""Tests for loading and checking the bundled datasets, and the pipelines run on them."""

import pandas as pd
import pytest

from shared import data_access
from shared.data_access import DegreesByFieldSchema, MajorsSchema
from shared.ethnicity_utils import DECREASE, INCREASE, build_ethnicity_table, compute_ethnicity_proportions
from shared.majors_utils import (
    COL_YEAR,
    UNCATEGORIZED_FIELD,
    build_trend_table,
    summarize_earnings_by_category,
    summarize_gender_by_category,
)


@pytest.fixture(scope="module")
def recent_grads():
    return data_access.load_recent_grads()


@pytest.fixture(scope="module")
def degrees_by_field():
    return data_access.load_degrees_by_field()


@pytest.fixture(scope="module")
def stem_ethnicity():
    return data_access.load_stem_ethnicity()


class TestLoaders:
    """Bundled CSVs load with the expected layout."""

    def test_recent_grads_shape(self, recent_grads) -> None:
        assert recent_grads.shape == (32, 21)
        assert list(recent_grads.columns) == MajorsSchema.ALL_COLUMNS

    def test_degrees_read_as_text(self, degrees_by_field) -> None:
        assert degrees_by_field.loc[0, "X1970-71"] == "12,672"
        assert UNCATEGORIZED_FIELD in degrees_by_field[DegreesByFieldSchema.COL_FIELD].tolist()

    def test_stem_ethnicity_years(self, stem_ethnicity) -> None:
        assert stem_ethnicity["Year"].tolist()[0] == "2011-2012"
        assert len(stem_ethnicity) == 9


class TestRequireColumns:
    """Column validation."""

    def test_missing_column_named(self) -> None:
        df = pd.DataFrame({"Major": ["A"]})
        with pytest.raises(ValueError, match="Total"):
            data_access.require_columns(df, ["Major", "Total"], "Majors dataset")

    def test_passes_through(self) -> None:
        df = pd.DataFrame({"Major": ["A"], "Total": [1]})
        assert data_access.require_columns(df, ["Major", "Total"], "Majors dataset") is df


class TestCheckMajorRecords:
    """Bookkeeping checks on majors."""

    def test_bundled_data_clean(self, recent_grads) -> None:
        assert data_access.check_major_records(recent_grads).empty

    def test_flags_bad_rows(self) -> None:
        df = pd.DataFrame({
            "Major": ["OK", "GENDER", "LABOR", "BOTH"],
            "Total": [100, 100, 100, 100],
            "Men": [40, 10, 40, 10],
            "Women": [60, 20, 60, 20],
            "Employed": [80, 80, 95, 95],
            "Unemployed": [5, 5, 10, 10],
        })
        issues = data_access.check_major_records(df)
        assert issues["Major"].tolist() == ["GENDER", "LABOR", "BOTH"]
        assert issues["issue"].tolist() == [
            "Men + Women != Total",
            "Employed + Unemployed > Total",
            "Men + Women != Total; Employed + Unemployed > Total",
        ]


class TestBundledPipelines:
    """Headline results on the bundled sample data."""

    def test_trend_top_ten(self, degrees_by_field) -> None:
        trend = build_trend_table(degrees_by_field)
        fields = trend[DegreesByFieldSchema.COL_FIELD].drop_duplicates().tolist()
        assert len(fields) == 10
        assert fields[0] == "Business"
        assert fields[-1] == "English language and literature/letters"
        assert UNCATEGORIZED_FIELD not in fields
        assert len(trend) == 10 * len(trend[COL_YEAR].cat.categories)

    def test_engineering_earns_most(self, recent_grads) -> None:
        earnings = summarize_earnings_by_category(recent_grads)
        top = earnings.sort_values(MajorsSchema.COL_MEDIAN, ascending=False).iloc[0]
        assert top[MajorsSchema.COL_CATEGORY] == "Engineering"
        assert earnings["Employment_rate"].between(0, 100).all()

    def test_gender_shares_complement(self, recent_grads) -> None:
        gender = summarize_gender_by_category(recent_grads)
        assert (gender["ShareWomen"] + gender["ShareMen"]).round(6).eq(100).all()
        assert gender["Total"].is_monotonic_increasing

    def test_ethnicity_trends(self, stem_ethnicity) -> None:
        proportions = compute_ethnicity_proportions(stem_ethnicity)
        table, flags = build_ethnicity_table(proportions)
        assert (table.sum(axis=1) <= 1).all()
        assert flags["Hispanic"].iloc[1:].eq(INCREASE).all()
        assert flags["White"].iloc[1:].eq(DECREASE).all()
        assert pd.isna(flags.iloc[0]).all()
