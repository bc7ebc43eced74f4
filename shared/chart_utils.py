import altair as alt

from shared.data_access import MajorsSchema, DegreesByFieldSchema
from shared.majors_utils import (COL_YEAR, COL_GRADUATES, COL_EMPLOYMENT_RATE,
                                 COL_GENDER, COL_SHARE)

GENDER_ORDER = [MajorsSchema.COL_MEN, MajorsSchema.COL_WOMEN]
GENDER_COLORS = ["#1f77b4", "#e377c2"]


### Trend -----

def trend_line_chart(trend_df):
    """
    One line per field of study, years on an ordinal axis in their original order.
    """
    field_col = DegreesByFieldSchema.COL_FIELD
    year_order = [str(year) for year in trend_df[COL_YEAR].cat.categories]
    field_order = trend_df[field_col].drop_duplicates().tolist()

    chart_df = trend_df.assign(**{COL_YEAR: trend_df[COL_YEAR].astype(str)})

    return alt.Chart(chart_df).mark_line(point=True).encode(
        x=alt.X(f"{COL_YEAR}:O", sort=year_order, title="Academic Year"),
        y=alt.Y(f"{COL_GRADUATES}:Q", axis=alt.Axis(format=",.0f"), title="Bachelor's Degrees Conferred"),
        color=alt.Color(f"{field_col}:N", sort=field_order, title="Field of Study"),
        tooltip=[alt.Tooltip(f"{field_col}:N", title="Field"),
                 alt.Tooltip(f"{COL_YEAR}:O", title="Year"),
                 alt.Tooltip(f"{COL_GRADUATES}:Q", title="Graduates", format=",.0f")]
    ).properties(
        width=700,
        height=450
    )


### Earnings vs. employment -----

def earnings_bubble_chart(earnings_df):
    """
    One bubble per major category: median earnings vs. employment rate, sized by graduates.
    """
    category_col = MajorsSchema.COL_CATEGORY

    return alt.Chart(earnings_df).mark_circle(opacity=0.7, stroke="white", strokeWidth=1).encode(
        x=alt.X(f"{MajorsSchema.COL_MEDIAN}:Q", axis=alt.Axis(format="$,.0f"),
                scale=alt.Scale(zero=False), title="Mean Median Earnings"),
        y=alt.Y(f"{COL_EMPLOYMENT_RATE}:Q", scale=alt.Scale(zero=False), title="Employment Rate (%)"),
        size=alt.Size(f"{MajorsSchema.COL_TOTAL}:Q", scale=alt.Scale(range=[50, 2500]), title="Graduates"),
        color=alt.Color(f"{category_col}:N", legend=None),
        tooltip=[alt.Tooltip(f"{category_col}:N", title="Category"),
                 alt.Tooltip(f"{MajorsSchema.COL_MEDIAN}:Q", title="Median Earnings", format="$,.0f"),
                 alt.Tooltip(f"{COL_EMPLOYMENT_RATE}:Q", title="Employment Rate (%)", format=".1f"),
                 alt.Tooltip(f"{MajorsSchema.COL_UNEMPLOYMENT_RATE}:Q", title="Unemployment Rate (%)", format=".1f"),
                 alt.Tooltip(f"{MajorsSchema.COL_TOTAL}:Q", title="Graduates", format=",.0f")]
    ).properties(
        width=700,
        height=450
    )


### Gender -----

def gender_bar_chart(gender_long_df, category_order):
    """
    Horizontal grouped bars, one pair (men/women) per category.

    Args:
        gender_long_df (DataFrame): output of majors_utils.gender_long_form
        category_order (list): categories from smallest to largest total
    """
    category_col = MajorsSchema.COL_CATEGORY

    # Vega-Lite draws the first sorted category at the top
    y_order = list(reversed(category_order))

    bars = alt.Chart(gender_long_df).mark_bar().encode(
        x=alt.X(f"{COL_GRADUATES}:Q", axis=alt.Axis(format=",.0f"), title="Graduates"),
        y=alt.Y(f"{category_col}:N", sort=y_order, title=None),
        color=alt.Color(f"{COL_GENDER}:N", sort=GENDER_ORDER,
                        scale=alt.Scale(domain=GENDER_ORDER, range=GENDER_COLORS)),
        yOffset=alt.YOffset(f"{COL_GENDER}:N", sort=GENDER_ORDER),
        tooltip=[alt.Tooltip(f"{category_col}:N", title="Category"),
                 alt.Tooltip(f"{COL_GENDER}:N", title="Gender"),
                 alt.Tooltip(f"{COL_GRADUATES}:Q", title="Graduates", format=",.0f"),
                 alt.Tooltip(f"{COL_SHARE}:Q", title="Share of Category (%)", format=".1f")]
    ).properties(
        width=650,
        height=600
    )

    labels = alt.Chart(gender_long_df).mark_text(
        align="left",
        baseline="middle",
        dx=3
    ).encode(
        x=alt.X(f"{COL_GRADUATES}:Q"),
        y=alt.Y(f"{category_col}:N", sort=y_order),
        yOffset=alt.YOffset(f"{COL_GENDER}:N", sort=GENDER_ORDER),
        text=alt.Text(f"{COL_SHARE}:Q", format=".1f"),
        detail=f"{COL_GENDER}:N"
    )

    return bars + labels
