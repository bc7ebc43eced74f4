# Import python packages
import streamlit as st

from shared import data_access, majors_utils, ethnicity_utils, chart_utils, display_utils
from shared.data_access import MajorsSchema, DegreesByFieldSchema
from shared.references import ReferenceList


### PREP ----
st.set_page_config(page_title="What Are College Students Majoring In? | College Majors Report",
                   layout="wide")

references = ReferenceList()
references.add_source("fivethirtyeight-grads",
                      "https://github.com/fivethirtyeight/data/tree/master/college-majors",
                      "FiveThirtyEight, college-majors dataset (American Community Survey 2010-2012 Public Use Microdata Series)")
references.add_source("nces-digest-322",
                      "https://nces.ed.gov/programs/digest/d21/tables/dt21_322.10.asp",
                      "NCES Digest of Education Statistics, Table 322.10: Bachelor's degrees conferred by field of study")
references.add_source("nces-stem-ethnicity",
                      "https://nces.ed.gov/programs/digest/d21/tables/dt21_318.45.asp",
                      "NCES Digest of Education Statistics, Table 318.45: STEM degrees conferred by race/ethnicity")


### DATA PULL ------------------

majors_df = data_access.load_recent_grads()
degrees_by_field_df = data_access.load_degrees_by_field()
stem_ethnicity_df = data_access.load_stem_ethnicity()

data_access.check_major_records(majors_df)


### MANIPULATIONS ###

trend_df = majors_utils.build_trend_table(degrees_by_field_df)
field_ranking_df = majors_utils.rank_fields_by_total(majors_utils.degrees_long_form(degrees_by_field_df))

earnings_df = majors_utils.summarize_earnings_by_category(majors_df)

gender_summary_df = majors_utils.summarize_gender_by_category(majors_df)
gender_long_df = majors_utils.gender_long_form(gender_summary_df)

ethnicity_proportions_df = ethnicity_utils.compute_ethnicity_proportions(stem_ethnicity_df)
ethnicity_table_df, ethnicity_flags_df = ethnicity_utils.build_ethnicity_table(ethnicity_proportions_df)


# Numbers quoted in the prose
top_field = field_ranking_df.iloc[0]
first_year, last_year = trend_df[majors_utils.COL_YEAR].cat.categories[[0, -1]]

top_earning = earnings_df.sort_values(MajorsSchema.COL_MEDIAN, ascending=False).iloc[0]
lowest_earning = earnings_df.sort_values(MajorsSchema.COL_MEDIAN).iloc[0]

most_women = gender_summary_df.sort_values(MajorsSchema.COL_SHARE_WOMEN, ascending=False).iloc[0]
most_men = gender_summary_df.sort_values(majors_utils.COL_SHARE_MEN, ascending=False).iloc[0]

first_label, last_label = ethnicity_table_df.index[0], ethnicity_table_df.index[-1]
ethnicity_change = ethnicity_table_df.iloc[-1] - ethnicity_table_df.iloc[0]
fastest_growing = ethnicity_change.idxmax()


# ----------------------------------------------------------
# Header ---------------------------------------------------
# ----------------------------------------------------------

st.title("What Are College Students Majoring In?")
st.caption("College Majors Report")

st.markdown(f"""
Every year, a couple million students in the U.S. walk across a stage with a bachelor's degree. Which fields do they
pick, what do those fields pay, and who is studying them? Below, we look at three public datasets: five decades of degrees
conferred by field{references.cite("nces-digest-322")}, earnings and employment for recent graduates by major{references.cite("fivethirtyeight-grads")},
and STEM degrees by race and ethnicity{references.cite("nces-stem-ethnicity")}.
""", unsafe_allow_html=True)


# ----------------------------------------------------------
# Trend ----------------------------------------------------
# ----------------------------------------------------------

st.divider()
st.header("The Most Popular Fields, Over Time")

st.markdown(f"""
Across every year in the data, **{top_field[DegreesByFieldSchema.COL_FIELD]}** has awarded the most degrees
(**{top_field[majors_utils.COL_CUMULATIVE_GRADUATES]:,.0f}** in total across the years shown). The chart shows the ten
fields with the most graduates from {first_year} to {last_year}.{references.add_footnote("Fields are ranked by the sum of degrees conferred over all years shown. Years where a field was not reported count as zero. The 'Other and not classified' row is excluded.")}
""", unsafe_allow_html=True)

st.markdown(f"###### Bachelor's Degrees Conferred: Top {majors_utils.TOP_N_FIELDS} Fields")
tab1, tab2 = st.tabs(["Graph", "Data"])
with tab1:
    st.altair_chart(chart_utils.trend_line_chart(trend_df), use_container_width=True)
with tab2:
    display_utils.display_streamlit_table(field_ranking_df)
st.caption(f'Source: {references.source_link("nces-digest-322")}')


# ----------------------------------------------------------
# Earnings -------------------------------------------------
# ----------------------------------------------------------

st.divider()
st.header("Earnings and Employment by Major Category")

st.markdown(f"""
Graduates in **{top_earning[MajorsSchema.COL_CATEGORY]}** majors earn the most, with a mean median salary of
**\\${top_earning[MajorsSchema.COL_MEDIAN]:,.0f}**. At the other end, **{lowest_earning[MajorsSchema.COL_CATEGORY]}**
majors average **\\${lowest_earning[MajorsSchema.COL_MEDIAN]:,.0f}**. Bubble size is the number of graduates in the category.{references.add_footnote("Employment rate = employed / (employed + unemployed). The category value is the simple average of its majors' rates, not weighted by major size.")}
""", unsafe_allow_html=True)

st.markdown("###### Median Earnings vs. Employment Rate")
tab1, tab2 = st.tabs(["Graph", "Data"])
with tab1:
    st.altair_chart(chart_utils.earnings_bubble_chart(earnings_df), use_container_width=True)
with tab2:
    display_utils.display_streamlit_table(earnings_df.set_index(MajorsSchema.COL_CATEGORY))
st.caption(f'Source: {references.source_link("fivethirtyeight-grads")}')


# ----------------------------------------------------------
# Gender ---------------------------------------------------
# ----------------------------------------------------------

st.divider()
st.header("Who Studies What: Gender")

st.markdown(f"""
Some categories are far from balanced. **{most_women[MajorsSchema.COL_CATEGORY]}** graduates are
**{most_women[MajorsSchema.COL_SHARE_WOMEN]:.1f}%** women, while **{most_men[MajorsSchema.COL_CATEGORY]}** graduates
are **{most_men[majors_utils.COL_SHARE_MEN]:.1f}%** men. Labels on the bars show each gender's share of the category.
""", unsafe_allow_html=True)

st.markdown("###### Graduates by Major Category and Gender")
tab1, tab2 = st.tabs(["Graph", "Data"])
with tab1:
    category_order = gender_summary_df[MajorsSchema.COL_CATEGORY].tolist()
    st.altair_chart(chart_utils.gender_bar_chart(gender_long_df, category_order), use_container_width=True)
with tab2:
    display_utils.display_streamlit_table(gender_summary_df.set_index(MajorsSchema.COL_CATEGORY))
st.caption(f'Source: {references.source_link("fivethirtyeight-grads")}')


# ----------------------------------------------------------
# Ethnicity ------------------------------------------------
# ----------------------------------------------------------

st.divider()
st.header("Who Studies What: STEM Degrees by Race and Ethnicity")

st.markdown(f"""
Between {first_label} and {last_label}, the share of STEM degrees going to **{fastest_growing}** students grew the most,
by **{ethnicity_change[fastest_growing] * 100:.1f}** percentage points. Each cell below is that group's share of all STEM
bachelor's degrees in the year. Green cells went up from the year before; red cells went down.{references.add_footnote("Shares are computed against the year's total STEM degrees, which also includes students of unknown race/ethnicity, so a row does not add up to 100%.")}
""", unsafe_allow_html=True)

st.markdown("###### Share of STEM Bachelor's Degrees by Race/Ethnicity")
st.dataframe(display_utils.style_change_table(ethnicity_table_df, ethnicity_flags_df))
st.caption(f'Source: {references.source_link("nces-stem-ethnicity")}')


# ----------------------------------------------------------
# Takeaways ------------------------------------------------
# ----------------------------------------------------------

st.divider()
st.subheader("Takeaways")

st.markdown(f"""
- **{top_field[DegreesByFieldSchema.COL_FIELD]}** has awarded the most bachelor's degrees across {first_year} to {last_year}.
- Categories that pay the most ({top_earning[MajorsSchema.COL_CATEGORY]}) also tend to have the fewest women.
- STEM graduates are becoming more diverse year over year, led by {fastest_growing} students.
""")

references.spill()
