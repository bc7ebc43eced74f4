import streamlit as st
import pandas as pd

from shared import data_access
from shared.data_access import MajorsSchema, DegreesByFieldSchema, StemEthnicitySchema

# PREP ----
st.set_page_config(page_title="Data Sources | College Majors Report",
                   layout="wide")

st.title(f"Data Sources")

st.write("""
Everything in the report comes from three flat files, read once when the page loads. Nothing is written back.
The files are small enough that each chart is a handful of pandas steps: reshape, group, aggregate, divide.
         """)

st.divider()

st.subheader("Datasets")

majors_df = data_access.load_recent_grads()
degrees_by_field_df = data_access.load_degrees_by_field()
stem_ethnicity_df = data_access.load_stem_ethnicity()

data_sources = {
    "Recent grads by major":
        {
            "Description": "Earnings, employment and gender of recent graduates, one row per detailed major",
            "Source": "FiveThirtyEight, from the American Community Survey 2010-2012 PUMS",
            "File": MajorsSchema.FILEPATH,
            "Rows": majors_df.shape[0],
            "Columns": majors_df.shape[1],
        },
    "Degrees conferred by field":
        {
            "Description": "Bachelor's degrees conferred, one row per field of study, one column per academic year",
            "Source": "NCES Digest of Education Statistics, Table 322.10",
            "File": DegreesByFieldSchema.FILEPATH,
            "Rows": degrees_by_field_df.shape[0],
            "Columns": degrees_by_field_df.shape[1],
        },
    "STEM degrees by race/ethnicity":
        {
            "Description": "STEM bachelor's degrees per academic year, total and by race/ethnicity",
            "Source": "NCES Digest of Education Statistics, Table 318.45",
            "File": StemEthnicitySchema.FILEPATH,
            "Rows": stem_ethnicity_df.shape[0],
            "Columns": stem_ethnicity_df.shape[1],
        },
}

data_sources_df = pd.DataFrame(data_sources)
st.table(data_sources_df.T)

st.subheader("Processing")

data_processing = {
    "Recent grads by major":
        {
            "Processing": "Employment rate per major, then averages/sums by major category. Gender counts summed by category.",
            "Notes": "Majors missing a needed field are left out of that chart only. Majors with more employed + unemployed than graduates, or with nobody in the labor force, are left out of the employment chart."},
    "Degrees conferred by field":
        {
            "Processing": "Drop 'Other and not classified', reshape to one row per field and year, parse thousands separators, keep the top 10 fields by total.",
            "Notes": "Blank years count as zero in the ranking."},
    "STEM degrees by race/ethnicity":
        {
            "Processing": "Parse the starting year, divide each group by the year's total, compare each share to the year before.",
            "Notes": "The total includes unknown race/ethnicity, so shares add up to less than 100%."},
}

data_processing_df = pd.DataFrame(data_processing)
st.table(data_processing_df.T)

st.subheader("Data Quality Checks")

issues_df = data_access.check_major_records(majors_df)
if issues_df.empty:
    st.write("All majors pass the checks (men + women = total, employed + unemployed <= total).")
else:
    st.write(f"{issues_df.shape[0]} majors fail a check:")
    st.dataframe(issues_df[[MajorsSchema.COL_MAJOR, MajorsSchema.COL_TOTAL, "issue"]])
