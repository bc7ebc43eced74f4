# Import python packages
import logging

import streamlit as st
from datetime import datetime

logging.basicConfig(level=logging.INFO,
                    format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# Define the pages
college_majors = st.Page("widgets/college_majors.py", title="What Are College Students Majoring In?", default=True)
data_sources = st.Page("widgets/data_sources.py", title="Data Sources")

# Set up navigation
pg = st.navigation(
    {
        "Report": [college_majors],
        "About": [data_sources]
    }
)
pg.run()



st.divider()

# Footer
current_year = datetime.now().year
st.markdown(
    f"""
    <div style="text-align: center; color: gray; font-size: 0.8em;">
     &copy; {current_year} College Majors Report | Data: FiveThirtyEight, NCES Digest of Education Statistics
    </div>
""", unsafe_allow_html=True
)
