import datetime

import streamlit as st

from uk_covid19 import (
    ApiConfig,
    AreaType,
    Cov19API,
    CovidApiError,
    Structures,
    ValidationError,
    describe,
    members,
)
from uk_covid19.debug_logger import configure_debug_logging
from uk_covid19.exports import dataframe_to_csv_bytes, dataframe_to_excel_bytes, results_to_dataframe


# Page configuration
st.set_page_config(
    page_title="UK COVID-19 Dashboard Query Builder",
    layout="wide"
)


def build_query(area_type, area_name, date, fields) -> Cov19API:
    """Apply the form selections to a fresh builder"""
    api = Cov19API(config=ApiConfig.from_env())
    api.set_filter("areaType", area_type)
    if area_name:
        api.set_filter("areaName", area_name)
    if date:
        api.set_filter("date", date.isoformat())
    for field in fields:
        api.set_structure(field)
    return api


def main():
    enable_debug = st.sidebar.checkbox("Debug logging", value=False)
    configure_debug_logging(enable_debug)

    st.title("UK COVID-19 Dashboard Query Builder")

    col1, col2 = st.columns([1, 2])

    with col1:
        st.subheader("Filters")
        area_type = st.selectbox(
            "Area type",
            members(AreaType),
            index=members(AreaType).index(AreaType.nation.value),
            help=describe(AreaType)
        )
        area_name = st.text_input("Area name", value="england")
        use_date = st.checkbox("Single date", value=False)
        date = st.date_input("Date", value=datetime.date(2020, 9, 1)) if use_date else None

    with col2:
        st.subheader("Structure")
        fields = st.multiselect(
            "Fields",
            members(Structures),
            default=[Structures.date.value, Structures.areaName.value, Structures.newCasesByPublishDate.value],
            help="See the developers guide for field definitions"
        )
        with st.expander("Field descriptions"):
            st.text(describe(Structures))

    try:
        api = build_query(area_type, area_name, date, fields)
    except ValidationError as e:
        st.error(e.message)
        return

    st.code(api.url, language=None)

    if st.button("Fetch data", type="primary"):
        try:
            with st.spinner("Requesting data..."):
                payload = api.send_request()
            df = results_to_dataframe(payload)
        except CovidApiError as e:
            st.error(e.message)
            return

        if df.empty:
            st.info("No records returned for this query")
            return

        st.dataframe(df, use_container_width=True)

        dl1, dl2 = st.columns(2)
        with dl1:
            st.download_button(
                "Download CSV",
                data=dataframe_to_csv_bytes(df),
                file_name="covid19_data.csv",
                mime="text/csv"
            )
        with dl2:
            st.download_button(
                "Download Excel",
                data=dataframe_to_excel_bytes(df, sheet_name=area_name or area_type),
                file_name="covid19_data.xlsx",
                mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
            )


if __name__ == "__main__":
    main()
