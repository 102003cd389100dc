"""DPR Directory Dashboard."""

import atexit
import sys
from pathlib import Path

# Add project root to path (for streamlit which runs this file directly)
_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(_root))

import plotly.graph_objects as go  # noqa: E402
import streamlit as st  # noqa: E402
from loguru import logger  # noqa: E402

from app.container import container  # noqa: E402
from settings.logging import setup_logging  # noqa: E402
from web.api import export, health, members, stats  # noqa: E402


@st.cache_resource
def _startup():
    """Open the shared connection once per server process."""
    setup_logging(to_file=False)
    container.init()
    atexit.register(container.close)
    logger.info("Dashboard started")
    return True


st.set_page_config(page_title="DPR Directory", page_icon="🏛️", layout="wide")

_startup()

SORT_LABELS = {
    "Name": "name",
    "Faction": "faction",
    "Position": "position",
    "Age": "age",
    "Birthplace": "birthplace",
    "Province": "province",
    "Recently added": "created_at",
}


@st.cache_data(ttl=600, show_spinner=False)
def get_filter_options():
    """Get filter options via views."""
    return members.get_filter_options().model_dump()


@st.cache_data(ttl=600, show_spinner="Computing statistics...")
def get_stats_data():
    """Get statistics report via views."""
    return stats.get_stats().model_dump()


def bar_chart(data: list, title: str = "", horizontal: bool = False) -> go.Figure:
    labels = [d["label"] for d in data]
    counts = [d["count"] for d in data]
    bar = (
        go.Bar(x=counts, y=labels, orientation="h", text=counts, textposition="outside")
        if horizontal
        else go.Bar(x=labels, y=counts, text=counts, textposition="outside")
    )
    return go.Figure(bar).update_layout(
        title=title,
        margin=dict(t=40, b=40, l=40 if not horizontal else 160, r=20),
        height=max(350, len(data) * 28) if horizontal else 350,
    )


def pie_chart(data: list, title: str = "") -> go.Figure:
    return go.Figure(
        go.Pie(
            labels=[d["label"] for d in data],
            values=[d["count"] for d in data],
            hole=0.4,
            textposition="inside",
            textinfo="label+percent",
        )
    ).update_layout(title=title, showlegend=False, margin=dict(t=40, b=20, l=20, r=20), height=350)


def search_tab():
    """Member search tab."""
    options = get_filter_options()

    query = st.text_input("Search", placeholder="Name, faction, position, birthplace, province, address")

    with st.expander("Filters"):
        cols = st.columns(3)
        faction = cols[0].selectbox("Faction", [""] + options["faction"])
        province = cols[1].selectbox("Province", [""] + options["province"])
        position = cols[2].selectbox("Position", [""] + options["position"])

        cols = st.columns(4)
        min_age = cols[0].number_input("Min age", min_value=0, max_value=120, value=None)
        max_age = cols[1].number_input("Max age", min_value=0, max_value=120, value=None)
        chair_only = cols[2].checkbox("Chairs only")
        vice_chair_only = cols[3].checkbox("Vice-chairs only")

    cols = st.columns(4)
    sort_label = cols[0].selectbox("Sort by", list(SORT_LABELS))
    sort_order = cols[1].selectbox("Order", ["ASC", "DESC"])
    limit = cols[2].selectbox("Per page", [25, 50, 100])
    page = cols[3].number_input("Page", min_value=1, value=1)

    resp = members.search_members(
        {
            "query": query,
            "page": page,
            "limit": limit,
            "sort_by": SORT_LABELS[sort_label],
            "sort_order": sort_order,
            "filters": {
                "faction": faction or None,
                "province": province or None,
                "position": position or None,
                "min_age": min_age,
                "max_age": max_age,
                "chair_only": chair_only,
                "vice_chair_only": vice_chair_only,
            },
        }
    )

    p = resp.pagination
    st.caption(f"{resp.total} members • page {p.current_page} of {max(p.total_pages, 1)}")

    if not resp.results:
        st.info("No members match this search.")
        return

    st.dataframe(
        [r.model_dump(include={"id", "name", "faction", "position", "province", "birthplace", "age"}) for r in resp.results],
        width="stretch",
        hide_index=True,
    )


def stats_tab():
    """Statistics tab."""
    data = get_stats_data()

    cols = st.columns(4)
    age = data["age"] or {}
    cols[0].metric("Members", data["total"] if data["total"] is not None else "–")
    cols[1].metric("Average age", age.get("avg_age") or "–")
    cols[2].metric("Youngest", age.get("min_age") or "–")
    cols[3].metric("Oldest", age.get("max_age") or "–")

    col1, col2 = st.columns(2)
    with col1:
        if data["by_faction"]:
            st.plotly_chart(pie_chart(data["by_faction"], "By faction"), width="stretch")
    with col2:
        if data["leadership"]:
            st.plotly_chart(bar_chart(data["leadership"], "Leadership"), width="stretch")

    col1, col2 = st.columns(2)
    with col1:
        if data["by_age"]:
            st.plotly_chart(bar_chart(data["by_age"], "Age groups"), width="stretch")
    with col2:
        if data["by_gender"]:
            st.plotly_chart(pie_chart(data["by_gender"], "Gender (estimated from names)"), width="stretch")

    if data["by_province"]:
        st.plotly_chart(bar_chart(data["by_province"], "Top provinces", horizontal=True), width="stretch")
    if data["by_position"]:
        st.plotly_chart(bar_chart(data["by_position"], "Top positions", horizontal=True), width="stretch")

    if data["recent"]:
        st.subheader("Recently added")
        st.dataframe(data["recent"], width="stretch", hide_index=True)


def main():
    st.title("🏛️ DPR Directory")
    st.markdown("*Members of the Indonesian House of Representatives*")

    tab1, tab2 = st.tabs(["🔎 Members", "📊 Statistics"])

    with tab1:
        search_tab()

    with tab2:
        stats_tab()

    # Sidebar
    status = health.get_health()
    st.sidebar.markdown(f"**Database:** {status.database}")
    st.sidebar.markdown(f"**Environment:** {status.environment}")

    st.sidebar.markdown("---")
    if st.sidebar.button("Prepare CSV export"):
        csv = export.export_csv()
        st.sidebar.download_button(
            f"Download {csv.rows} members",
            data=csv.content,
            file_name=csv.filename,
            mime=csv.content_type,
        )


if __name__ == "__main__":
    main()
