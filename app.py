"""Streamlit front-end for the asset tracker."""
from __future__ import annotations

from datetime import date

import pandas as pd
import plotly.express as px
import streamlit as st

from asset_tracker import BuildDashboardUseCase, DashboardContext, JsonLedgerStore, build_timeline
from asset_tracker.config import SETTINGS
from asset_tracker.application.dto import DashboardRequest, DashboardSnapshot
from asset_tracker.domain.errors import InvalidRecordError
from asset_tracker.domain.models import AssetCategory, Contributor, Metric, Period
from asset_tracker.domain.timeline import available_years
from asset_tracker.presentation.report import (
    allocation_rows,
    format_currency,
    format_growth,
    records_to_dataframe,
    render_csv,
    render_html,
    timeline_to_dataframe,
)


st.set_page_config(page_title="Asset Tracker", layout="wide")
st.title("Asset Tracker")

PERIOD_LABELS = {
    Period.ONE_MONTH: "1 month",
    Period.THREE_MONTHS: "3 months",
    Period.SIX_MONTHS: "6 months",
    Period.ONE_YEAR: "1 year",
    Period.THREE_YEARS: "3 years",
    Period.ALL: "All",
}
WINDOW_LABELS = {1: "1M", 3: "3M", 6: "6M", 12: "1Y", 36: "3Y"}


@st.cache_resource
def get_store() -> JsonLedgerStore:
    return JsonLedgerStore(seed_if_missing=True)


store = get_store()

if "editing_asset" not in st.session_state:
    st.session_state["editing_asset"] = None


def render_dashboard(snapshot: DashboardSnapshot) -> None:
    col1, col2, col3 = st.columns(3)
    col1.metric(f"Total assets ({SETTINGS.home_currency})", format_currency(snapshot.total_assets))
    col2.metric("Contributed by A_Hui", format_currency(snapshot.contributions[Contributor.A_HUI]))
    col3.metric("Contributed by A_Ru", format_currency(snapshot.contributions[Contributor.A_RU]))

    st.subheader("Allocation")
    slices = pd.DataFrame(allocation_rows(snapshot.allocation))
    if slices.empty:
        st.info("No asset records yet.")
    else:
        fig = px.pie(slices, names="label", values="value", hole=0.4)
        st.plotly_chart(fig, use_container_width=True)

    st.subheader("History")
    annual = snapshot.annual
    if annual.has_growth():
        st.write(
            f"**{annual.year} growth:** {format_growth(annual.growth)} "
            f"({format_currency(annual.start_value)} → {format_currency(annual.end_value)})"
        )
    else:
        st.write(f"**{annual.year} growth:** not enough data")

    frame = timeline_to_dataframe(snapshot.visible_timeline)
    if frame.empty:
        st.info("No records in the selected period.")
    else:
        if snapshot.metric is Metric.TOTAL:
            columns = ["total"]
        else:
            columns = ["investment", AssetCategory.FOREIGN_EQUITY.value, AssetCategory.LOCAL_EQUITY.value]
        fig = px.line(frame, x="date", y=columns, markers=True)
        fig.update_layout(yaxis_title=SETTINGS.home_currency, xaxis_title=None)
        st.plotly_chart(fig, use_container_width=True)

    badges = [(months, growth) for months, growth in snapshot.trailing.items() if growth is not None]
    if badges:
        for column, (months, growth) in zip(st.columns(len(badges)), badges):
            column.metric(f"Last {WINDOW_LABELS.get(months, f'{months}M')}", format_growth(growth, digits=1))

    st.download_button(
        "Download timeline CSV",
        data=render_csv(snapshot.timeline),
        file_name="timeline.csv",
        mime="text/csv",
    )
    st.download_button(
        "Download timeline HTML",
        data=render_html(snapshot.timeline).encode("utf-8"),
        file_name="timeline.html",
        mime="text/html",
    )


def render_assets() -> None:
    editing_id = st.session_state["editing_asset"]
    editing = store.get_asset(editing_id) if editing_id else None
    st.subheader("Edit asset record" if editing else "New asset snapshot")

    categories = list(AssetCategory)
    with st.form("asset_form", clear_on_submit=True):
        record_date = st.date_input("Date", value=editing.date if editing else date.today())
        category = st.selectbox(
            "Category",
            categories,
            index=categories.index(editing.category) if editing else 0,
            format_func=lambda c: c.label,
        )
        amount = st.number_input(
            "Amount (native currency)",
            min_value=0.0,
            value=float(editing.amount) if editing else 0.0,
        )
        fx_rate = st.number_input(
            "Exchange rate (foreign categories only)",
            min_value=0.0,
            value=float(editing.fx_rate if editing and editing.category.is_foreign else SETTINGS.default_fx_rate),
        )
        note = st.text_area("Note", value=editing.note if editing else "")
        submitted = st.form_submit_button("Update record" if editing else "Save record")

    if submitted:
        try:
            if editing:
                store.update_asset(editing.id, record_date, category, str(amount), str(fx_rate), note)
                st.session_state["editing_asset"] = None
            else:
                store.add_asset(record_date, category, str(amount), str(fx_rate), note)
        except InvalidRecordError as exc:
            st.error(str(exc))
        else:
            st.rerun()

    if editing and st.button("Cancel edit"):
        st.session_state["editing_asset"] = None
        st.rerun()

    st.subheader("Recorded snapshots")
    history = store.list_asset_history()
    if not history:
        st.info("No records yet.")
        return
    st.dataframe(records_to_dataframe(history), hide_index=True, use_container_width=True)
    selected = st.selectbox(
        "Record",
        [record.id for record in history],
        format_func=lambda rid: next(
            f"{r.date} {r.category.label} {format_currency(r.value)}" for r in history if r.id == rid
        ),
    )
    col_edit, col_delete = st.columns(2)
    if col_edit.button("Edit selected"):
        st.session_state["editing_asset"] = selected
        st.rerun()
    if col_delete.button("Delete selected"):
        if st.session_state["editing_asset"] == selected:
            st.session_state["editing_asset"] = None
        store.delete_asset(selected)
        st.rerun()


def render_contributions() -> None:
    st.subheader("New contribution")
    with st.form("contribution_form", clear_on_submit=True):
        record_date = st.date_input("Date", value=date.today())
        person = st.selectbox("Contributor", list(Contributor), format_func=lambda p: p.value)
        amount = st.number_input(f"Amount ({SETTINGS.home_currency})", min_value=0.0)
        submitted = st.form_submit_button("Save contribution")
    if submitted:
        try:
            store.add_contribution(person, record_date, str(amount))
        except InvalidRecordError as exc:
            st.error(str(exc))
        else:
            st.rerun()

    records = sorted(store.list_contribution_records(), key=lambda r: (r.date, r.id), reverse=True)
    if not records:
        st.info("No contributions yet.")
        return
    st.dataframe(
        pd.DataFrame(
            [{"id": r.id, "date": r.date, "person": r.person.value, "amount": float(r.amount)} for r in records]
        ),
        hide_index=True,
        use_container_width=True,
    )
    selected = st.selectbox("Contribution", [r.id for r in records])
    if st.button("Delete contribution"):
        store.delete_contribution(selected)
        st.rerun()


tabs = st.tabs(["Dashboard", "Assets", "Contributions"])
with tabs[0]:
    col_metric, col_period, col_year = st.columns(3)
    metric = col_metric.radio(
        "Show",
        list(Metric),
        format_func=lambda m: "Total assets" if m is Metric.TOTAL else "Investments (stocks)",
        horizontal=True,
    )
    period = col_period.selectbox("Period", list(Period), index=len(Period) - 1, format_func=PERIOD_LABELS.get)
    years = available_years(build_timeline(store.list_asset_records()))
    year = col_year.selectbox("Year", years, index=years.index(date.today().year))
    snapshot = BuildDashboardUseCase(DashboardContext(repository=store)).execute(
        DashboardRequest(period=period, metric=metric, year=year)
    )
    render_dashboard(snapshot)
with tabs[1]:
    render_assets()
with tabs[2]:
    render_contributions()
