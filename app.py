"""
All-on-X ROI Calculator - Streamlit UI
A thin shell around the engine: sidebar inputs in, cards/charts/exports out
"""

import logging

import streamlit as st

from config.settings import load_settings
from config.logging_config import configure_logging
from engine.compute import compute
from engine.projections import volume_projection
from components.inputs_panel import render_inputs_panel, render_break_even
from components.dashboard_tab import render_dashboard_tab
from components.projections_tab import render_projections_tab
from components.footer import render_footer
from utils.export import (
    build_csv_bytes, build_xlsx_bytes, build_pdf_bytes, export_filename, safe_export
)

logger = logging.getLogger(__name__)

settings = load_settings()
configure_logging(settings.log_level)

st.set_page_config(
    page_title=settings.title,
    page_icon="🦷",
    layout="wide"
)


def load_logo(path):
    """Read the branding logo; a missing file only disables the logo"""
    if not path:
        return None
    try:
        with open(path, "rb") as fh:
            return fh.read()
    except OSError as e:
        logger.warning("Could not read logo %s: %s", path, e)
        return None


def render_exports(inputs, res):
    if not (settings.csv_export or settings.pdf_export):
        return
    st.markdown("#### ⬇️ Download Full Audit")
    col1, col2, col3 = st.columns(3)

    if settings.csv_export:
        with col1:
            csv_bytes = safe_export(build_csv_bytes, inputs, res)
            if csv_bytes is None:
                st.error("CSV export failed; see logs for details.")
            else:
                st.download_button(
                    "📄 Summary (CSV)",
                    data=csv_bytes,
                    file_name=export_filename("ROI_Summary", "csv"),
                    mime="text/csv"
                )
        with col2:
            xlsx_bytes = safe_export(build_xlsx_bytes, inputs, res, volume_projection(inputs))
            if xlsx_bytes is None:
                st.error("Excel export failed; see logs for details.")
            else:
                st.download_button(
                    "📊 Audit (Excel)",
                    data=xlsx_bytes,
                    file_name=export_filename("ROI_Audit", "xlsx"),
                    mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
                )

    if settings.pdf_export:
        with col3:
            snapshot = st.file_uploader("Dashboard snapshot (PNG, optional)", type=["png"])
            pdf_bytes = safe_export(
                build_pdf_bytes, inputs, res,
                title=settings.title,
                snapshot_png=snapshot.getvalue() if snapshot else None,
                logo_png=load_logo(settings.logo_path),
                logo_url=settings.brand_url,
            )
            if pdf_bytes is None:
                st.error("PDF export failed; see logs for details.")
            else:
                st.download_button(
                    "📑 Summary (PDF)",
                    data=pdf_bytes,
                    file_name=export_filename("ROI_Summary", "pdf"),
                    mime="application/pdf"
                )


def main():
    st.title(f"📈 {settings.title}")

    # SINGLE call to engine per rerun
    inputs = render_inputs_panel(settings)
    res = compute(inputs)
    render_break_even(res)

    tab1, tab2 = st.tabs(["📊 ROI Dashboard", "📈 Monthly Projections"])
    with tab1:
        render_dashboard_tab(inputs, res, settings)
        render_exports(inputs, res)
    with tab2:
        render_projections_tab(inputs, res)

    if settings.show_footer:
        render_footer(inputs, res)


if __name__ == "__main__":
    main()
