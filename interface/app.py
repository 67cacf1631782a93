# interface/app.py
"""
Stock QR - Main Application

Streamlit interface with two pages:
- Create: import an Excel/CSV stock table, review the expanded stickers, export
- Scan:   upload photographed stickers, reconcile them into grouped totals
"""

from typing import List

import pandas as pd
import streamlit as st

from config import REPORT_FILE_NAME, STICKER_LIST_FILE_NAME, STICKERS_PER_PAGE
from domain.records import StockRecord
from extraction import import_stock_records, is_placeholder, placeholder_record
from fields import parse_quantity, to_text
from qr import ScanSession, encode, scan_images
from writers import paginate, write_scan_report, write_stock_records

EDIT_COLUMNS = ["model_name", "lot", "erp", "quantity"]
XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _records_to_df(records: List[StockRecord]) -> pd.DataFrame:
    df = pd.DataFrame(
        [{"model_name": r.model_name, "lot": r.lot, "erp": r.erp, "quantity": r.quantity} for r in records],
        columns=EDIT_COLUMNS,
    )
    df["quantity"] = pd.to_numeric(df["quantity"], errors="coerce").astype("Int64")
    return df


def _records_from_df(df: pd.DataFrame) -> List[StockRecord]:
    """Rows edited by hand: blank quantity means 0, junk means 1 (same as imports)."""
    records = [
        StockRecord(
            model_name=to_text(row.get("model_name")),
            lot=to_text(row.get("lot")),
            erp=to_text(row.get("erp")),
            quantity=parse_quantity(row.get("quantity")),
        )
        for row in df.to_dict(orient="records")
    ]
    return records or [placeholder_record()]


# ============================================================================
# PAGE CONFIG
# ============================================================================
st.set_page_config(
    page_title="Stock QR",
    page_icon="📦",
    layout="wide",
    initial_sidebar_state="expanded",
)

# ============================================================================
# SESSION STATE INITIALIZATION
# ============================================================================
if "records" not in st.session_state:
    st.session_state.records = [placeholder_record()]
if "scan_session" not in st.session_state:
    st.session_state.scan_session = ScanSession()
if "editor_version" not in st.session_state:
    st.session_state.editor_version = 0

page = st.sidebar.radio("Page", ["Create QR stickers", "Scan QR stickers"])

# ============================================================================
# CREATE PAGE
# ============================================================================
if page == "Create QR stickers":
    st.title("Create QR stickers")

    uploaded_table = st.file_uploader("Stock table (Excel or CSV)", type=["xlsx", "xlsm", "csv"])
    col_import, col_clear = st.columns(2)

    if col_import.button("Import", type="primary", disabled=uploaded_table is None):
        try:
            st.session_state.records = import_stock_records(uploaded_table.name, uploaded_table.getvalue())
            st.session_state.editor_version += 1
        except ValueError as e:
            st.error(f"❌ Error: {e}")

    if col_clear.button("Clear rows"):
        st.session_state.records = [placeholder_record()]
        st.session_state.editor_version += 1

    edited_df = st.data_editor(
        _records_to_df(st.session_state.records),
        num_rows="dynamic",
        key=f"records_editor_{st.session_state.editor_version}",
    )
    records = _records_from_df(edited_df)

    pages = paginate(records)
    real = [r for r in records if not is_placeholder(r)]
    st.caption(f"{len(real)} stickers on {len(pages)} page(s), {STICKERS_PER_PAGE} per page")

    for sticker_page in pages:
        with st.expander(f"Page {sticker_page.number}: stickers {sticker_page.first_index}-{sticker_page.last_index}"):
            for grid_row in sticker_page.grid():
                cols = st.columns(len(grid_row))
                for col, slot in zip(cols, grid_row):
                    if slot.is_blank:
                        col.caption("blank")
                    else:
                        col.markdown(f"**{slot.index}**  \n" + "  \n".join(slot.lines))
                        col.code(slot.payload, language="json")

    if real:
        st.download_button(
            label="📥 Download sticker list",
            data=write_stock_records(real),
            file_name=STICKER_LIST_FILE_NAME,
            mime=XLSX_MIME,
        )
        st.download_button(
            label="📥 Download QR payloads",
            data="\n".join(encode(r) for r in real).encode("utf-8"),
            file_name="qr_payloads.txt",
            mime="text/plain",
        )

# ============================================================================
# SCAN PAGE
# ============================================================================
else:
    st.title("Stock counting")
    session: ScanSession = st.session_state.scan_session

    uploaded_images = st.file_uploader(
        "QR sticker photos (multiple files allowed)",
        type=["png", "jpg", "jpeg", "bmp", "gif", "webp"],
        accept_multiple_files=True,
    )

    if st.button("Scan", type="primary", disabled=not uploaded_images):
        with st.spinner("🔄 Reading QR codes..."):
            batch = scan_images((f.name, f.getvalue()) for f in uploaded_images)
        session.apply(batch)

    if session.errors:
        st.error("Errors:\n\n" + "\n".join(f"- {e}" for e in session.errors))

    if not session.observations:
        st.info("No scanned data yet")
    else:
        scanned_df = pd.DataFrame(
            [
                {"#": i, "file": o.source_file, "model_name": o.record.model_name, "lot": o.record.lot, "quantity": o.record.quantity}
                for i, o in enumerate(session.observations, start=1)
            ]
        )
        st.subheader("Scanned")
        st.dataframe(scanned_df, hide_index=True)

        totals = session.totals()
        totals_df = pd.DataFrame(
            [
                {"model_name": t.model_name, "lot": t.lot, "total_quantity": t.total_quantity, "files": ", ".join(t.files)}
                for t in totals
            ]
        )
        st.subheader("Totals by model and lot")
        st.dataframe(totals_df, hide_index=True)

        st.download_button(
            label="📥 Export Excel",
            data=write_scan_report(session.observations, totals=totals),
            file_name=REPORT_FILE_NAME,
            mime=XLSX_MIME,
            type="primary",
        )

    if st.button("Clear scanned data", disabled=not session.observations):
        session.clear()
        st.rerun()
