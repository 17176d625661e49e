"""CSV, Excel and PDF export of an inputs/results snapshot."""

import io
import logging
from datetime import date

import pandas as pd
from reportlab.graphics import renderPDF
from reportlab.graphics.charts.piecharts import Pie
from reportlab.graphics.shapes import Drawing, Circle, String
from reportlab.lib import colors
from reportlab.lib.pagesizes import LETTER
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from engine.models import ROIInputs, ROIResults
from engine.composition import build_composition
from engine.metrics import total_cost_percent, clinical_cost_percent
from utils.formatting import format_currency, format_percent, format_multiplier

logger = logging.getLogger(__name__)

# (label, attribute, kind)
INPUT_ROWS = [
    ("Treatment Price per Arch", "average_fee", "currency"),
    ("Lab Cost per Arch", "lab_cost", "currency"),
    ("Implants & Surgical Supplies", "supplies_cost", "currency"),
    ("Outside Provider Fee", "provider_comp_percent", "percent"),
    ("TC Commission", "tc_commission_percent", "percent"),
    ("Marketing Cost per Arch", "marketing_cost_per_arch", "currency"),
    ("Monthly Arches", "arches_per_month", "number"),
    ("Financing Usage Rate", "financing_usage_percent", "percent"),
    ("Avg. % Financed", "financing_amt_percent", "percent"),
    ("Lender Fee", "financing_fee_percent", "percent"),
    ("Cost per Lead", "cost_per_lead", "currency"),
    ("Lead Conversion Rate", "conversion_rate", "percent"),
    ("Lead Flow Model", "use_lead_flow", "flag"),
]

RESULT_ROWS = [
    ("Effective Marketing Cost per Arch", "marketing_cost_per_arch", "currency"),
    ("Provider Compensation", "provider_comp", "currency"),
    ("TC Commission Amount", "tc_commission", "currency"),
    ("Financing Fees", "financing_fees", "currency"),
    ("Total Cost per Arch", "total_cost_per_arch", "currency"),
    ("Profit per Arch", "profit_per_arch", "currency"),
    ("Profit Margin", "profit_margin", "percent"),
    ("Return on Marketing", "return_on_marketing", "multiplier"),
    ("Monthly Revenue", "monthly_revenue", "currency"),
    ("Monthly Marketing Spend", "monthly_marketing_spend", "currency"),
    ("Monthly Profit", "monthly_profit", "currency"),
    ("Break-Even Arches", "break_even_arches", "decimal"),
    ("Monthly Leads Required", "leads_required", "decimal"),
]


def format_value(val, kind: str) -> str:
    if kind == "currency":
        return format_currency(val)
    if kind == "percent":
        return format_percent(val)
    if kind == "multiplier":
        return format_multiplier(val)
    if kind == "flag":
        return "On" if val else "Off"
    if kind == "decimal":
        return f"{val:,.1f}"
    return f"{val:,.0f}"


def summary_table(inputs: ROIInputs, res: ROIResults) -> pd.DataFrame:
    """Label/value table of every input followed by every result"""
    rows = []
    for label, attr, kind in INPUT_ROWS:
        rows.append({"Section": "Input", "Metric": label,
                     "Value": format_value(getattr(inputs, attr), kind)})
    for label, attr, kind in RESULT_ROWS:
        rows.append({"Section": "Result", "Metric": label,
                     "Value": format_value(getattr(res, attr), kind)})
    rows.append({"Section": "Result", "Metric": "Total Cost %",
                 "Value": format_percent(total_cost_percent(inputs, res))})
    rows.append({"Section": "Result", "Metric": "Clinical Cost %",
                 "Value": format_percent(clinical_cost_percent(inputs))})
    return pd.DataFrame(rows)


def export_filename(prefix: str, ext: str, today: date = None) -> str:
    today = today or date.today()
    return f"{prefix}_{today.strftime('%Y%m%d')}.{ext}"


def build_csv_bytes(inputs: ROIInputs, res: ROIResults) -> bytes:
    df = summary_table(inputs, res)[["Metric", "Value"]]
    return df.to_csv(index=False).encode("utf-8")


def build_xlsx_bytes(inputs: ROIInputs, res: ROIResults, projection_df: pd.DataFrame) -> bytes:
    """Workbook with the formatted summary and the volume projection"""
    bio = io.BytesIO()
    with pd.ExcelWriter(bio, engine="xlsxwriter") as xw:
        summary_table(inputs, res).to_excel(xw, index=False, sheet_name="Summary")
        projection_df.to_excel(xw, index=False, sheet_name="Volume Projection")
        money = xw.book.add_format({"num_format": "$#,##0"})
        xw.sheets["Summary"].set_column(0, 0, 10)
        xw.sheets["Summary"].set_column(1, 1, 34)
        xw.sheets["Summary"].set_column(2, 2, 16)
        xw.sheets["Volume Projection"].set_column(1, 4, 16, money)
    bio.seek(0)
    return bio.read()


def composition_drawing(inputs: ROIInputs, res: ROIResults, size: float = 180) -> Drawing:
    """Vector donut of the per-arch composition, fee in the centre"""
    d = Drawing(size, size)
    # zero and negative buckets have no arc to draw
    slices = [s for s in build_composition(inputs, res) if s.value > 0]
    if slices:
        pie = Pie()
        pie.x = pie.y = 5
        pie.width = pie.height = size - 10
        pie.data = [s.value for s in slices]
        pie.labels = None
        pie.direction = "clockwise"
        pie.startAngle = 90
        pie.slices.strokeColor = colors.white
        pie.slices.strokeWidth = 1.5
        for i, s in enumerate(slices):
            pie.slices[i].fillColor = colors.HexColor(s.color)
        d.add(pie, name="pie")
    d.add(Circle(size / 2, size / 2, size * 0.3, fillColor=colors.white, strokeColor=None))
    d.add(String(size / 2, size / 2 + 6, "PER ARCH REVENUE", fontName="Helvetica",
                 fontSize=6, fillColor=colors.HexColor("#94a3b8"), textAnchor="middle"))
    d.add(String(size / 2, size / 2 - 10, format_currency(inputs.average_fee),
                 fontName="Helvetica-Bold", fontSize=14,
                 fillColor=colors.HexColor("#1a365d"), textAnchor="middle"))
    return d


def build_pdf_bytes(inputs: ROIInputs, res: ROIResults, title: str = "ROI Summary",
                    snapshot_png: bytes = None, logo_png: bytes = None,
                    logo_url: str = "") -> bytes:
    """Single-page PDF of the dashboard.

    By default the page carries the composition donut with its legend above
    the summary table. An uploaded snapshot image replaces both and fills the
    page body. A logo, if given, sits in the header and links to logo_url.
    """
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=LETTER, pageCompression=0)
    w, h = LETTER

    # Header band
    c.setFillColor(colors.HexColor("#1e293b"))
    c.rect(0, h - 60, w, 60, fill=1, stroke=0)
    c.setFillColor(colors.white)
    c.setFont("Helvetica-Bold", 16)
    c.drawString(40, h - 38, title)
    c.setFont("Helvetica", 9)
    c.drawRightString(w - 40, h - 52, date.today().strftime("%B %d, %Y"))

    if logo_png:
        logo = ImageReader(io.BytesIO(logo_png))
        lw, lh = 90, 30
        x, y = w - 40 - lw, h - 45
        c.drawImage(logo, x, y, width=lw, height=lh, preserveAspectRatio=True, mask="auto")
        if logo_url:
            c.linkURL(logo_url, (x, y, x + lw, y + lh), relative=0)

    top = h - 80
    if snapshot_png:
        img = ImageReader(io.BytesIO(snapshot_png))
        iw, ih = img.getSize()
        max_w, max_h = w - 80, top - 40
        scale = min(max_w / iw, max_h / ih)
        c.drawImage(img, 40, top - ih * scale, width=iw * scale, height=ih * scale)
    else:
        chart_size = 180
        c.setFillColor(colors.black)
        c.setFont("Helvetica-Bold", 12)
        c.drawString(40, top - 4, "Financial Composition")
        renderPDF.draw(composition_drawing(inputs, res, chart_size), c, 40, top - chart_size - 14)

        # Legend beside the donut
        ly = top - 40
        for s in build_composition(inputs, res):
            c.setFillColor(colors.HexColor(s.color))
            c.circle(250, ly + 3, 4, fill=1, stroke=0)
            c.setFillColor(colors.HexColor("#475569"))
            c.setFont("Helvetica", 10)
            c.drawString(262, ly, s.name)
            c.setFillColor(colors.black)
            c.drawRightString(w - 110, ly, format_currency(s.value))
            c.drawRightString(w - 50, ly, format_percent(s.percentage))
            ly -= 20

        y = top - chart_size - 24
        section = None
        for row in summary_table(inputs, res).itertuples(index=False):
            if row.Section != section:
                section = row.Section
                y -= 6
                c.setFillColor(colors.black)
                c.setFont("Helvetica-Bold", 12)
                c.drawString(40, y, "Inputs" if section == "Input" else "Results")
                y -= 15
            c.setFont("Helvetica", 9)
            c.setFillColor(colors.HexColor("#475569"))
            c.drawString(50, y, row.Metric)
            c.setFillColor(colors.black)
            c.drawRightString(w - 50, y, row.Value)
            y -= 12

    c.showPage()
    c.save()
    return buf.getvalue()


def safe_export(builder, *args, **kwargs):
    """Run an export builder; failures are logged and reported as None"""
    try:
        return builder(*args, **kwargs)
    except Exception:
        logger.exception("Export failed in %s", getattr(builder, "__name__", builder))
        return None
