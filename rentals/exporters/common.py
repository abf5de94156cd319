"""Shared reportlab page setup, styles and table styling."""

from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Flowable, Paragraph, SimpleDocTemplate, TableStyle

PDF_MEDIA_TYPE = "application/pdf"
DEFAULT_FONT = "Helvetica"
BOLD_FONT = "Helvetica-Bold"


def build_styles() -> dict[str, ParagraphStyle]:
    """Paragraph styles used across all documents."""
    styles = getSampleStyleSheet()
    return {
        "title": ParagraphStyle(
            "DocTitle",
            parent=styles["Heading2"],
            fontName=BOLD_FONT,
            fontSize=14,
            alignment=TA_CENTER,
            spaceAfter=3 * mm,
        ),
        "heading": ParagraphStyle(
            "DocHeading",
            parent=styles["Heading4"],
            fontName=BOLD_FONT,
            fontSize=11,
            spaceBefore=2 * mm,
            spaceAfter=1 * mm,
        ),
        "body": ParagraphStyle(
            "DocBody",
            parent=styles["Normal"],
            fontName=DEFAULT_FONT,
            fontSize=10,
            spaceAfter=1 * mm,
        ),
    }


def grid_table_style(total_row: bool = True) -> TableStyle:
    """Bordered table with a grey header and, optionally, a bold last row."""
    commands = [
        ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
        ("FONTNAME", (0, 0), (-1, 0), BOLD_FONT),
        ("FONTNAME", (0, 1), (-1, -1), DEFAULT_FONT),
        ("FONTSIZE", (0, 0), (-1, -1), 9),
        ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("TOPPADDING", (0, 0), (-1, -1), 4),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
        ("BOX", (0, 0), (-1, -1), 1.5, colors.black),
    ]
    if total_row:
        commands.append(("FONTNAME", (0, -1), (-1, -1), BOLD_FONT))
    return TableStyle(commands)


def render_pdf(story: list[Flowable], title: str, pagesize=A4) -> bytes:
    """Lay out a story on A4 pages and return the PDF bytes."""
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=pagesize,
        leftMargin=15 * mm,
        rightMargin=15 * mm,
        topMargin=15 * mm,
        bottomMargin=15 * mm,
        title=title,
    )
    doc.build(story)
    return buffer.getvalue()


def paragraph(text: str, style: ParagraphStyle) -> Paragraph:
    """Paragraph of plain text; reportlab would otherwise parse it as markup."""
    return Paragraph(escape(text), style)
