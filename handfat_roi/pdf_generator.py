"""
PDF report generator.

Renders a one-page A4 ROI report from a read-only (NormalizedInput,
RoiResult) snapshot. Uses fpdf2 (pure Python, no system dependencies).

Sections:
1. Header (title + generation date)
2. Indata
3. Resultat
4. Sammanfattning (net, payback, summary sentence)
5. Footer disclaimer

Never feeds anything back into the calculation.
"""

import logging
from datetime import date
from typing import Optional

from fpdf import FPDF

from .config import settings
from .formatting import fmt1, fmt_int, fmt_money_sek, fmt_pct, fmt_years
from .schemas import NormalizedInput, RoiResult

logger = logging.getLogger(__name__)

DARK_GRAY = (26, 26, 26)
MEDIUM_GRAY = (102, 102, 102)
LIGHT_GRAY = (229, 229, 229)
GREEN = (22, 163, 74)
LIGHT_GREEN = (240, 253, 244)
GREEN_BORDER = (134, 239, 172)

# Column x-positions (mm)
LABEL_X = 20
VALUE_X = 70
RIGHT_LABEL_X = 110
RIGHT_VALUE_X = 160


CORE_FONTS_ENCODING = "windows-1252"


def _safe(text: str) -> str:
    """Replace Unicode chars that can't be rendered by built-in PDF fonts (cp1252)."""
    if not text:
        return ""
    # en dash (the NaN sentinel) and em dash exist in cp1252 and are kept
    return (
        text
        .replace("→", "->")   # right arrow
        .replace("≤", "<=")   # less-than-or-equal
        .replace("−", "-")    # minus sign
        .encode(CORE_FONTS_ENCODING, errors="replace")
        .decode(CORE_FONTS_ENCODING)
    )


def report_filename(generated_on: Optional[date] = None) -> str:
    generated_on = generated_on or date.today()
    return f"handfat-roi-kalkyl-{generated_on.isoformat()}.pdf"


class RoiReportPDF(FPDF):
    """A4 portrait ROI report."""

    def __init__(self):
        super().__init__(orientation="P", unit="mm", format="A4")
        self.core_fonts_encoding = CORE_FONTS_ENCODING
        self.set_auto_page_break(auto=False)
        self.set_margins(LABEL_X, 20, LABEL_X)

    def header(self):
        pass  # Title is drawn once, on the first page

    def footer(self):
        y = self.h - 20
        self.set_draw_color(*LIGHT_GRAY)
        self.line(LABEL_X, y - 5, self.w - LABEL_X, y - 5)
        self.set_font("Helvetica", "", 8)
        self.set_text_color(*MEDIUM_GRAY)
        self.text(LABEL_X, y, _safe(settings.REPORT_FOOTER))
        self.text(LABEL_X, y + 5, _safe(settings.REPORT_DISCLAIMER))

    def section_header(self, title: str):
        """Section title with a rule underneath."""
        self.set_font("Helvetica", "", 13)
        self.set_text_color(*DARK_GRAY)
        self.cell(0, 8, title, new_x="LMARGIN", new_y="NEXT")
        self.set_draw_color(*LIGHT_GRAY)
        self.line(LABEL_X, self.get_y(), self.w - LABEL_X, self.get_y())
        self.ln(5)

    def kv_row(self, label: str, value: str, right_label: str = None, right_value: str = None):
        """One row of the two-column label/value table."""
        y = self.get_y()
        self._kv(LABEL_X, VALUE_X, y, label, value)
        if right_label and right_value:
            self._kv(RIGHT_LABEL_X, RIGHT_VALUE_X, y, right_label, right_value)
        self.set_xy(LABEL_X, y + 8)

    def _kv(self, label_x: float, value_x: float, y: float, label: str, value: str):
        self.set_xy(label_x, y)
        self.set_font("Helvetica", "", 9)
        self.set_text_color(*MEDIUM_GRAY)
        self.cell(value_x - label_x, 6, _safe(label))
        self.set_xy(value_x, y)
        self.set_font("Helvetica", "B", 9)
        self.set_text_color(*DARK_GRAY)
        self.cell(RIGHT_LABEL_X - LABEL_X - (value_x - label_x), 6, _safe(value))


def generate_roi_pdf(
    params: NormalizedInput,
    result: RoiResult,
    generated_on: Optional[date] = None,
) -> bytes:
    """
    Generate the ROI report.

    Args:
        params: normalized input the result was computed from
        result: RoiResult for params
        generated_on: report date (defaults to today)

    Returns:
        PDF bytes
    """
    generated_on = generated_on or date.today()

    pdf = RoiReportPDF()
    pdf.add_page()
    pw = pdf.w - pdf.l_margin - pdf.r_margin  # printable width

    # ── SECTION 1: Header ──
    pdf.set_font("Helvetica", "", 22)
    pdf.set_text_color(*DARK_GRAY)
    pdf.cell(0, 10, _safe(settings.REPORT_TITLE), new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("Helvetica", "", 10)
    pdf.set_text_color(*MEDIUM_GRAY)
    pdf.cell(0, 6, f"Genererad: {generated_on.isoformat()}", new_x="LMARGIN", new_y="NEXT")
    pdf.ln(8)

    # ── SECTION 2: Indata ──
    pdf.section_header("Indata")
    pdf.kv_row("Antal vårdplatser:", fmt_int(params.beds),
               "Extra vårddagar/VRI:", fmt1(params.extra_days_per_vri))
    pdf.kv_row("Beläggning:", fmt_pct(params.occupancy_pct),
               "Kostnad/vårddygn:", fmt_money_sek(params.cost_per_bed_day))
    pdf.kv_row("VRI per 1000 vårddygn:", fmt1(params.vri_per_1000_bed_days),
               "Investering (CAPEX):", fmt_money_sek(params.capex))
    pdf.kv_row("Andel gramnegativa:", fmt_pct(params.gram_neg_pct),
               "Årlig kostnad (OPEX):", fmt_money_sek(params.opex_year))
    pdf.kv_row("Handfatskoppling:", fmt_pct(params.sink_attributable_pct),
               "Avskrivningstid:", f"{fmt_int(params.capex_amort_years)} år")
    pdf.kv_row("Effekt (minskning):", fmt_pct(params.effect_pct))
    pdf.ln(6)

    # ── SECTION 3: Resultat ──
    pdf.section_header("Resultat")
    pdf.kv_row("Vårddygn per år:", fmt_int(result.bed_days),
               "Undvikna infektioner/år:", fmt1(result.avoided))
    pdf.kv_row("VRI per år:", fmt1(result.vri),
               "Sparade vårddygn/år:", fmt1(result.saved_bed_days))
    pdf.kv_row("Gramnegativa VRI/år:", fmt1(result.gram_neg),
               "Sparade kronor/år:", fmt_money_sek(result.saved_sek))
    pdf.kv_row("Handfatskopplade VRI:", fmt1(result.sink_gram_neg),
               "Årskostnad:", fmt_money_sek(result.annual_cost))
    pdf.ln(6)

    # ── SECTION 4: Sammanfattning ──
    box_y = pdf.get_y()
    pdf.set_fill_color(*LIGHT_GREEN)
    pdf.set_draw_color(*GREEN_BORDER)
    pdf.rect(LABEL_X, box_y, pw, 40, style="FD")

    pdf.set_xy(LABEL_X + 5, box_y + 4)
    pdf.set_font("Helvetica", "B", 11)
    pdf.set_text_color(*DARK_GRAY)
    pdf.cell(0, 6, "Sammanfattning", new_x="LMARGIN", new_y="NEXT")

    row_y = box_y + 14
    pdf.set_xy(LABEL_X + 5, row_y)
    pdf.set_font("Helvetica", "", 9)
    pdf.set_text_color(*MEDIUM_GRAY)
    pdf.cell(30, 6, "Netto per år:")
    pdf.set_font("Helvetica", "B", 9)
    pdf.set_text_color(*GREEN)
    pdf.cell(45, 6, _safe(fmt_money_sek(result.net)))
    pdf.set_font("Helvetica", "", 9)
    pdf.set_text_color(*MEDIUM_GRAY)
    pdf.cell(20, 6, "Payback:")
    pdf.set_font("Helvetica", "B", 9)
    pdf.set_text_color(*GREEN)
    pdf.cell(40, 6, _safe(fmt_years(result.payback_years)))

    pdf.set_xy(LABEL_X + 5, row_y + 10)
    pdf.set_font("Helvetica", "", 8)
    pdf.set_text_color(51, 51, 51)
    summary = (
        f"Med antagandet {fmt_pct(params.sink_attributable_pct)} handfatskoppling och "
        f"{fmt_pct(params.effect_pct)} effekt undviks cirka {fmt1(result.avoided)} "
        f"gramnegativa vårdrelaterade infektioner per år, motsvarande "
        f"{fmt1(result.saved_bed_days)} sparade vårddygn."
    )
    pdf.multi_cell(pw - 10, 4.5, _safe(summary))

    logger.info("ROI report generated (%s)", generated_on.isoformat())
    return bytes(pdf.output())
