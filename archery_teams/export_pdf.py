# archery_teams/export_pdf.py
from __future__ import annotations
import io
from typing import List, Optional

from reportlab.lib import colors
from reportlab.lib.pagesizes import landscape, letter
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle

BALANCE_NOTE = "strongest team total minus weakest team total"


def _team_rows(teams_df) -> List[List[str]]:
    rows = [list(teams_df.columns)]
    for _, row in teams_df.iterrows():
        rows.append([str(v) for v in row.values])
    return rows


def _table_style(n_rows: int, total_col: Optional[int]) -> TableStyle:
    last = n_rows - 1
    cmds = [
        # title row spans the table
        ("SPAN", (0, 0), (-1, 0)),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, 0), 14),
        ("BOTTOMPADDING", (0, 0), (-1, 0), 8),
        # column header
        ("BACKGROUND", (0, 1), (-1, 1), colors.lightgrey),
        ("FONTNAME", (0, 1), (-1, 1), "Helvetica-Bold"),
        ("GRID", (0, 1), (-1, last), 0.5, colors.grey),
        ("FONTSIZE", (0, 1), (-1, -1), 9),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        # balance footer
        ("SPAN", (0, last), (-1, last)),
        ("FONTNAME", (0, last), (-1, last), "Helvetica-Oblique"),
        ("BACKGROUND", (0, last), (-1, last), colors.whitesmoke),
    ]
    for r in range(2, last, 2):
        cmds.append(("BACKGROUND", (0, r), (-1, r), colors.HexColor("#f3f6fa")))
    if total_col is not None:
        cmds.append(("FONTNAME", (total_col, 2), (total_col, last - 1), "Helvetica-Bold"))
        cmds.append(("ALIGN", (total_col, 1), (total_col, last - 1), "RIGHT"))
    return TableStyle(cmds)


def render_pdf(title: str, teams_df, score: Optional[int] = None) -> bytes:
    """One-page team sheet: title row, one row per team, balance score footer."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=landscape(letter), title=title,
                            leftMargin=40, rightMargin=40, topMargin=40, bottomMargin=40)

    columns = list(teams_df.columns)
    rows = _team_rows(teams_df)
    footer = f"Balance score {score} ({BALANCE_NOTE})" if score is not None else f"{len(rows) - 1} teams"
    data = [[title] + [""] * (len(columns) - 1)] + rows + [[footer] + [""] * (len(columns) - 1)]

    total_col = columns.index("Total") if "Total" in columns else None
    table = Table(data, repeatRows=2)
    table.setStyle(_table_style(len(data), total_col))
    doc.build([table])
    return buf.getvalue()
