from __future__ import annotations

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter


def weeks_workbook(weeks: list[tuple[int, list[dict]]], title: str = "التقويم") -> Workbook:
    """
    One sheet, one block per week: header row then a row per day
    (اليوم / التاريخ الميلادي / التاريخ الهجري).
    """
    wb = Workbook()
    ws = wb.active
    ws.title = title
    ws.sheet_view.rightToLeft = True

    title_font = Font(name="Cairo", bold=True, size=14)
    bold_font = Font(name="Cairo", bold=True, size=12)
    normal_font = Font(name="Cairo", size=12)

    center = Alignment(horizontal="center", vertical="center", wrap_text=True)

    header_fill = PatternFill("solid", fgColor="F1F5F9")
    title_fill = PatternFill("solid", fgColor="E8F5E9")

    thin = Side(style="thin", color="CBD5E1")
    border = Border(left=thin, right=thin, top=thin, bottom=thin)

    headers = ["اليوم", "التاريخ الميلادي", "التاريخ الهجري"]
    row = 1
    for week_no, rows in weeks:
        ws.merge_cells(start_row=row, start_column=1, end_row=row, end_column=len(headers))
        cell = ws.cell(row=row, column=1, value=f"الأسبوع رقم {week_no}")
        cell.font = title_font
        cell.alignment = center
        cell.fill = title_fill
        ws.row_dimensions[row].height = 28
        row += 1

        for col, h in enumerate(headers, start=1):
            cell = ws.cell(row=row, column=col, value=h)
            cell.font = bold_font
            cell.fill = header_fill
            cell.alignment = center
            cell.border = border
        row += 1

        for r in rows:
            values = [r["weekday_name"], r["greg_date"].strftime("%Y-%m-%d"), r["hijri_date"]]
            for col, v in enumerate(values, start=1):
                cell = ws.cell(row=row, column=col, value=v)
                cell.font = normal_font
                cell.alignment = center
                cell.border = border
            row += 1

        row += 1

    widths = {1: 16, 2: 20, 3: 20}
    for col_i, w in widths.items():
        ws.column_dimensions[get_column_letter(col_i)].width = w

    return wb
