from io import BytesIO

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill, Alignment
from openpyxl.utils import get_column_letter

from schemas.reports import ReportSummary

HEADER_FONT = Font(bold=True, color="FFFFFF")
HEADER_FILL = PatternFill(start_color="F0710B", end_color="F0710B", fill_type="solid")
WINDOW_LABELS = {
    "seven_day": "Last 7 days",
    "thirty_day": "Last 30 days",
    "all_time": "All time",
}


def _style_header(ws, row: int, columns: int):
    for col in range(1, columns + 1):
        cell = ws.cell(row=row, column=col)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.alignment = Alignment(horizontal="center")


def _autosize(ws):
    for column_cells in ws.columns:
        width = max(len(str(cell.value)) if cell.value is not None else 0 for cell in column_cells)
        ws.column_dimensions[get_column_letter(column_cells[0].column)].width = max(12, width + 2)


def write_report_workbook(summary: ReportSummary) -> BytesIO:
    """Render a report summary as an xlsx workbook: summary, daily production and grade sheets."""
    wb = Workbook()

    ws = wb.active
    ws.title = "Summary"
    ws.append(["REPORT", WINDOW_LABELS.get(summary.window.value, summary.window.value)])
    ws.append(["FROM", summary.start_date.strftime("%d-%m-%Y")])
    ws.append(["TO", summary.end_date.strftime("%d-%m-%Y")])
    ws.append([])
    ws.append(["METRIC", "VALUE"])
    _style_header(ws, ws.max_row, 2)
    ws.append(["Total eggs", summary.total_eggs])
    ws.append(["Total sales", float(summary.total_sales)])
    ws.append(["Feed cost", float(summary.total_feed_cost)])
    ws.append(["Health cost", float(summary.total_health_cost)])
    ws.append(["Total cost", float(summary.total_cost)])
    ws.append(["Profit / loss", float(summary.profit)])
    ws.cell(row=ws.max_row, column=1).font = Font(bold=True)
    _autosize(ws)

    production = wb.create_sheet("Egg Production")
    production.append(["DATE", "EGGS"])
    _style_header(production, 1, 2)
    for bucket in summary.egg_production:
        production.append([bucket.date.strftime("%d-%m-%Y"), bucket.count])
    production.append(["TOTAL", summary.total_eggs])
    production.cell(row=production.max_row, column=1).font = Font(bold=True)
    _autosize(production)

    grades = wb.create_sheet("Grades")
    grades.append(["GRADE", "EGGS"])
    _style_header(grades, 1, 2)
    for grade in summary.eggs_by_grade:
        grades.append([f"Grade {grade.grade}", grade.count])
    _autosize(grades)

    output = BytesIO()
    wb.save(output)
    output.seek(0)
    return output
