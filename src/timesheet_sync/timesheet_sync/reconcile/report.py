from __future__ import annotations

from pathlib import Path

import pandas as pd

from .model import RunReport

REPORT_COLUMNS = [
    "work_date",
    "email",
    "outcome",
    "attendance",
    "clock_in",
    "clock_out",
    "hours_worked",
    "written_columns",
    "reason",
    "detail",
]


REPORT_FORMATS = (".xlsx", ".csv")


def check_report_path(path: Path | str) -> Path:
    out = Path(path)
    if out.suffix.lower() not in REPORT_FORMATS:
        raise ValueError(f"Unsupported report format {out.suffix!r} (use .xlsx or .csv)")
    return out


def report_frame(report: RunReport) -> pd.DataFrame:
    return pd.DataFrame(report.rows(), columns=REPORT_COLUMNS)


def export_report(report: RunReport, path: Path | str) -> Path:
    """Write the run report as .xlsx (openpyxl) or .csv, chosen by extension."""
    out = check_report_path(path)
    df = report_frame(report)
    suffix = out.suffix.lower()
    if suffix == ".xlsx":
        with pd.ExcelWriter(out, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name=report.work_date.strftime("%Y-%m-%d"))
    else:
        df.to_csv(out, index=False)
    return out
