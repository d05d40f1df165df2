"""CSV export writer for scan findings."""

from __future__ import annotations

import csv
import io
from collections.abc import Sequence
from pathlib import Path

from skanzer.constants.reporting import CSV_COLUMNS, CSV_FINDINGS_FILENAME
from skanzer.io import write_text_atomic
from skanzer.model import SkillReport


def write_csv_findings(out_root: Path, reports: Sequence[SkillReport]) -> Path:
    """Write a global findings.csv under the output root and return the path."""
    csv_path = out_root / CSV_FINDINGS_FILENAME
    write_text_atomic(
        path=csv_path,
        content=render_csv_string(reports),
        temp_prefix=".csv_tmp_",
        temp_suffix=".csv",
    )
    return csv_path


def render_csv_string(reports: Sequence[SkillReport]) -> str:
    """Render one row per finding, grouped by skill in report order."""
    buf = io.StringIO()
    writer = csv.writer(buf)
    writer.writerow(CSV_COLUMNS)
    for report in reports:
        for f in report.findings:
            writer.writerow(
                (
                    report.skill.name,
                    report.skill.file_path or "",
                    f.scan_id,
                    f.rule_id,
                    f.category,
                    f.severity,
                    f.confidence,
                    f.line_number if f.line_number is not None else "",
                    f.title,
                    f.description,
                    f.code_snippet or "",
                )
            )
    return buf.getvalue()
