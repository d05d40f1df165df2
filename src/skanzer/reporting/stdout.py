"""Human-readable stdout reporter for scan results."""

from __future__ import annotations

from skanzer.constants.branding import ASCII_LOGO_LINES, SCAN_SUMMARY_TITLE
from skanzer.constants.reporting import ANSI_RESET, RISK_COLORS, RISK_LABELS, SEVERITY_COLORS
from skanzer.constants.scoring import SEVERITY_ORDER, SEVERITY_RANK
from skanzer.model import ScanResult, SkillReport
from skanzer.scanner.score import rule_counts
from skanzer.types import RiskLevel, Severity


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def _truncate(text: str, width: int) -> str:
    return text if len(text) <= width else text[: width - 1] + "…"


class StdoutReporter:
    """Formats scan results as a boxed terminal summary."""

    def __init__(
        self,
        result: ScanResult,
        *,
        color: bool = True,
        verbose: bool = False,
        fail_on: Severity | None = None,
        exit_code: int = 0,
    ) -> None:
        self._result = result
        self._color = color
        self._verbose = verbose
        self._fail_on = fail_on
        self._exit_code = exit_code

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        sections = [self._render_header(), self._render_skills_table()]
        if self._verbose:
            sections.append(self._render_findings_table())
        return "\n".join(section for section in sections if section)

    def _severity(self, severity: Severity) -> str:
        color = SEVERITY_COLORS.get(severity, "")
        return _colorize(severity, color) if self._color and color else severity

    def _risk(self, level: RiskLevel) -> str:
        label = RISK_LABELS[level]
        return _colorize(label, RISK_COLORS[level]) if self._color else label

    def _render_header(self) -> str:
        r = self._result
        sep = "  " + "─" * 38
        failed = len(r.failed_scans)
        flagged = sum(1 for report in r.reports if report.findings)

        lines = [
            "",
            f"  {ASCII_LOGO_LINES[0]}",
            f"  {ASCII_LOGO_LINES[1]}",
            f"  {SCAN_SUMMARY_TITLE}",
            sep,
            "",
            f"  Risk        {self._risk(r.risk_level)}",
            f"  Files       {r.scanned_files} scanned / {flagged} with findings / {failed} failed",
            f"  Findings    {r.total_findings} ({self._format_severity_breakdown(r.counts_by_severity)})",
            f"  Top rules   {self._format_top_rules(rule_counts(list(r.findings)))}",
        ]
        verdict = self._render_verdict()
        if verdict is not None:
            lines.append(f"  Verdict     {verdict}")
        lines.append(f"  Duration    {r.duration_seconds:.3f}s")
        for warning in r.warnings:
            lines.append(f"  Warning     {warning}")
        lines.append("")
        return "\n".join(lines)

    def _render_skills_table(self) -> str:
        reports = self._result.reports
        if not reports:
            return ""

        w_skill = 30
        w_risk = 9
        w_count = 8
        w_status = 9

        def _hline(left: str, mid: str, right: str) -> str:
            return (
                f"  {left}{'─' * (w_skill + 2)}{mid}{'─' * (w_risk + 2)}"
                f"{mid}{'─' * (w_count + 2)}{mid}{'─' * (w_status + 2)}{right}"
            )

        hdr = (
            f"  │ {'Skill':<{w_skill}} │ {'Risk':<{w_risk}}"
            f" │ {'Findings':>{w_count}} │ {'Status':<{w_status}} │"
        )
        lines = ["  Skills", _hline("┌", "┬", "┐"), hdr, _hline("├", "┼", "┤")]
        for report in reports:
            risk = self._risk(report.risk_level)
            # Pad on the plain label so ANSI codes do not break alignment.
            padding = " " * max(0, w_risk - len(RISK_LABELS[report.risk_level]))
            lines.append(
                f"  │ {_truncate(report.skill.name, w_skill):<{w_skill}} │ {risk}{padding}"
                f" │ {len(report.findings):>{w_count}} │ {report.scan.status:<{w_status}} │"
            )
        lines.append(_hline("└", "┴", "┘"))
        for report in reports:
            if report.scan.status == "failed" and report.scan.error_message:
                lines.append(f"  ! {report.skill.name}: {report.scan.error_message}")
        return "\n".join(lines)

    def _render_findings_table(self) -> str:
        lines: list[str] = []
        for report in self._result.reports:
            if not report.findings:
                continue
            lines.append(f"  [{report.skill.name}]  {report.skill.file_path or ''}")
            lines.extend(self._format_finding_rows(report))
            lines.append("")
        if not lines:
            return ""
        return "\n".join(["  Findings", "", *lines])

    def _format_finding_rows(self, report: SkillReport) -> list[str]:
        rows: list[str] = []
        for finding in report.findings:
            location = f"L{finding.line_number}" if finding.line_number is not None else "-"
            rows.append(
                f"    {location:>6}  {finding.rule_id:<22}  {self._severity(finding.severity)}"
                f"  {finding.confidence:.2f}  {finding.title}"
            )
        return rows

    def _format_severity_breakdown(self, counts: dict[Severity, int]) -> str:
        """Render ``critical/high/medium/low`` finding counts in fixed order."""
        return " · ".join(f"{counts.get(severity, 0)} {self._severity(severity)}" for severity in SEVERITY_ORDER)

    @staticmethod
    def _format_top_rules(counts: dict[str, int], limit: int = 5) -> str:
        """Render top-N rules sorted by descending count, then rule id."""
        if not counts:
            return "none"
        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        head = ranked[:limit]
        parts = [f"{rule_id} {count}" for rule_id, count in head]
        remaining = len(ranked) - len(head)
        if remaining > 0:
            parts.append(f"(+{remaining} more)")
        return " · ".join(parts)

    def _render_verdict(self) -> str | None:
        """Render the CI threshold verdict when ``--fail-on`` is configured."""
        if self._fail_on is None:
            return None
        threshold = SEVERITY_RANK[self._fail_on]
        matched = [finding for finding in self._result.findings if SEVERITY_RANK[finding.severity] >= threshold]
        clause = f"{len(matched)} finding(s) >= {self._fail_on}" if matched else f"no findings >= {self._fail_on}"
        state = "FAIL" if self._exit_code == 1 else "PASS"
        return f"{state} ({clause})"
