"""Scan persistence: skills, scan lifecycle records, and their findings."""

from __future__ import annotations

import threading
import uuid
from collections.abc import Sequence
from dataclasses import replace
from datetime import UTC, datetime
from typing import Protocol

from skanzer.exceptions import PersistenceError
from skanzer.model import Finding, ScanRecord, SkillRecord


class ScanStore(Protocol):
    """Storage boundary used by the batch scanner."""

    def create_skill(
        self, *, name: str, content: str, file_path: str | None = None, description: str | None = None
    ) -> SkillRecord: ...

    def create_scan(self, skill_id: str) -> ScanRecord: ...

    def insert_findings(self, findings: Sequence[Finding]) -> None: ...

    def complete_scan(self, scan_id: str) -> ScanRecord: ...

    def fail_scan(self, scan_id: str, error_message: str) -> ScanRecord: ...

    def get_scan(self, scan_id: str) -> ScanRecord: ...

    def findings_for(self, scan_id: str) -> tuple[Finding, ...]: ...


def _validate_finding(finding: Finding) -> None:
    if not 0.0 <= finding.confidence <= 1.0:
        raise PersistenceError(f"{finding.rule_id}: confidence {finding.confidence} is outside [0, 1]")
    if (finding.line_number is None) != (finding.code_snippet is None):
        raise PersistenceError(f"{finding.rule_id}: line_number and code_snippet must be set together")


class InMemoryScanStore:
    """Thread-safe in-process store; ids are random UUID strings and times are UTC."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._skills: dict[str, SkillRecord] = {}
        self._scans: dict[str, ScanRecord] = {}
        self._findings: dict[str, list[Finding]] = {}

    def create_skill(
        self, *, name: str, content: str, file_path: str | None = None, description: str | None = None
    ) -> SkillRecord:
        skill = SkillRecord(
            id=str(uuid.uuid4()), name=name, content=content, file_path=file_path, description=description
        )
        with self._lock:
            self._skills[skill.id] = skill
        return skill

    def create_scan(self, skill_id: str) -> ScanRecord:
        with self._lock:
            if skill_id not in self._skills:
                raise PersistenceError(f"Unknown skill id: {skill_id}")
            scan = ScanRecord(id=str(uuid.uuid4()), skill_id=skill_id, status="scanning", started_at=_now())
            self._scans[scan.id] = scan
            self._findings[scan.id] = []
        return scan

    def insert_findings(self, findings: Sequence[Finding]) -> None:
        """Validate every finding first; a single bad row rejects the whole batch."""
        for finding in findings:
            _validate_finding(finding)
        with self._lock:
            for finding in findings:
                if finding.scan_id not in self._scans:
                    raise PersistenceError(f"Unknown scan id: {finding.scan_id}")
            for finding in findings:
                self._findings[finding.scan_id].append(finding)

    def complete_scan(self, scan_id: str) -> ScanRecord:
        return self._finish(scan_id, status="completed", error_message=None)

    def fail_scan(self, scan_id: str, error_message: str) -> ScanRecord:
        return self._finish(scan_id, status="failed", error_message=error_message)

    def get_scan(self, scan_id: str) -> ScanRecord:
        with self._lock:
            try:
                return self._scans[scan_id]
            except KeyError:
                raise PersistenceError(f"Unknown scan id: {scan_id}") from None

    def get_skill(self, skill_id: str) -> SkillRecord:
        with self._lock:
            try:
                return self._skills[skill_id]
            except KeyError:
                raise PersistenceError(f"Unknown skill id: {skill_id}") from None

    def findings_for(self, scan_id: str) -> tuple[Finding, ...]:
        with self._lock:
            return tuple(self._findings.get(scan_id, ()))

    def _finish(self, scan_id: str, *, status: str, error_message: str | None) -> ScanRecord:
        with self._lock:
            scan = self._scans.get(scan_id)
            if scan is None:
                raise PersistenceError(f"Unknown scan id: {scan_id}")
            finished = replace(scan, status=status, completed_at=_now(), error_message=error_message)
            self._scans[scan_id] = finished
        return finished


def _now() -> datetime:
    return datetime.now(UTC)
