"""Batch scanning: fetch many skill files, analyze each, and persist per-file scans."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from skanzer.config import SkanzerConfig
from skanzer.constants.config import MAX_FETCH_RETRIES
from skanzer.engine import analyze
from skanzer.exceptions import ConfigError, PersistenceError
from skanzer.model import BatchResult, FetchResult, SkillReport
from skanzer.parsers import extract_name
from skanzer.scanner.discovery import derive_skill_name
from skanzer.scanner.score import risk_level
from skanzer.scanner.sources import FileSource, fetch_all
from skanzer.scanner.store import ScanStore

logger = logging.getLogger(__name__)


def fetch_with_retries(
    source: FileSource,
    paths: Sequence[str],
    *,
    max_workers: int,
    retries: int,
) -> tuple[dict[str, FetchResult], dict[str, int]]:
    """Fetch every path, then re-fetch only the failed subset when ``retries`` is 1."""
    if not 0 <= retries <= MAX_FETCH_RETRIES:
        raise ConfigError(f"fetch_retries must be between 0 and {MAX_FETCH_RETRIES}, got {retries}")
    results = {result.path: result for result in fetch_all(source, paths, max_workers=max_workers)}
    attempts = dict.fromkeys(paths, 1)

    for _ in range(retries):
        pending = [path for path in paths if not results[path].ok]
        if not pending:
            break
        logger.info("Retrying %d failed fetch(es)", len(pending))
        for result in fetch_all(source, pending, max_workers=max_workers):
            results[result.path] = result
            attempts[result.path] += 1

    return results, attempts


def scan_batch(
    paths: Sequence[str],
    *,
    source: FileSource,
    store: ScanStore,
    config: SkanzerConfig | None = None,
) -> BatchResult:
    """Scan ``paths`` one skill at a time; a failure in one file never aborts the batch.

    Every path gets a skill and a scan record. Unfetchable files produce a
    failed scan carrying the fetch error, and a store that rejects findings
    fails the scan with ``Failed to save findings: <message>``.
    """
    config = config or SkanzerConfig()
    unique_paths = list(dict.fromkeys(paths))
    fetched, attempts = fetch_with_retries(
        source, unique_paths, max_workers=config.max_workers, retries=config.fetch_retries
    )

    reports: list[SkillReport] = []
    failed_paths: list[str] = []
    for path in unique_paths:
        result = fetched[path]
        if not result.ok:
            failed_paths.append(path)
            reports.append(_record_fetch_failure(store, result))
            continue
        reports.append(_scan_document(store, path, result.content or "", config))

    return BatchResult(reports=tuple(reports), failed_paths=tuple(failed_paths), fetch_attempts=attempts)


def _record_fetch_failure(store: ScanStore, result: FetchResult) -> SkillReport:
    error = result.error or "unknown error"
    logger.warning("Skipping %s: %s", result.path, error)
    skill = store.create_skill(name=derive_skill_name(result.path), content="", file_path=result.path)
    scan = store.create_scan(skill.id)
    scan = store.fail_scan(scan.id, error)
    return SkillReport(skill=skill, scan=scan, findings=(), risk_level=risk_level(()))


def _scan_document(store: ScanStore, path: str, content: str, config: SkanzerConfig) -> SkillReport:
    name = derive_skill_name(path, declared_name=extract_name(content))
    skill = store.create_skill(name=name, content=content, file_path=path)
    scan = store.create_scan(skill.id)

    findings = analyze(content, skill.id, scan.id, config=config)
    try:
        store.insert_findings(findings)
    except PersistenceError as exc:
        logger.warning("Failed to save findings for %s: %s", path, exc)
        scan = store.fail_scan(scan.id, f"Failed to save findings: {exc}")
        return SkillReport(skill=skill, scan=scan, findings=(), risk_level=risk_level(()))

    scan = store.complete_scan(scan.id)
    stored = store.findings_for(scan.id)
    return SkillReport(skill=skill, scan=scan, findings=stored, risk_level=risk_level(stored))
