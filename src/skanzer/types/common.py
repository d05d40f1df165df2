"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

Severity: TypeAlias = Literal["low", "medium", "high", "critical"]
Category: TypeAlias = Literal["malware", "data_exfiltration", "privilege_escalation", "behavior_mismatch", "other"]
ScanStatus: TypeAlias = Literal["pending", "scanning", "completed", "failed"]
RiskLevel: TypeAlias = Literal["passed", "low_risk", "caution", "high_risk"]
LineContext: TypeAlias = Literal["code", "any"]
