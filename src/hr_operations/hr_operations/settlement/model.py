from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class SettlementResult:
    success: bool
    processed: int
    absent: int
    message: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class RecalculationResult:
    success: bool
    attendance_updated: int
    salaries_updated: int
    message: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ResetResult:
    success: bool
    reset: int
    total: int
    message: str

    def to_dict(self) -> dict:
        return asdict(self)
