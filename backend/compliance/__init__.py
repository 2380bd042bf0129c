"""Staffing compliance module for the ward roster."""

from .types import (
    ComplianceContext,
    ComplianceResult,
    ComplianceRules,
    Violation,
    ViolationType,
)
from .engine import ComplianceEngine, check_compliance
from .validators import (
    BaseValidator,
    StaffPopulationValidator,
    DailyCoverageValidator,
    NurseDailyHoursValidator,
    hours_per_day,
)

__all__ = [
    "ComplianceContext",
    "ComplianceResult",
    "ComplianceRules",
    "Violation",
    "ViolationType",
    "ComplianceEngine",
    "check_compliance",
    "BaseValidator",
    "StaffPopulationValidator",
    "DailyCoverageValidator",
    "NurseDailyHoursValidator",
    "hours_per_day",
]
