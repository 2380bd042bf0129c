"""Compliance validation engine that orchestrates all validators."""

import logging
from typing import Iterable, Optional

from roster.staff import StaffMember

from .types import (
    ComplianceContext,
    ComplianceResult,
    ComplianceRules,
)
from .validators import (
    BaseValidator,
    StaffPopulationValidator,
    DailyCoverageValidator,
    NurseDailyHoursValidator,
)

logger = logging.getLogger(__name__)


class ComplianceEngine:
    """
    Main engine for running compliance validation.

    Runs validators in a fixed order and stops at the first violation:
    staff population, then day-by-day coverage, then nurse daily hours.
    """

    def __init__(self, validators: Optional[list[BaseValidator]] = None):
        """Initialize with all validators."""
        self.validators: list[BaseValidator] = validators or [
            StaffPopulationValidator(),
            DailyCoverageValidator(),
            NurseDailyHoursValidator(),
        ]

    def validate(self, context: ComplianceContext) -> ComplianceResult:
        """
        Run compliance validations.

        Args:
            context: The compliance context with rules and the staff roster

        Returns:
            ComplianceResult with the first violation found, if any
        """
        for validator in self.validators:
            violation = validator.validate(context)
            if violation is not None:
                logger.warning(f"Compliance check failed: {violation.message}")
                return ComplianceResult(violation=violation)

        logger.info("Compliance check passed successfully")
        return ComplianceResult()

    @staticmethod
    def build_context(
        staff: Iterable[StaffMember],
        rules: Optional[ComplianceRules] = None,
    ) -> ComplianceContext:
        return ComplianceContext(rules=rules or ComplianceRules(), staff=tuple(staff))


def check_compliance(
    staff: Iterable[StaffMember],
    rules: Optional[ComplianceRules] = None,
) -> ComplianceResult:
    """Check a full staff roster against the staffing regulations."""
    engine = ComplianceEngine()
    return engine.validate(ComplianceEngine.build_context(staff, rules))
