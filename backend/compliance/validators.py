"""Compliance validators for staffing regulations."""

from abc import ABC, abstractmethod
from collections import defaultdict
from datetime import time
from typing import Optional

from roster.shifts import Day
from roster.staff import StaffMember

from .types import (
    ComplianceContext,
    Violation,
    ViolationType,
)


def _clock(value: time) -> str:
    """Render 8:00 as "8am", 16:00 as "4pm"."""
    hour = value.hour % 12 or 12
    suffix = "am" if value.hour < 12 else "pm"
    if value.minute:
        return f"{hour}:{value.minute:02d}{suffix}"
    return f"{hour}{suffix}"


def has_shift(staff: list[StaffMember], day: Day, start: time, end: time) -> bool:
    """True if anyone holds a shift exactly matching day, start and end."""
    return any(
        shift.day == day and shift.start == start and shift.end == end
        for member in staff
        for shift in member.shifts
    )


def hours_per_day(member: StaffMember) -> dict[Day, int]:
    """
    Whole hours scheduled per calendar day.

    Each shift's full duration counts toward its own day. A shift whose end
    hour is earlier than its start hour also adds its end hour to the next
    day's total.
    """
    totals: dict[Day, int] = defaultdict(int)
    for shift in member.shifts:
        totals[shift.day] += shift.hours
        if shift.end.hour < shift.start.hour:
            totals[shift.day.next()] += shift.end.hour
    return dict(totals)


class BaseValidator(ABC):
    """Base class for compliance validators."""

    @abstractmethod
    def validate(self, context: ComplianceContext) -> Optional[Violation]:
        """Return the first violation found, or None."""
        pass


class StaffPopulationValidator(BaseValidator):
    """At least one nurse and one doctor must be registered."""

    def validate(self, context: ComplianceContext) -> Optional[Violation]:
        if not context.nurses:
            return Violation(
                rule_type=ViolationType.NO_NURSES_REGISTERED,
                message="No nurses are registered in the system",
            )
        if not context.doctors:
            return Violation(
                rule_type=ViolationType.NO_DOCTORS_REGISTERED,
                message="No doctors are registered in the system",
            )
        return None


class DailyCoverageValidator(BaseValidator):
    """Every day needs a nurse on each required shift and a doctor on some shift."""

    def validate(self, context: ComplianceContext) -> Optional[Violation]:
        rules = context.rules
        nurses = context.nurses
        doctors = context.doctors

        for day in Day:
            if not has_shift(nurses, day, rules.morning_shift_start, rules.morning_shift_end):
                label = f"{_clock(rules.morning_shift_start)}-{_clock(rules.morning_shift_end)}"
                return Violation(
                    rule_type=ViolationType.MISSING_MORNING_COVERAGE,
                    day=day,
                    message=f"Morning shift ({label}) not covered for {day.value}",
                )

            if not has_shift(nurses, day, rules.afternoon_shift_start, rules.afternoon_shift_end):
                label = f"{_clock(rules.afternoon_shift_start)}-{_clock(rules.afternoon_shift_end)}"
                return Violation(
                    rule_type=ViolationType.MISSING_AFTERNOON_COVERAGE,
                    day=day,
                    message=f"Afternoon shift ({label}) not covered for {day.value}",
                )

            if not any(shift.day == day for doctor in doctors for shift in doctor.shifts):
                return Violation(
                    rule_type=ViolationType.NO_DOCTOR_COVERAGE,
                    day=day,
                    message=f"No doctor assigned for {day.value}",
                )

        return None


class NurseDailyHoursValidator(BaseValidator):
    """No nurse may be scheduled for more than the daily maximum on any day."""

    def validate(self, context: ComplianceContext) -> Optional[Violation]:
        max_hours = context.rules.nurse_max_daily_hours

        for nurse in context.nurses:
            totals = hours_per_day(nurse)
            for day in Day:
                hours = totals.get(day, 0)
                if hours > max_hours:
                    return Violation(
                        rule_type=ViolationType.NURSE_OVER_HOURS,
                        day=day,
                        staff_name=nurse.full_name,
                        message=f"Nurse {nurse.full_name} is scheduled for more than {max_hours} hours on {day.value}",
                        details={
                            "username": nurse.username,
                            "hours_scheduled": hours,
                            "max_allowed": max_hours,
                        },
                    )
        return None
