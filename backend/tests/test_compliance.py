"""Unit tests for staffing compliance validation.

Tests staff population, daily nurse and doctor coverage, nurse daily hours,
and the order in which violations are reported.
"""

import pytest
from datetime import time

from compliance.types import (
    ComplianceContext,
    ComplianceResult,
    ComplianceRules,
    ViolationType,
)
from compliance.validators import (
    StaffPopulationValidator,
    DailyCoverageValidator,
    NurseDailyHoursValidator,
    hours_per_day,
)
from compliance.engine import ComplianceEngine, check_compliance
from roster import Day, Role, Shift


def replace_shifts(staff, username, shifts):
    return [s.with_shifts(shifts) if s.username == username else s for s in staff]


def add_shift(staff, username, shift):
    return [s.with_shift(shift) if s.username == username else s for s in staff]


def remove_shift(staff, username, shift):
    return [s.without_shift(shift) if s.username == username else s for s in staff]


# ============================================================================
# ============================================================================


class TestStaffPopulation:

    def test_doctor_only_roster_has_no_nurses(self, compliant_staff):
        doctors = [s for s in compliant_staff if s.role == Role.DOCTOR]

        result = check_compliance(doctors)

        assert not result.is_compliant
        assert result.violation.rule_type == ViolationType.NO_NURSES_REGISTERED
        assert result.message == "No nurses are registered in the system"

    def test_nurse_only_roster_has_no_doctors(self, compliant_staff):
        nurses = [s for s in compliant_staff if s.role == Role.NURSE]

        result = check_compliance(nurses)

        assert result.violation.rule_type == ViolationType.NO_DOCTORS_REGISTERED
        assert result.message == "No doctors are registered in the system"

    def test_empty_roster_reports_nurses_first(self):
        result = check_compliance([])
        assert result.violation.rule_type == ViolationType.NO_NURSES_REGISTERED

    def test_managers_do_not_count(self, make_staff):
        staff = [make_staff("boss", Role.MANAGER), make_staff("doc", Role.DOCTOR)]
        result = check_compliance(staff)
        assert result.violation.rule_type == ViolationType.NO_NURSES_REGISTERED

    def test_validator_passes_with_nurse_and_doctor(self, compliant_staff):
        context = ComplianceEngine.build_context(compliant_staff)
        assert StaffPopulationValidator().validate(context) is None


class TestDailyCoverage:

    def test_full_valid_roster_is_compliant(self, compliant_staff):
        result = check_compliance(compliant_staff)

        assert result.is_compliant
        assert result.violation is None
        assert result.to_dict() == {
            "is_compliant": True,
            "violation": None,
            "message": "Roster is compliant",
        }

    def test_missing_monday_morning(self, compliant_staff):
        staff = remove_shift(compliant_staff, "nurse1", Shift(Day.MONDAY, time(8), time(16)))

        result = check_compliance(staff)

        assert result.violation.rule_type == ViolationType.MISSING_MORNING_COVERAGE
        assert result.violation.day == Day.MONDAY
        assert result.message == "Morning shift (8am-4pm) not covered for MONDAY"

    def test_missing_tuesday_afternoon(self, compliant_staff, every_day):
        staff = replace_shifts(
            compliant_staff, "nurse2", every_day(time(14), time(22), skip=Day.TUESDAY)
        )

        result = check_compliance(staff)

        assert result.violation.rule_type == ViolationType.MISSING_AFTERNOON_COVERAGE
        assert result.violation.day == Day.TUESDAY
        assert result.message == "Afternoon shift (2pm-10pm) not covered for TUESDAY"

    def test_missing_wednesday_doctor(self, compliant_staff, every_day):
        staff = replace_shifts(
            compliant_staff, "doctor", every_day(time(9), time(10), skip=Day.WEDNESDAY)
        )

        result = check_compliance(staff)

        assert result.violation.rule_type == ViolationType.NO_DOCTOR_COVERAGE
        assert result.violation.day == Day.WEDNESDAY
        assert result.message == "No doctor assigned for WEDNESDAY"

    def test_near_miss_times_do_not_count(self, compliant_staff):
        staff = remove_shift(compliant_staff, "nurse1", Shift(Day.MONDAY, time(8), time(16)))
        staff = add_shift(staff, "nurse1", Shift(Day.MONDAY, time(8), time(16, 30)))

        result = check_compliance(staff)

        assert result.violation.rule_type == ViolationType.MISSING_MORNING_COVERAGE

    def test_doctor_shift_covering_other_role_does_not_count(self, compliant_staff, make_staff):
        # A doctor holding the morning shift is not nurse coverage
        staff = remove_shift(compliant_staff, "nurse1", Shift(Day.MONDAY, time(8), time(16)))
        staff.append(make_staff("doc2", Role.DOCTOR, [Shift(Day.MONDAY, time(8), time(16))]))

        result = check_compliance(staff)

        assert result.violation.rule_type == ViolationType.MISSING_MORNING_COVERAGE

    def test_doctor_overnight_from_previous_day_does_not_count(self, compliant_staff, every_day):
        # Doctor coverage is decided by the shift's own day only
        shifts = every_day(time(9), time(10), skip=Day.TUESDAY) + [Shift(Day.MONDAY, time(22), time(6))]
        staff = replace_shifts(compliant_staff, "doctor", shifts)

        result = check_compliance(staff)

        assert result.violation.rule_type == ViolationType.NO_DOCTOR_COVERAGE
        assert result.violation.day == Day.TUESDAY

    def test_days_checked_in_week_order(self, compliant_staff, every_day):
        staff = replace_shifts(
            compliant_staff, "nurse1", every_day(time(8), time(16), skip=Day.FRIDAY)
        )
        staff = replace_shifts(staff, "nurse2", every_day(time(14), time(22), skip=Day.WEDNESDAY))

        result = check_compliance(staff)

        assert result.violation.rule_type == ViolationType.MISSING_AFTERNOON_COVERAGE
        assert result.violation.day == Day.WEDNESDAY

    def test_morning_checked_before_afternoon_and_doctor(self, compliant_staff):
        staff = [s.with_shifts([]) for s in compliant_staff]

        result = check_compliance(staff)

        assert result.violation.rule_type == ViolationType.MISSING_MORNING_COVERAGE
        assert result.violation.day == Day.MONDAY

    def test_custom_shift_times(self, compliant_staff, every_day):
        rules = ComplianceRules(morning_shift_start=time(7), morning_shift_end=time(15))
        staff = replace_shifts(compliant_staff, "nurse1", every_day(time(7), time(15)))

        assert check_compliance(staff, rules).is_compliant
        assert check_compliance(compliant_staff, rules).message == (
            "Morning shift (7am-3pm) not covered for MONDAY"
        )


class TestNurseDailyHours:

    def test_extra_evening_shift_exceeds_limit(self, compliant_staff):
        staff = add_shift(compliant_staff, "nurse1", Shift(Day.MONDAY, time(17), time(20)))

        result = check_compliance(staff)

        assert result.violation.rule_type == ViolationType.NURSE_OVER_HOURS
        assert result.violation.day == Day.MONDAY
        assert result.violation.staff_name == "Jane Doe"
        assert result.violation.details["hours_scheduled"] == 11
        assert result.message == "Nurse Jane Doe is scheduled for more than 8 hours on MONDAY"

    def test_overlapping_shifts_both_count(self, compliant_staff):
        staff = add_shift(compliant_staff, "nurse1", Shift(Day.THURSDAY, time(14), time(22)))

        result = check_compliance(staff)

        assert result.violation.rule_type == ViolationType.NURSE_OVER_HOURS
        assert result.violation.day == Day.THURSDAY

    def test_exactly_eight_hours_is_allowed(self, compliant_staff, make_staff):
        staff = compliant_staff + [
            make_staff("nurse3", Role.NURSE, [
                Shift(Day.MONDAY, time(6), time(10)),
                Shift(Day.MONDAY, time(18), time(22)),
            ]),
        ]
        assert check_compliance(staff).is_compliant

    def test_doctors_are_not_limited(self, compliant_staff):
        staff = add_shift(compliant_staff, "doctor", Shift(Day.MONDAY, time(10), time(23)))
        assert check_compliance(staff).is_compliant

    def test_coverage_reported_before_overtime(self, compliant_staff):
        staff = add_shift(compliant_staff, "nurse1", Shift(Day.MONDAY, time(17), time(20)))
        staff = remove_shift(staff, "nurse2", Shift(Day.SUNDAY, time(14), time(22)))

        result = check_compliance(staff)

        assert result.violation.rule_type == ViolationType.MISSING_AFTERNOON_COVERAGE
        assert result.violation.day == Day.SUNDAY

    def test_first_nurse_in_roster_reported(self, compliant_staff):
        staff = add_shift(compliant_staff, "nurse2", Shift(Day.MONDAY, time(6), time(9)))
        staff = add_shift(staff, "nurse1", Shift(Day.FRIDAY, time(17), time(20)))

        result = check_compliance(staff)

        assert result.violation.staff_name == "Jane Doe"
        assert result.violation.day == Day.FRIDAY

    def test_custom_hour_limit(self, compliant_staff):
        rules = ComplianceRules(nurse_max_daily_hours=7)

        result = check_compliance(compliant_staff, rules)

        assert result.message == "Nurse Jane Doe is scheduled for more than 7 hours on MONDAY"


class TestOvernightHourAccounting:
    """Overnight shifts count fully on their own day and add their end hour to the next."""

    def test_overnight_shift_spills_end_hour(self, make_staff):
        nurse = make_staff("night", Role.NURSE, [Shift(Day.SUNDAY, time(22), time(6))])
        assert hours_per_day(nurse) == {Day.SUNDAY: 8, Day.MONDAY: 6}

    def test_spill_uses_whole_end_hour(self, make_staff):
        nurse = make_staff("night", Role.NURSE, [Shift(Day.MONDAY, time(20), time(2, 45))])
        assert hours_per_day(nurse) == {Day.MONDAY: 6, Day.TUESDAY: 2}

    def test_shift_ending_at_midnight_spills_nothing(self, make_staff):
        nurse = make_staff("late", Role.NURSE, [Shift(Day.MONDAY, time(16), time(0))])
        assert hours_per_day(nurse) == {Day.MONDAY: 8, Day.TUESDAY: 0}

    def test_same_hour_wrap_counts_as_zero(self, make_staff):
        nurse = make_staff("odd", Role.NURSE, [Shift(Day.MONDAY, time(22, 30), time(22))])
        assert hours_per_day(nurse) == {Day.MONDAY: 0}

    def test_spill_pushes_next_day_over_limit(self, compliant_staff):
        staff = add_shift(compliant_staff, "nurse2", Shift(Day.MONDAY, time(23), time(4)))

        result = check_compliance(staff)

        # Monday: 8 + 5, Tuesday: 8 + 4
        assert result.violation.rule_type == ViolationType.NURSE_OVER_HOURS
        assert result.violation.staff_name == "Sarah Johnson"
        assert result.violation.day == Day.MONDAY

    def test_spill_counts_toward_next_day(self, compliant_staff, make_staff):
        staff = compliant_staff + [
            make_staff("nurse3", Role.NURSE, [
                Shift(Day.MONDAY, time(23), time(6)),
                Shift(Day.TUESDAY, time(7), time(10)),
            ], full_name="Night Nurse"),
        ]

        result = check_compliance(staff)

        # Monday: 7, Tuesday: 6 + 3
        assert result.violation.staff_name == "Night Nurse"
        assert result.violation.day == Day.TUESDAY


class TestComplianceEngine:

    def test_repeated_checks_are_identical(self, compliant_staff):
        staff = add_shift(compliant_staff, "nurse1", Shift(Day.MONDAY, time(17), time(20)))

        first = check_compliance(staff)
        second = check_compliance(staff)

        assert first == second

    def test_add_then_remove_restores_result(self, compliant_staff):
        extra = Shift(Day.MONDAY, time(17), time(20))
        before = check_compliance(compliant_staff)

        staff = add_shift(compliant_staff, "nurse1", extra)
        assert not check_compliance(staff).is_compliant

        staff = remove_shift(staff, "nurse1", extra)
        assert check_compliance(staff) == before

    def test_validators_run_in_order(self, compliant_staff):
        engine = ComplianceEngine()
        assert [type(v) for v in engine.validators] == [
            StaffPopulationValidator,
            DailyCoverageValidator,
            NurseDailyHoursValidator,
        ]

    def test_custom_validator_list(self, compliant_staff):
        staff = add_shift(compliant_staff, "nurse1", Shift(Day.MONDAY, time(17), time(20)))
        engine = ComplianceEngine(validators=[StaffPopulationValidator(), DailyCoverageValidator()])

        result = engine.validate(ComplianceEngine.build_context(staff))

        assert result.is_compliant

    def test_context_splits_roles(self, compliant_staff, make_staff):
        context = ComplianceContext(
            rules=ComplianceRules(),
            staff=tuple(compliant_staff + [make_staff("boss", Role.MANAGER)]),
        )
        assert [n.username for n in context.nurses] == ["nurse1", "nurse2"]
        assert [d.username for d in context.doctors] == ["doctor"]

    def test_violation_to_dict(self, compliant_staff):
        staff = add_shift(compliant_staff, "nurse1", Shift(Day.MONDAY, time(17), time(20)))

        data = check_compliance(staff).to_dict()

        assert data["is_compliant"] is False
        assert data["violation"]["rule_type"] == "NURSE_OVER_HOURS"
        assert data["violation"]["day"] == "MONDAY"
        assert data["violation"]["staff_name"] == "Jane Doe"

    def test_result_default_is_compliant(self):
        assert ComplianceResult().is_compliant
