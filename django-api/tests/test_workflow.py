"""Tests for booking availability and status transitions."""

from datetime import UTC, datetime

import pytest

from marketplace.domain import (
    Action,
    BookingWorkflow,
    EntityKind,
    Status,
    is_date_available,
    merge_image_edits,
    validate_booking_submission,
)
from marketplace.domain.errors import (
    AlreadyDecidedError,
    DateConflictError,
    ErrorCode,
    InvalidTransitionError,
    MissingDateError,
    UnsupportedActionError,
)

from tests.factories import make_booking

APPROVABLE = [EntityKind.SERVICE_PROVIDER, EntityKind.HALL_MANAGER, EntityKind.BOOKING]


class TestDateAvailability:
    @pytest.mark.parametrize("taken_by", [Status.PENDING, Status.APPROVED])
    def test_date_held_by_live_booking_is_unavailable(self, taken_by):
        existing = [make_booking(date="2024-06-01", status=taken_by)]
        assert is_date_available(existing, "2024-06-01") is False

    def test_date_held_by_completed_service_booking_is_unavailable(self):
        existing = [make_booking(date="2024-06-01", booking_type="service", status=Status.COMPLETED)]
        assert is_date_available(existing, "2024-06-01") is False

    def test_rejected_booking_frees_the_date(self):
        existing = [make_booking(date="2024-06-01", status=Status.REJECTED)]
        assert is_date_available(existing, "2024-06-01") is True

    def test_rejecting_the_conflicting_booking_frees_the_date(self):
        existing = [
            make_booking(id="a", date="2024-06-01", status=Status.PENDING),
            make_booking(id="b", date="2024-06-02", status=Status.APPROVED),
        ]
        assert is_date_available(existing, "2024-06-01") is False

        existing[0] = make_booking(id="a", date="2024-06-01", status=Status.REJECTED)
        assert is_date_available(existing, "2024-06-01") is True

    def test_other_dates_do_not_conflict(self):
        existing = [make_booking(date="2024-06-01", status=Status.APPROVED)]
        assert is_date_available(existing, "2024-06-02") is True

    def test_empty_date_never_conflicts(self):
        existing = [make_booking(date="2024-06-01")]
        assert is_date_available(existing, "") is True


class TestValidateBookingSubmission:
    def test_conflicting_date_is_refused(self):
        existing = [make_booking(date="2024-06-01", status=Status.APPROVED)]

        with pytest.raises(DateConflictError) as exc_info:
            validate_booking_submission(existing, "2024-06-01", "150")

        assert exc_info.value.code == ErrorCode.DATE_CONFLICT
        assert exc_info.value.date == "2024-06-01"
        assert exc_info.value.message == "This date is already booked"

    def test_free_date_yields_pending_booking(self):
        existing = [make_booking(date="2024-06-01", status=Status.APPROVED)]
        now = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)

        valid = validate_booking_submission(existing, "2024-06-02", "150", now=now)

        assert valid.date == "2024-06-02"
        assert valid.status == Status.PENDING
        assert valid.guest_count == 150
        assert valid.created_at == now

    @pytest.mark.parametrize("existing", [[], [make_booking(date="2024-06-01")]])
    def test_missing_date_is_refused(self, existing):
        with pytest.raises(MissingDateError) as exc_info:
            validate_booking_submission(existing, "", "10")

        assert exc_info.value.message == "Please select a booking date"

    def test_malformed_guest_count_becomes_zero(self):
        valid = validate_booking_submission([], "2024-06-02", "lots")
        assert valid.guest_count == 0


class TestTransitions:
    @pytest.mark.parametrize("kind", APPROVABLE)
    def test_pending_decisions(self, workflow, kind):
        assert workflow.transition(kind, Status.PENDING, Action.APPROVE) == Status.APPROVED
        assert workflow.transition(kind, Status.PENDING, Action.REJECT) == Status.REJECTED

    def test_complete_toggle_round_trips(self, workflow):
        completed = workflow.transition(EntityKind.BOOKING, Status.PENDING, Action.COMPLETE_TOGGLE)
        assert completed == Status.COMPLETED
        assert workflow.transition(EntityKind.BOOKING, completed, Action.COMPLETE_TOGGLE) == Status.PENDING

    @pytest.mark.parametrize("kind", [EntityKind.SERVICE_PROVIDER, EntityKind.HALL_MANAGER])
    def test_complete_toggle_is_unsupported_outside_bookings(self, workflow, kind):
        with pytest.raises(UnsupportedActionError):
            workflow.transition(kind, Status.APPROVED, Action.COMPLETE_TOGGLE)

    @pytest.mark.parametrize("current", [Status.APPROVED, Status.REJECTED])
    def test_complete_toggle_needs_pending_or_completed(self, workflow, current):
        with pytest.raises(InvalidTransitionError):
            workflow.transition(EntityKind.BOOKING, current, Action.COMPLETE_TOGGLE)

    @pytest.mark.parametrize("action", [Action.APPROVE, Action.REJECT])
    def test_completed_booking_cannot_be_decided(self, workflow, action):
        with pytest.raises(InvalidTransitionError):
            workflow.transition(EntityKind.BOOKING, Status.COMPLETED, action)

    def test_redecision_overwrites_by_default(self, workflow):
        assert workflow.transition(EntityKind.HALL_MANAGER, Status.APPROVED, Action.REJECT) == Status.REJECTED
        assert workflow.transition(EntityKind.BOOKING, Status.REJECTED, Action.APPROVE) == Status.APPROVED

    def test_strict_redecision_refuses_decided_records(self):
        workflow = BookingWorkflow(strict_redecision=True)

        with pytest.raises(AlreadyDecidedError) as exc_info:
            workflow.transition(EntityKind.SERVICE_PROVIDER, Status.APPROVED, Action.REJECT)

        assert exc_info.value.code == ErrorCode.ALREADY_DECIDED
        assert workflow.transition(EntityKind.SERVICE_PROVIDER, Status.PENDING, Action.REJECT) == Status.REJECTED

    def test_unknown_action_is_unsupported(self, workflow):
        with pytest.raises(UnsupportedActionError):
            workflow.transition(EntityKind.BOOKING, Status.PENDING, "archive")

    def test_accepts_plain_strings(self, workflow):
        assert workflow.transition("bookings", "pending", "approve") == Status.APPROVED

    def test_unknown_kind_is_unsupported(self, workflow):
        with pytest.raises(UnsupportedActionError):
            workflow.transition("weddingHalls", Status.PENDING, Action.APPROVE)


class TestMergeImageEdits:
    def test_removes_by_position_then_appends(self):
        assert merge_image_edits(["a", "b", "c"], ["d"], {1}) == ("a", "c", "d")

    def test_removes_only_the_indexed_duplicate(self):
        assert merge_image_edits(["a", "a", "b"], [], {0}) == ("a", "b")

    def test_out_of_range_indices_are_ignored(self):
        assert merge_image_edits(["a"], ["b"], {5}) == ("a", "b")
