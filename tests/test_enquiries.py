import logging
from datetime import datetime

import pytest

from enquiries import (
    APPROVED, IDLE, PENDING, REJECTED, SUBMITTED, EnquiryDesk, InvalidEnquiry, accepted_files, actionable,
    blank_line_item, can_submit, status_label, submit_enquiry, update_status, valid_line_items,
)

NOW = datetime(2025, 3, 14, 9, 30, 0)
HARD_HAT = {"item": "Hard Hat/Helmet", "quantity": 2}


@pytest.fixture
def submitted(enquiry_form):
    return submit_enquiry([], enquiry_form, [HARD_HAT], now=NOW)


def test_empty_item_list_blocks_submission(enquiry_form):
    assert not can_submit(enquiry_form, [])
    with pytest.raises(InvalidEnquiry):
        submit_enquiry([], enquiry_form, [], now=NOW)


def test_blank_items_block_submission(enquiry_form):
    items = [blank_line_item()]
    assert not can_submit(enquiry_form, items)
    with pytest.raises(InvalidEnquiry):
        submit_enquiry([], enquiry_form, items, now=NOW)


def test_missing_required_field_blocks_submission(enquiry_form):
    form = {**enquiry_form, "team_lead": "  "}
    assert not can_submit(form, [HARD_HAT])
    with pytest.raises(InvalidEnquiry, match="team_lead"):
        submit_enquiry([], form, [HARD_HAT], now=NOW)


def test_single_item_submission(enquiry_form, submitted):
    assert can_submit(enquiry_form, [HARD_HAT])
    assert len(submitted) == 1
    enq = submitted[0]
    assert enq["status"] == PENDING
    assert enq["items"] == [HARD_HAT]
    assert enq["employee_id"] == "EMP1001"
    assert enq["submitted_at"] == "2025-03-14T09:30:00"
    assert enq["id"].startswith("ENQ-")


def test_only_valid_line_items_are_kept(enquiry_form):
    items = [
        {"item": "", "quantity": 3},
        {"item": "Safety Vest", "quantity": 0},
        {"item": "Work Gloves", "quantity": "2"},
        {"item": "Knee Pads", "quantity": None},
    ]
    assert valid_line_items(items) == [{"item": "Work Gloves", "quantity": 2}]
    enq = submit_enquiry([], enquiry_form, items, now=NOW)[0]
    assert enq["items"] == [{"item": "Work Gloves", "quantity": 2}]


def test_fractional_quantities_are_not_truncated():
    items = [
        {"item": "Safety Vest", "quantity": 2.7},
        {"item": "Work Gloves", "quantity": 3.0},
        {"item": "Knee Pads", "quantity": "1.5"},
    ]
    assert valid_line_items(items) == [{"item": "Work Gloves", "quantity": 3}]


def test_submission_does_not_mutate_input(enquiry_form, submitted):
    again = submit_enquiry(submitted, enquiry_form, [HARD_HAT], now=NOW)
    assert len(submitted) == 1
    assert len(again) == 2


def test_ids_stay_unique_within_the_same_millisecond(enquiry_form, submitted):
    again = submit_enquiry(submitted, enquiry_form, [HARD_HAT], now=NOW)
    assert len({e["id"] for e in again}) == 2


def test_approve_pending(submitted):
    enq_id = submitted[0]["id"]
    updated = update_status(submitted, enq_id, APPROVED)
    assert updated[0]["status"] == APPROVED
    assert submitted[0]["status"] == PENDING


def test_decided_enquiries_are_final(submitted):
    enq_id = submitted[0]["id"]
    approved = update_status(submitted, enq_id, APPROVED)
    assert update_status(approved, enq_id, REJECTED)[0]["status"] == APPROVED
    assert update_status(approved, enq_id, APPROVED)[0]["status"] == APPROVED


def test_unknown_status_is_rejected(submitted):
    with pytest.raises(ValueError):
        update_status(submitted, submitted[0]["id"], "shipped")


def test_only_pending_enquiries_are_actionable(enquiry_form, submitted):
    both = submit_enquiry(submitted, enquiry_form, [HARD_HAT], now=NOW)
    both = update_status(both, both[0]["id"], APPROVED)
    assert [e["id"] for e in actionable(both)] == [both[1]["id"]]


def test_accepted_files_filters_by_extension(caplog):
    with caplog.at_level(logging.WARNING, logger="enquiries"):
        kept = accepted_files(["report.PDF", "setup.exe", "photo.jpeg", "README", "scan.png"])
    assert kept == ["report.PDF", "photo.jpeg", "scan.png"]
    assert "setup.exe" in caplog.text


def test_status_label():
    assert status_label(PENDING) == "Pending Review"
    assert status_label(REJECTED) == "Rejected"


def test_desk_submit_then_reset_keeps_enquiry(timer, enquiry_form):
    desk = EnquiryDesk(reset_delay=3, timer=timer, clock=lambda: NOW)
    desk.form.update(enquiry_form)
    desk.add_item()
    desk.update_item(0, "item", "Hard Hat/Helmet")
    desk.update_item(0, "quantity", 2)
    desk.set_documents(["damage.pdf", "virus.exe"])
    assert desk.can_submit

    enq = desk.submit()
    assert desk.phase == SUBMITTED
    assert enq["documents"] == ["damage.pdf"]
    assert desk.reset_pending

    timer.advance(1)
    assert not desk.poll()
    assert desk.phase == SUBMITTED

    timer.advance(2)
    assert desk.reset_due
    assert desk.poll()
    assert desk.phase == IDLE
    assert desk.items == []
    assert desk.documents == []
    assert desk.form["employee_id"] == ""
    assert desk.enquiries == [enq]
    assert not desk.reset_pending


def test_desk_teardown_cancels_pending_reset(timer, enquiry_form):
    desk = EnquiryDesk(reset_delay=3, timer=timer, clock=lambda: NOW)
    desk.form.update(enquiry_form)
    desk.add_item()
    desk.update_item(0, "item", "Safety Vest")
    desk.submit()

    desk.teardown()
    assert not desk.reset_pending
    timer.advance(5)
    assert not desk.poll()
    assert desk.phase == SUBMITTED


def test_desk_resubmit_replaces_pending_reset(timer, enquiry_form):
    desk = EnquiryDesk(reset_delay=3, timer=timer, clock=lambda: NOW)
    desk.form.update(enquiry_form)
    desk.add_item()
    desk.update_item(0, "item", "Safety Vest")
    desk.submit()
    timer.advance(2)
    desk.submit()
    timer.advance(2)
    assert not desk.poll()
    assert len(desk.enquiries) == 2
    timer.advance(1)
    assert desk.poll()


def test_desk_blocks_empty_submission(timer):
    desk = EnquiryDesk(timer=timer)
    assert not desk.can_submit
    with pytest.raises(InvalidEnquiry):
        desk.submit()
    assert not desk.reset_pending


def test_desk_review(timer, enquiry_form):
    desk = EnquiryDesk(timer=timer, clock=lambda: NOW)
    desk.form.update(enquiry_form)
    desk.add_item()
    desk.update_item(0, "item", "Ear Protection")
    enq = desk.submit()
    desk.set_status(enq["id"], REJECTED)
    assert desk.enquiries[0]["status"] == REJECTED
    assert desk.actionable == []


def test_draft_version_tracks_row_changes(timer):
    desk = EnquiryDesk(timer=timer)
    start = desk.draft_version
    desk.add_item()
    desk.add_item()
    desk.remove_item(0)
    assert desk.draft_version == start + 3
    assert desk.items == [blank_line_item()]
    with pytest.raises(KeyError):
        desk.update_item(0, "colour", "red")
