# enquiries.py
"""PPE enquiry form: line items, attachments, submission and review."""
import logging
import os
from datetime import datetime

import config
from forms import DelayedReset, blank_form, missing_fields

logger = logging.getLogger(__name__)

PPE_ITEMS = [
    "Hard Hat/Helmet",
    "Safety Vest",
    "Work Gloves",
    "Safety Boots",
    "Safety Goggles",
    "Ear Protection",
    "Respirator Mask",
    "Fall Protection Harness",
    "High-Visibility Clothing",
    "Knee Pads",
    "Cut-Resistant Gloves",
    "Safety Glasses",
]

ACCEPTED_EXTENSIONS = (".pdf", ".doc", ".docx", ".jpg", ".jpeg", ".png")
ACCEPT_ATTR = ",".join(ACCEPTED_EXTENSIONS)

ENQUIRY_FIELDS = ("employee_id", "employee_name", "team_lead", "contact_number")

PENDING = "pending"
APPROVED = "approved"
REJECTED = "rejected"
DECISIONS = (APPROVED, REJECTED)

IDLE = "idle"
SUBMITTED = "submitted"


class InvalidEnquiry(ValueError):
    pass


def blank_line_item():
    return {"item": "", "quantity": 1}


def _quantity(value):
    # whole numbers only; anything else makes the line item invalid
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    return int(number) if number.is_integer() else 0


def valid_line_items(items):
    return [
        {"item": i.get("item"), "quantity": _quantity(i.get("quantity"))}
        for i in items or []
        if i.get("item") and _quantity(i.get("quantity")) > 0
    ]


def can_submit(form, items):
    if not items:
        return False
    return bool(valid_line_items(items)) and not missing_fields(form, ENQUIRY_FIELDS)


def accepted_files(filenames):
    kept = []
    for name in filenames or []:
        if os.path.splitext(name)[1].lower() in ACCEPTED_EXTENSIONS:
            kept.append(name)
        else:
            logger.warning("Ignoring attachment with unsupported type: %s", name)
    return kept


def _enquiry_id(enquiries, now):
    taken = {e["id"] for e in enquiries}
    stamp = int(now.timestamp() * 1000)
    while f"ENQ-{stamp}" in taken:
        stamp += 1
    return f"ENQ-{stamp}"


def submit_enquiry(enquiries, form, items, documents=(), now=None):
    """Return a new sequence with one pending enquiry appended."""
    if not items:
        raise InvalidEnquiry("Add at least one PPE item")
    valid = valid_line_items(items)
    if not valid:
        raise InvalidEnquiry("No line item has both a PPE item and a quantity")
    missing = missing_fields(form, ENQUIRY_FIELDS)
    if missing:
        raise InvalidEnquiry(f"Missing required fields: {', '.join(missing)}")

    now = now or datetime.now()
    enquiry = {
        "id": _enquiry_id(enquiries, now),
        "employee_id": form["employee_id"].strip(),
        "employee_name": form["employee_name"].strip(),
        "team_lead": form["team_lead"].strip(),
        "contact_number": form["contact_number"].strip(),
        "items": valid,
        "documents": list(documents),
        "status": PENDING,
        "submitted_at": now.isoformat(timespec="seconds"),
    }
    logger.info("Enquiry %s submitted by %s with %d item(s)",
                enquiry["id"], enquiry["employee_id"], len(valid))
    return list(enquiries) + [enquiry]


def update_status(enquiries, enquiry_id, status):
    """Approve or reject a pending enquiry; decided ones are left as they are."""
    if status not in DECISIONS:
        raise ValueError(f"Unknown enquiry status: {status!r}")
    updated = []
    for enq in enquiries:
        if enq["id"] == enquiry_id and enq["status"] == PENDING:
            enq = {**enq, "status": status}
            logger.info("Enquiry %s %s", enquiry_id, status)
        updated.append(enq)
    return updated


def actionable(enquiries):
    return [e for e in enquiries if e["status"] == PENDING]


def status_label(status):
    return "Pending Review" if status == PENDING else status.capitalize()


class EnquiryDesk:
    """Enquiry form state for one view.

    Holds the draft being edited, the submitted enquiries and the pending
    reset that clears the draft a few seconds after a submit. The view calls
    ``poll()`` on every run to apply a reset that has come due, and
    ``teardown()`` when it goes away.
    """

    def __init__(self, reset_delay=None, timer=None, clock=None):
        self.clock = clock or datetime.now
        self.enquiries = []
        self.phase = IDLE
        self.last_submitted = None
        # bumped whenever the draft changes shape, so UIs can key their rows on it
        self.draft_version = 0
        self._reset = DelayedReset(
            config.FORM_RESET_SECONDS if reset_delay is None else reset_delay,
            self.reset,
            timer=timer,
        )
        self.clear_draft()

    def clear_draft(self):
        self.form = blank_form(ENQUIRY_FIELDS)
        self.items = []
        self.documents = []
        self.draft_version += 1

    def add_item(self):
        self.items.append(blank_line_item())
        self.draft_version += 1

    def update_item(self, index, field, value):
        if field not in ("item", "quantity"):
            raise KeyError(field)
        self.items[index] = {**self.items[index], field: value}

    def remove_item(self, index):
        del self.items[index]
        self.draft_version += 1

    def set_documents(self, filenames):
        self.documents = accepted_files(filenames)

    @property
    def can_submit(self):
        return can_submit(self.form, self.items)

    @property
    def reset_pending(self):
        return self._reset.pending

    @property
    def reset_due(self):
        return self._reset.due

    def poll(self):
        """Apply the pending reset if its delay has passed."""
        return self._reset.poll()

    def submit(self):
        self.enquiries = submit_enquiry(self.enquiries, self.form, self.items,
                                        self.documents, now=self.clock())
        self.last_submitted = self.enquiries[-1]
        self.phase = SUBMITTED
        self._reset.start()
        return self.last_submitted

    def reset(self):
        self.phase = IDLE
        self.clear_draft()

    def set_status(self, enquiry_id, status):
        self.enquiries = update_status(self.enquiries, enquiry_id, status)

    @property
    def actionable(self):
        return actionable(self.enquiries)

    def teardown(self):
        self._reset.cancel()
