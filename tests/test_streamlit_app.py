import time
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

import config
import content
from enquiries import APPROVED, IDLE, PENDING, SUBMITTED

APP = str(Path(__file__).resolve().parents[1] / "app.py")
SUBMIT = "📨 Submit PPE Enquiry"


@pytest.fixture
def at():
    app = AppTest.from_file(APP, default_timeout=30)
    app.run()
    return app


@pytest.fixture
def short_reset(monkeypatch):
    monkeypatch.setattr(config, "FORM_RESET_SECONDS", 2)
    return 2


def go(at, page):
    at.sidebar.radio[0].set_value(page).run()
    assert not at.exception


def button(at, label):
    return next(b for b in at.button if b.label == label)


def fill_enquiry(at):
    v = at.session_state["desk"].draft_version
    at.text_input(key=f"enq_employee_id_{v}").set_value("EMP1001")
    at.text_input(key=f"enq_employee_name_{v}").set_value("John Mitchell")
    at.text_input(key=f"enq_team_lead_{v}").set_value("Sarah Connor")
    at.text_input(key=f"enq_contact_number_{v}").set_value("+1 555 0100")
    at.button(key=f"add_{v}").click().run()
    assert not at.exception

    v = at.session_state["desk"].draft_version
    at.selectbox(key=f"item_{v}_0").select_index(1)
    at.number_input(key=f"qty_{v}_0").set_value(2)
    at.run()


def shows(elements, text):
    return any(text in e.value for e in elements)


def test_home_page_renders(at):
    assert not at.exception
    assert at.sidebar.radio[0].value == "Home"


@pytest.mark.parametrize("page", ["About", "Contact"])
def test_static_pages_render(at, page):
    go(at, page)


def test_dashboard_filters(at):
    go(at, "Dashboard")
    assert len(at.dataframe) == 1
    roster = at.session_state["dashboard"].roster
    assert len(roster) == 60

    at.text_input[0].set_value("no such employee").run()
    assert any(content.NO_EMPLOYEES in info.value for info in at.info)


def test_dashboard_is_regenerated_per_visit(at):
    go(at, "Dashboard")
    first = at.session_state["dashboard"]
    go(at, "About")
    assert "dashboard" not in at.session_state
    go(at, "Dashboard")
    assert at.session_state["dashboard"] is not first


def test_enquiry_round_trip(at):
    go(at, "PPE Enquiries")
    assert button(at, SUBMIT).disabled

    fill_enquiry(at)
    assert not button(at, SUBMIT).disabled

    button(at, SUBMIT).click().run()
    desk = at.session_state["desk"]
    assert desk.phase == SUBMITTED
    assert desk.enquiries[0]["items"] == [{"item": "Hard Hat/Helmet", "quantity": 2}]
    assert desk.enquiries[0]["status"] == PENDING
    assert shows(at.success, "Enquiry Submitted")
    desk.teardown()


def test_enquiry_form_comes_back_after_delay(at, short_reset):
    go(at, "PPE Enquiries")
    fill_enquiry(at)
    button(at, SUBMIT).click().run()
    assert shows(at.success, "Enquiry Submitted")
    assert not any(b.label == SUBMIT for b in at.button)

    time.sleep(short_reset + 0.2)
    at.run()
    desk = at.session_state["desk"]
    assert desk.phase == IDLE
    assert not shows(at.success, "Enquiry Submitted")
    assert button(at, SUBMIT).disabled
    v = desk.draft_version
    assert at.text_input(key=f"enq_employee_id_{v}").value == ""
    assert len(desk.enquiries) == 1


def test_leaving_enquiries_cancels_reset(at):
    go(at, "PPE Enquiries")
    fill_enquiry(at)
    button(at, SUBMIT).click().run()
    desk = at.session_state["desk"]
    assert desk.reset_pending

    go(at, "Home")
    assert "desk" not in at.session_state
    assert not desk.reset_pending


def test_admin_approve(at):
    go(at, "PPE Enquiries")
    fill_enquiry(at)
    button(at, SUBMIT).click().run()
    enquiry_id = at.session_state["desk"].enquiries[0]["id"]
    keys = {b.key for b in at.button}
    assert {f"approve_{enquiry_id}", f"reject_{enquiry_id}"} <= keys

    at.button(key=f"approve_{enquiry_id}").click().run()
    assert not at.exception
    assert at.session_state["desk"].enquiries[0]["status"] == APPROVED
    keys = {b.key for b in at.button}
    assert f"approve_{enquiry_id}" not in keys
    assert f"reject_{enquiry_id}" not in keys
    assert shows(at.markdown, "Approved")
    at.session_state["desk"].teardown()


def fill_contact(at, name="Ada Lovelace", email="ada@example.com", message="Need more vests"):
    next(t for t in at.text_input if t.label == "Full Name *").set_value(name)
    next(t for t in at.text_input if t.label == "Email Address *").set_value(email)
    at.text_area[0].set_value(message)
    button(at, "Send Message").click().run()
    assert not at.exception


def test_contact_requires_every_field(at):
    go(at, "Contact")
    fill_contact(at, email="  ")
    assert shows(at.warning, "email")
    assert not shows(at.success, "Message Sent")


def test_contact_success_clears_after_delay(at, short_reset):
    go(at, "Contact")
    fill_contact(at)
    assert shows(at.success, content.CONTACT_SUCCESS)
    assert not any(b.label == "Send Message" for b in at.button)

    time.sleep(short_reset + 0.2)
    at.run()
    assert not shows(at.success, "Message Sent")
    assert any(b.label == "Send Message" for b in at.button)
