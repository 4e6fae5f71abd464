# app.py
import streamlit as st
import plotly.express as px

import config
import content
from enquiries import ACCEPTED_EXTENSIONS, ENQUIRY_FIELDS, PPE_ITEMS, SUBMITTED, EnquiryDesk, status_label
from forms import CONTACT_FIELDS, DelayedReset, missing_fields
from stats import STATUS_COLORS, DashboardState

# ======================== APP CONFIG / THEME ========================
st.set_page_config(
    page_title=f"{config.APP_TITLE} | PPE Management",
    page_icon="⛑️",
    layout="wide",
    initial_sidebar_state="expanded",
)

px.defaults.template = "plotly_dark"

RESET_POLL_SECONDS = 0.5

st.markdown("""
<style>
.card { border-left: 4px solid #F59E0B; border-radius: 10px; padding: 14px 16px; background: #1F2937; }
.kpi-title { font-size: 12px; color: #9CA3AF; margin-bottom: 6px; }
.kpi-value { font-size: 26px; font-weight: 700; color: #fff; margin-bottom: 0; }
.lead { background: #F59E0B; color: #111827; border-radius: 4px; padding: 0 6px; font-size: 11px; }
hr { margin: .8rem 0; }
</style>
""", unsafe_allow_html=True)

# ======================== HELPERS ========================
def metric_card(title, value, accent="#F59E0B"):
    st.markdown(f"""
    <div class="card" style="border-left-color:{accent}">
      <div class="kpi-title">{title}</div>
      <div class="kpi-value">{value}</div>
    </div>
    """, unsafe_allow_html=True)


def tile_row(entries):
    cols = st.columns(len(entries))
    for col, e in zip(cols, entries):
        with col:
            st.markdown(f"### {e['icon']} {e['title']}")
            st.caption(e["description"])


@st.fragment(run_every=RESET_POLL_SECONDS)
def reset_watch(due):
    # reruns the whole page once a pending form reset has come due
    if due():
        st.rerun()


def leave_view():
    # state of the page being left goes with it
    desk = st.session_state.pop("desk", None)
    if desk is not None:
        desk.teardown()
    notice = st.session_state.pop("contact_notice", None)
    if notice is not None:
        notice.cancel()
    st.session_state.pop("dashboard", None)

# ======================== SIDEBAR ========================
st.sidebar.header(f"⛑️ {config.APP_TITLE}")
page = st.sidebar.radio("Navigate", [item["label"] for item in content.NAV_ITEMS])

dark_mode = st.sidebar.toggle("🌙 Dark mode", value=True)
if not dark_mode:
    px.defaults.template = "plotly_white"

if st.session_state.get("page") != page:
    leave_view()
    st.session_state.page = page

# ======================== PAGE: HOME ========================
if page == "Home":
    st.markdown(f"<h1 style='text-align:center;color:#F59E0B;'>{content.HERO_TITLE}</h1>", unsafe_allow_html=True)
    st.markdown(f"<p style='text-align:center;font-size:20px;'>{content.HERO_TAGLINE}</p>", unsafe_allow_html=True)
    st.image(content.HERO_IMAGE)
    st.write(content.HOME_INTRO)
    tile_row(content.FEATURES)
    st.info("Use the sidebar to open the **Dashboard** or **PPE Enquiries**.")

# ======================== PAGE: DASHBOARD ========================
elif page == "Dashboard":
    st.subheader("📊 Safety Dashboard")

    if "dashboard" not in st.session_state:
        st.session_state.dashboard = DashboardState()
    state = st.session_state.dashboard

    c1, c2, c3, c4 = st.columns(4)
    with c1: metric_card("👥 Total Employees", f"{state.summary['total']}", "#3B82F6")
    with c2: metric_card("✅ PPE Compliant", f"{state.summary['compliant']}", "#10B981")
    with c3: metric_card("⚠️ Non-Compliant", f"{state.summary['non_compliant']}", "#EF4444")
    with c4: metric_card("🛡️ Team Leads", f"{state.summary['team_leads']}")

    st.divider()

    a, b = st.columns(2)
    a.plotly_chart(px.pie(state.split, names="Status", values="Count", hole=0.5, color="Status",
                          color_discrete_map=STATUS_COLORS, title="Overall PPE Compliance"))
    team_fig = px.bar(state.teams, x="Team", y="Compliance", hover_data=["Team_Lead", "Team_Size"],
                      title="Team Compliance Rate (%)", color_discrete_sequence=["#F59E0B"])
    team_fig.update_yaxes(range=[0, 100])
    b.plotly_chart(team_fig)

    st.subheader("👷 Employee PPE Status")
    f1, f2 = st.columns(2)
    state.set_search(f1.text_input("Search", placeholder="Search employees..."))
    state.set_team_lead(f2.selectbox("Team Lead", state.lead_options))

    filtered = state.filtered
    if filtered.empty:
        st.info(content.NO_EMPLOYEES)
    else:
        view = filtered.assign(Role=filtered["Is_Lead"].map({True: "LEAD", False: ""}))
        st.dataframe(view[["Employee_ID", "Name", "Role", "Contact", "Team_Lead", "PPE_Status"]], hide_index=True)
        st.caption(f"Showing {len(filtered)} of {len(state.roster)} employees")

    st.download_button("📥 Download Current View (CSV)", filtered.to_csv(index=False), "ppe_roster.csv")

# ======================== PAGE: ABOUT ========================
elif page == "About":
    st.subheader(f"🏔️ About {config.APP_TITLE}")
    st.write(content.ABOUT_INTRO)
    st.image(content.ABOUT_IMAGE)

    m, v = st.columns(2)
    with m:
        st.markdown("#### 🎯 Our Mission")
        st.write(content.MISSION)
    with v:
        st.markdown("#### 👁️ Our Vision")
        st.write(content.VISION)

    st.markdown("### Project Objectives")
    g, k = st.columns(2)
    g.markdown("**Primary Goals**\n\n" + "\n".join(f"- {o}" for o in content.OBJECTIVES))
    k.markdown("**Key Features**\n\n" + "\n".join(f"- {f}" for f in content.KEY_FEATURES))

    st.markdown("### Our Values")
    tile_row(content.VALUES)

# ======================== PAGE: CONTACT ========================
elif page == "Contact":
    st.subheader("✉️ Contact Us")
    st.write(content.CONTACT_INTRO)

    info, form_col = st.columns(2)
    with info:
        for c in content.CONTACT_INFO:
            details = f"[{c['details']}]({c['link']})" if c["link"] else c["details"]
            st.markdown(f"**{c['icon']} {c['title']}**  \n{details}")

    if "contact_notice" not in st.session_state:
        st.session_state.contact_notice = DelayedReset(config.FORM_RESET_SECONDS, lambda: None)
    notice = st.session_state.contact_notice
    notice.poll()

    with form_col:
        if notice.pending:
            st.success(f"**Message Sent!** {content.CONTACT_SUCCESS}")
            reset_watch(lambda: notice.due)
        else:
            with st.form("contact", clear_on_submit=True):
                values = {
                    "name": st.text_input("Full Name *", placeholder="Enter your full name"),
                    "email": st.text_input("Email Address *", placeholder="Enter your email address"),
                    "message": st.text_area("Message *", placeholder="Enter your message..."),
                }
                if st.form_submit_button("Send Message"):
                    missing = missing_fields(values, CONTACT_FIELDS)
                    if missing:
                        st.warning("Please fill in: " + ", ".join(missing))
                    else:
                        notice.start()
                        st.rerun()

    st.markdown(f"### {content.WHY_US_TITLE}")
    st.write(content.WHY_US)

# ======================== PAGE: PPE ENQUIRIES ========================
else:
    st.subheader("🦺 PPE Enquiries")
    st.write(content.ENQUIRY_INTRO)

    if "desk" not in st.session_state:
        st.session_state.desk = EnquiryDesk()
    desk = st.session_state.desk
    desk.poll()
    v = desk.draft_version

    form_tab, admin_tab = st.tabs(["Submit Enquiry", f"Admin View ({len(desk.enquiries)})"])

    with form_tab:
        if desk.phase == SUBMITTED:
            enq = desk.last_submitted
            st.success(f"**Enquiry Submitted Successfully!** {content.ENQUIRY_SUCCESS}")
            st.markdown(f"**Enquiry ID:** {enq['id']}  \n**Status:** {status_label(enq['status'])}")
            reset_watch(lambda: desk.reset_due)
        else:
            st.markdown("#### Employee Information")
            labels = {
                "employee_id": ("Employee ID *", "EMP1001"),
                "employee_name": ("Employee Name *", "Enter full name"),
                "team_lead": ("Team Lead *", "Team lead name"),
                "contact_number": ("Contact Number *", "+1 (555) 123-4567"),
            }
            cols = st.columns(2)
            for i, name in enumerate(ENQUIRY_FIELDS):
                label, hint = labels[name]
                desk.form[name] = cols[i % 2].text_input(label, value=desk.form[name], placeholder=hint,
                                                         key=f"enq_{name}_{v}")

            head, add = st.columns([4, 1])
            head.markdown("#### PPE Items Required")
            if add.button("➕ Add Item", key=f"add_{v}"):
                desk.add_item()
                st.rerun()

            if not desk.items:
                st.caption(content.NO_ITEMS)
            options = [""] + PPE_ITEMS
            for i, item in enumerate(list(desk.items)):
                c_item, c_qty, c_rm = st.columns([3, 1, 1])
                choice = c_item.selectbox("PPE Item", options, index=options.index(item["item"]),
                                          format_func=lambda o: o or "Select PPE Item", key=f"item_{v}_{i}")
                qty = c_qty.number_input("Quantity", min_value=1, step=1, value=int(item["quantity"]),
                                         key=f"qty_{v}_{i}")
                desk.update_item(i, "item", choice)
                desk.update_item(i, "quantity", qty)
                if c_rm.button("Remove", key=f"rm_{v}_{i}"):
                    desk.remove_item(i)
                    st.rerun()

            st.markdown("#### Supporting Documents")
            uploads = st.file_uploader(
                "Upload any supporting documents (e.g., damage reports, replacement requests)",
                type=[ext.lstrip(".") for ext in ACCEPTED_EXTENSIONS],
                accept_multiple_files=True,
                key=f"upload_{v}",
            )
            # names only; file contents are never read
            desk.set_documents([f.name for f in uploads or []])

            if st.button("📨 Submit PPE Enquiry", disabled=not desk.can_submit, type="primary"):
                desk.submit()
                st.rerun()

    with admin_tab:
        st.markdown("#### PPE Enquiry Management")
        if not desk.enquiries:
            st.info(content.NO_ENQUIRIES)
        actionable_ids = {e["id"] for e in desk.actionable}
        for enq in desk.enquiries:
            with st.container(border=True):
                st.markdown(f"**{enq['employee_name']}** ({enq['employee_id']}) · Team Lead: {enq['team_lead']}  \n"
                            f"Submitted: {enq['submitted_at'][:10]} · Status: **{enq['status'].capitalize()}**")
                for item in enq["items"]:
                    st.markdown(f"- {item['item']} - Quantity: {item['quantity']}")
                if enq["documents"]:
                    st.caption("Documents: " + ", ".join(enq["documents"]))
                if enq["id"] in actionable_ids:
                    ok, no = st.columns(2)
                    if ok.button("Approve", key=f"approve_{enq['id']}"):
                        desk.set_status(enq["id"], "approved")
                        st.rerun()
                    if no.button("Reject", key=f"reject_{enq['id']}"):
                        desk.set_status(enq["id"], "rejected")
                        st.rerun()
