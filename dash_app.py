# dash_app.py
import logging

from dash import Dash, html, dcc, Input, Output, State, ALL, ctx, no_update, dash_table
from dash.exceptions import PreventUpdate
import pandas as pd
import plotly.express as px

import config
import content
from enquiries import (
    ACCEPT_ATTR, ENQUIRY_FIELDS, IDLE, PENDING, PPE_ITEMS, SUBMITTED, accepted_files,
    actionable, blank_line_item, can_submit, status_label, submit_enquiry, update_status,
)
from forms import CONTACT_FIELDS, missing_fields
from roster import COLUMNS, generate_roster
from stats import STATUS_COLORS, compliance_split, filter_roster, summary, team_compliance, team_lead_options

logger = logging.getLogger(__name__)

# ---------------------- THEME ----------------------
AMBER = "#F59E0B"
PANEL = {"background": "#1F2937", "borderRadius": "10px", "padding": "18px 20px", "marginBottom": "16px"}
INPUT = {"width": "100%", "padding": "8px 10px", "background": "#374151", "color": "#fff",
         "border": "1px solid #4B5563", "borderRadius": "6px"}
BUTTON = {"background": AMBER, "color": "#111827", "border": "none", "borderRadius": "6px",
          "padding": "8px 16px", "fontWeight": "600", "cursor": "pointer"}
ROW = {"display": "flex", "gap": "12px", "flexWrap": "wrap"}
HIDDEN = {"display": "none"}
SHOWN = {"display": "block"}

STATUS_BADGE = {
    PENDING: {"background": "rgba(234,179,8,.2)", "color": "#FACC15"},
    "approved": {"background": "rgba(34,197,94,.2)", "color": "#4ADE80"},
    "rejected": {"background": "rgba(239,68,68,.2)", "color": "#F87171"},
}

RESET_MS = int(config.FORM_RESET_SECONDS * 1000)

px.defaults.template = "plotly_dark"

# ---------------------- APP ----------------------
app = Dash(__name__, title=f"{config.APP_TITLE} | PPE Management", suppress_callback_exceptions=True)
server = app.server  # for gunicorn


def card(title, value, accent="#3B82F6"):
    return html.Div([
        html.Div(title, style={"fontSize": "13px", "color": "#9CA3AF", "marginBottom": "6px"}),
        html.Div(value, style={"fontSize": "28px", "fontWeight": "700", "color": "#fff"})
    ], style={**PANEL, "borderLeft": f"4px solid {accent}", "flex": "1", "minWidth": "200px"})


def field(label, component):
    return html.Div([
        html.Label(label, style={"display": "block", "fontSize": "13px", "color": "#D1D5DB", "marginBottom": "4px"}),
        component,
    ], style={"flex": "1", "minWidth": "240px"})


def page_header(title, intro=None):
    parts = [html.H1(title, style={"textAlign": "center", "marginBottom": "8px"})]
    if intro:
        parts.append(html.P(intro, style={"textAlign": "center", "color": "#9CA3AF", "maxWidth": "760px",
                                          "margin": "0 auto 24px auto"}))
    return html.Div(parts)


def tiles(entries):
    return html.Div([
        html.Div([
            html.Div(e["icon"], style={"fontSize": "32px"}),
            html.H3(e["title"], style={"margin": "8px 0"}),
            html.P(e["description"], style={"color": "#9CA3AF"}),
        ], style={**PANEL, "flex": "1", "minWidth": "220px", "textAlign": "center"})
        for e in entries
    ], style=ROW)

# ---------------------- NAVBAR ----------------------
def navbar(pathname):
    links = [
        dcc.Link(item["label"], href=item["path"], style={
            "color": AMBER if item["path"] == pathname else "#D1D5DB",
            "textDecoration": "none", "fontWeight": "600" if item["path"] == pathname else "400",
            "borderBottom": f"2px solid {AMBER}" if item["path"] == pathname else "2px solid transparent",
            "paddingBottom": "2px",
        })
        for item in content.NAV_ITEMS
    ]
    return html.Nav([
        dcc.Link(f"⛑️ {config.APP_TITLE}", href="/", style={"color": "#fff", "fontSize": "20px",
                                                         "fontWeight": "700", "textDecoration": "none"}),
        html.Div(links, style={"display": "flex", "gap": "24px", "flexWrap": "wrap"}),
    ], style={"display": "flex", "justifyContent": "space-between", "alignItems": "center",
              "padding": "14px 0", "borderBottom": "1px solid #374151", "marginBottom": "24px"})

# ---------------------- STATIC PAGES ----------------------
def home_page():
    hero = html.Div([
        html.H1(content.HERO_TITLE, style={"fontSize": "48px", "marginBottom": "8px"}),
        html.P(content.HERO_TAGLINE, style={"fontSize": "20px", "color": "#E5E7EB"}),
        html.Div([
            dcc.Link("View Dashboard", href="/dashboard", style={**BUTTON, "textDecoration": "none"}),
            dcc.Link("PPE Enquiries", href="/ppe-enquiries",
                     style={**BUTTON, "background": "transparent", "color": AMBER,
                            "border": f"1px solid {AMBER}", "textDecoration": "none"}),
        ], style={"display": "flex", "gap": "12px", "justifyContent": "center", "marginTop": "20px"}),
    ], style={"textAlign": "center", "padding": "120px 20px", "borderRadius": "12px", "marginBottom": "32px",
              "backgroundImage": f"linear-gradient(rgba(0,0,0,.6), rgba(0,0,0,.6)), url('{content.HERO_IMAGE}')",
              "backgroundSize": "cover", "backgroundPosition": "center"})
    return html.Div([
        hero,
        page_header("Safety at Every Level", content.HOME_INTRO),
        tiles(content.FEATURES),
    ])


def about_page():
    return html.Div([
        page_header(f"About {config.APP_TITLE}", content.ABOUT_INTRO),
        html.Div(style={"height": "320px", "borderRadius": "12px", "marginBottom": "24px",
                        "backgroundImage": f"linear-gradient(rgba(0,0,0,.4), rgba(0,0,0,.4)), url('{content.ABOUT_IMAGE}')",
                        "backgroundSize": "cover", "backgroundPosition": "center"}),
        html.Div([
            html.Div([html.H3("Our Mission"), html.P(content.MISSION, style={"color": "#9CA3AF"})],
                     style={**PANEL, "flex": "1", "minWidth": "280px"}),
            html.Div([html.H3("Our Vision"), html.P(content.VISION, style={"color": "#9CA3AF"})],
                     style={**PANEL, "flex": "1", "minWidth": "280px"}),
        ], style=ROW),
        html.Div([
            html.H2("Project Objectives"),
            html.Div([
                html.Div([html.H4("Primary Goals"), html.Ul([html.Li(o) for o in content.OBJECTIVES])],
                         style={"flex": "1", "minWidth": "280px"}),
                html.Div([html.H4("Key Features"), html.Ul([html.Li(k) for k in content.KEY_FEATURES])],
                         style={"flex": "1", "minWidth": "280px"}),
            ], style=ROW),
        ], style=PANEL),
        html.H2("Our Values", style={"textAlign": "center"}),
        tiles(content.VALUES),
    ])


def not_found_page(pathname):
    return html.Div([
        page_header("Page not found", f"Nothing lives at {pathname}."),
        html.Div(dcc.Link("Back to home", href="/", style={**BUTTON, "textDecoration": "none"}),
                 style={"textAlign": "center"}),
    ])

# ---------------------- DASHBOARD ----------------------
TABLE_COLUMNS = [
    {"name": "Employee ID", "id": "Employee_ID"},
    {"name": "Name", "id": "Name"},
    {"name": "Role", "id": "Role"},
    {"name": "Contact", "id": "Contact"},
    {"name": "Team Lead", "id": "Team_Lead"},
    {"name": "PPE Status", "id": "PPE_Status"},
]


def table_rows(df: pd.DataFrame):
    rows = df.assign(Role=df["Is_Lead"].map({True: "LEAD", False: ""}))
    return rows.to_dict("records")


def compliance_figures(roster: pd.DataFrame):
    split = compliance_split(roster)
    pie = px.pie(split, names="Status", values="Count", hole=0.5, color="Status",
                 color_discrete_map=STATUS_COLORS, title="Overall PPE Compliance")
    teams = team_compliance(roster)
    bar = px.bar(teams, x="Team", y="Compliance", hover_data=["Team_Lead", "Team_Size"],
                 title="Team Compliance Rate (%)", color_discrete_sequence=[AMBER])
    bar.update_yaxes(range=[0, 100])
    bar.update_xaxes(tickangle=-45)
    return pie, bar


def dashboard_page(rng=None):
    roster = generate_roster(rng)
    stats = summary(roster)
    pie, bar = compliance_figures(roster)

    cards = html.Div([
        card("👥 Total Employees", f"{stats['total']}", "#3B82F6"),
        card("✅ PPE Compliant", f"{stats['compliant']}", "#10B981"),
        card("⚠️ Non-Compliant", f"{stats['non_compliant']}", "#EF4444"),
        card("🛡️ Team Leads", f"{stats['team_leads']}", AMBER),
    ], style=ROW)

    controls = html.Div([
        field("Search", dcc.Input(id="dash-search", type="text", value="", debounce=False,
                                  placeholder="Search employees...", style=INPUT)),
        field("Team Lead", dcc.Dropdown(id="dash-lead", value="All", clearable=False,
                                        options=[{"label": o, "value": o} for o in team_lead_options(roster)])),
    ], style={**ROW, "marginBottom": "12px"})

    table = dash_table.DataTable(
        id="dash-table",
        columns=TABLE_COLUMNS,
        data=table_rows(roster),
        page_size=15,
        sort_action="native",
        style_table={"overflowX": "auto"},
        style_header={"backgroundColor": "#374151", "color": "#fff", "fontWeight": "600"},
        style_cell={"backgroundColor": "#1F2937", "color": "#E5E7EB", "border": "1px solid #374151",
                    "textAlign": "left", "padding": "8px"},
        style_data_conditional=[
            {"if": {"filter_query": '{Role} = "LEAD"'}, "backgroundColor": "#2B3442", "fontWeight": "600"},
            {"if": {"filter_query": '{PPE_Status} = "Compliant"', "column_id": "PPE_Status"}, "color": "#34D399"},
            {"if": {"filter_query": '{PPE_Status} = "Non-Compliant"', "column_id": "PPE_Status"}, "color": "#F87171"},
        ],
    )

    return html.Div([
        # generated once per visit, discarded when the page is left
        dcc.Store(id="roster-store", data=roster.to_dict("records")),
        page_header("Safety Dashboard"),
        cards,
        html.Div([
            html.Div(dcc.Graph(figure=pie), style={**PANEL, "flex": "1", "minWidth": "380px"}),
            html.Div(dcc.Graph(figure=bar), style={**PANEL, "flex": "1", "minWidth": "380px"}),
        ], style=ROW),
        html.Div([
            html.H3("Employee PPE Status"),
            controls,
            html.Div(id="dash-count", style={"color": "#9CA3AF", "fontSize": "13px", "marginBottom": "6px"}),
            table,
            html.Div(id="dash-empty", style={"textAlign": "center", "color": "#9CA3AF", "padding": "16px"}),
        ], style=PANEL),
    ])


@app.callback(
    Output("dash-table", "data"),
    Output("dash-empty", "children"),
    Output("dash-count", "children"),
    Input("dash-search", "value"),
    Input("dash-lead", "value"),
    State("roster-store", "data"),
)
def update_table(search, lead, records):
    roster = pd.DataFrame(records or [], columns=COLUMNS)
    filtered = filter_roster(roster, search, lead)
    empty = content.NO_EMPLOYEES if filtered.empty else None
    return table_rows(filtered), empty, f"Showing {len(filtered)} of {len(roster)} employees"

# ---------------------- CONTACT ----------------------
def contact_page():
    channels = html.Div([
        html.Div([
            html.Span(c["icon"], style={"fontSize": "22px", "marginRight": "10px"}),
            html.Div([
                html.Div(c["title"], style={"fontWeight": "600"}),
                html.A(c["details"], href=c["link"], style={"color": AMBER}) if c["link"]
                else html.Div(c["details"], style={"color": "#9CA3AF"}),
            ]),
        ], style={**PANEL, "display": "flex", "alignItems": "center"})
        for c in content.CONTACT_INFO
    ], style={"flex": "1", "minWidth": "300px"})

    form = html.Div([
        html.Div([
            field("Full Name *", dcc.Input(id="contact-name", type="text", value="",
                                           placeholder="Enter your full name", style=INPUT)),
            field("Email Address *", dcc.Input(id="contact-email", type="email", value="",
                                               placeholder="Enter your email address", style=INPUT)),
            field("Message *", dcc.Textarea(id="contact-message", value="", placeholder="Enter your message...",
                                            style={**INPUT, "height": "140px"})),
            html.Button("Send Message", id="contact-send", n_clicks=0, disabled=True,
                        style={**BUTTON, "marginTop": "12px"}),
        ], id="contact-form", style={**ROW, "flexDirection": "column"}),
        html.Div([
            html.H3("Message Sent!", style={"color": "#4ADE80"}),
            html.P(content.CONTACT_SUCCESS, style={"color": "#9CA3AF"}),
        ], id="contact-success", style=HIDDEN),
        dcc.Interval(id="contact-reset-timer", interval=RESET_MS, n_intervals=0, disabled=True),
    ], style={**PANEL, "flex": "1", "minWidth": "300px"})

    return html.Div([
        page_header("Contact Us", content.CONTACT_INTRO),
        html.Div([channels, form], style=ROW),
        html.Div([html.H2(content.WHY_US_TITLE), html.P(content.WHY_US, style={"color": "#9CA3AF"})],
                 style={**PANEL, "textAlign": "center"}),
    ])


@app.callback(
    Output("contact-send", "disabled"),
    Input("contact-name", "value"),
    Input("contact-email", "value"),
    Input("contact-message", "value"),
)
def toggle_contact_send(name, email, message):
    return bool(missing_fields({"name": name, "email": email, "message": message}, CONTACT_FIELDS))


def contact_transition(trigger, clicked, form):
    if trigger == "contact-send":
        if not clicked or missing_fields(form, CONTACT_FIELDS):
            raise PreventUpdate
        logger.info("Contact message from %s <%s> (not delivered)", form["name"], form["email"])
        return HIDDEN, SHOWN, False, 0, no_update, no_update, no_update
    if trigger == "contact-reset-timer" and clicked:
        return {**ROW, "flexDirection": "column"}, HIDDEN, True, no_update, "", "", ""
    raise PreventUpdate


@app.callback(
    Output("contact-form", "style"),
    Output("contact-success", "style"),
    Output("contact-reset-timer", "disabled"),
    Output("contact-reset-timer", "n_intervals"),
    Output("contact-name", "value"),
    Output("contact-email", "value"),
    Output("contact-message", "value"),
    Input("contact-send", "n_clicks"),
    Input("contact-reset-timer", "n_intervals"),
    State("contact-name", "value"),
    State("contact-email", "value"),
    State("contact-message", "value"),
    prevent_initial_call=True,
)
def send_contact(n_clicks, n_intervals, name, email, message):
    clicked = ctx.triggered[0]["value"] if ctx.triggered else None
    return contact_transition(ctx.triggered_id, clicked, {"name": name, "email": email, "message": message})

# ---------------------- PPE ENQUIRIES ----------------------
def item_rows(items):
    if not items:
        return [html.P(content.NO_ITEMS, style={"color": "#9CA3AF", "textAlign": "center"})]
    return [
        html.Div([
            field("PPE Item", dcc.Dropdown(id={"type": "enq-item", "index": i}, value=item["item"] or None,
                                           placeholder="Select PPE Item",
                                           options=[{"label": p, "value": p} for p in PPE_ITEMS])),
            field("Quantity", dcc.Input(id={"type": "enq-qty", "index": i}, type="number", min=1, step=1,
                                        value=item["quantity"], style=INPUT)),
            html.Button("Remove", id={"type": "enq-remove", "index": i}, n_clicks=0,
                        style={**BUTTON, "background": "#DC2626", "color": "#fff", "alignSelf": "flex-end"}),
        ], style={**ROW, "background": "#374151", "padding": "12px", "borderRadius": "8px", "marginBottom": "8px"})
        for i, item in enumerate(items)
    ]


def current_items(items, qtys):
    return [{"item": i or "", "quantity": q} for i, q in zip(items or [], qtys or [])]


def edit_items(trigger, clicked, items):
    if trigger == "enq-reset-timer":
        if not clicked:
            raise PreventUpdate
        return []
    if trigger == "enq-add":
        return items + [blank_line_item()]
    if isinstance(trigger, dict) and trigger.get("type") == "enq-remove" and clicked:
        return [item for i, item in enumerate(items) if i != trigger["index"]]
    raise PreventUpdate


def edit_files(trigger, clicked, filenames, files):
    if trigger == "enq-reset-timer":
        if not clicked:
            raise PreventUpdate
        return []
    if trigger == "enq-upload" and filenames:
        names = [filenames] if isinstance(filenames, str) else filenames
        return files + accepted_files(names)
    if isinstance(trigger, dict) and trigger.get("type") == "enq-file-remove" and clicked:
        return [f for i, f in enumerate(files) if i != trigger["index"]]
    raise PreventUpdate


def enquiry_card(enq):
    badge = STATUS_BADGE.get(enq["status"], {})
    parts = [
        html.Div([
            html.Div([
                html.H4(f"{enq['employee_name']} ({enq['employee_id']})", style={"margin": "0"}),
                html.Div(f"Team Lead: {enq['team_lead']}", style={"color": "#9CA3AF"}),
                html.Div(f"Submitted: {enq['submitted_at'][:10]}", style={"color": "#9CA3AF", "fontSize": "12px"}),
            ]),
            html.Span(enq["status"].capitalize(), style={**badge, "padding": "4px 10px", "borderRadius": "999px",
                                                        "height": "fit-content"}),
        ], style={"display": "flex", "justifyContent": "space-between"}),
        html.Div([html.Div(f"• {i['item']} - Quantity: {i['quantity']}") for i in enq["items"]],
                 style={"margin": "10px 0"}),
    ]
    if enq["documents"]:
        parts.append(html.Div([html.Span(d, style={"background": "#374151", "padding": "2px 8px",
                                                   "borderRadius": "4px", "marginRight": "6px"})
                               for d in enq["documents"]]))
    if enq["status"] == PENDING:
        parts.append(html.Div([
            html.Button("Approve", id={"type": "enq-approve", "index": enq["id"]}, n_clicks=0,
                        style={**BUTTON, "background": "#16A34A", "color": "#fff"}),
            html.Button("Reject", id={"type": "enq-reject", "index": enq["id"]}, n_clicks=0,
                        style={**BUTTON, "background": "#DC2626", "color": "#fff"}),
        ], style={"display": "flex", "gap": "8px", "marginTop": "10px"}))
    return html.Div(parts, id=f"enq-card-{enq['id']}", style={**PANEL, "background": "#374151"})


def enquiries_page():
    inputs = html.Div([
        field("Employee ID *", dcc.Input(id="enq-employee_id", type="text", value="", placeholder="EMP1001", style=INPUT)),
        field("Employee Name *", dcc.Input(id="enq-employee_name", type="text", value="",
                                           placeholder="Enter full name", style=INPUT)),
        field("Team Lead *", dcc.Input(id="enq-team_lead", type="text", value="",
                                       placeholder="Team lead name", style=INPUT)),
        field("Contact Number *", dcc.Input(id="enq-contact_number", type="tel", value="",
                                            placeholder="+1 (555) 123-4567", style=INPUT)),
    ], style=ROW)

    form = html.Div([
        html.Div([html.H3("Employee Information"), inputs], style=PANEL),
        html.Div([
            html.Div([
                html.H3("PPE Items Required", style={"margin": "0"}),
                html.Button("Add Item", id="enq-add", n_clicks=0, style=BUTTON),
            ], style={"display": "flex", "justifyContent": "space-between", "marginBottom": "12px"}),
            html.Div(item_rows([]), id="enq-items"),
        ], style=PANEL),
        html.Div([
            html.H3("Supporting Documents"),
            dcc.Upload(
                html.Div(["Upload any supporting documents (e.g., damage reports, replacement requests) ",
                          html.A("Choose Files", style={"color": AMBER, "cursor": "pointer"})]),
                id="enq-upload", multiple=True, accept=ACCEPT_ATTR,
                style={"border": "2px dashed #4B5563", "borderRadius": "8px", "padding": "24px", "textAlign": "center"},
            ),
            html.Div(id="enq-file-list", style={"marginTop": "10px"}),
        ], style=PANEL),
        html.Div(html.Button("Submit PPE Enquiry", id="enq-submit", n_clicks=0, disabled=True,
                             style={**BUTTON, "padding": "12px 28px"}),
                 style={"textAlign": "center"}),
    ], id="enq-form")

    success = html.Div(id="enq-success", style=HIDDEN)

    return html.Div([
        dcc.Store(id="enq-store", data=[]),
        dcc.Store(id="enq-files", data=[]),
        dcc.Store(id="enq-phase", data={"state": IDLE}),
        dcc.Interval(id="enq-reset-timer", interval=RESET_MS, n_intervals=0, disabled=True),
        page_header("PPE Enquiries", content.ENQUIRY_INTRO),
        dcc.Tabs(id="enq-tabs", value="form", children=[
            dcc.Tab(label="Submit Enquiry", value="form", children=[form, success]),
            dcc.Tab(id="enq-admin-tab", label="Admin View (0)", value="admin", children=[
                html.H2("PPE Enquiry Management"),
                html.Div(id="enq-admin"),
            ]),
        ], colors={"primary": AMBER, "background": "#1F2937", "border": "#374151"}),
    ])


@app.callback(
    Output("enq-items", "children"),
    Input("enq-add", "n_clicks"),
    Input({"type": "enq-remove", "index": ALL}, "n_clicks"),
    Input("enq-reset-timer", "n_intervals"),
    State({"type": "enq-item", "index": ALL}, "value"),
    State({"type": "enq-qty", "index": ALL}, "value"),
    prevent_initial_call=True,
)
def update_items(add_clicks, remove_clicks, n_intervals, items, qtys):
    clicked = ctx.triggered[0]["value"] if ctx.triggered else None
    return item_rows(edit_items(ctx.triggered_id, clicked, current_items(items, qtys)))


@app.callback(
    Output("enq-files", "data"),
    Input("enq-upload", "filename"),
    Input({"type": "enq-file-remove", "index": ALL}, "n_clicks"),
    Input("enq-reset-timer", "n_intervals"),
    State("enq-files", "data"),
    prevent_initial_call=True,
)
def update_files(filenames, remove_clicks, n_intervals, files):
    # only names are kept; upload contents are never read
    clicked = ctx.triggered[0]["value"] if ctx.triggered else None
    return edit_files(ctx.triggered_id, clicked, filenames, files or [])


@app.callback(
    Output("enq-file-list", "children"),
    Input("enq-files", "data"),
)
def render_files(files):
    if not files:
        return None
    return [
        html.Div([
            html.Span(f"📄 {name}"),
            html.Button("✕", id={"type": "enq-file-remove", "index": i}, n_clicks=0,
                        style={"background": "transparent", "color": "#F87171", "border": "none", "cursor": "pointer"}),
        ], style={"display": "flex", "justifyContent": "space-between", "background": "#374151",
                  "padding": "6px 10px", "borderRadius": "6px", "marginBottom": "4px"})
        for i, name in enumerate(files)
    ]


@app.callback(
    Output("enq-submit", "disabled"),
    *[Input(f"enq-{f}", "value") for f in ENQUIRY_FIELDS],
    Input({"type": "enq-item", "index": ALL}, "value"),
    Input({"type": "enq-qty", "index": ALL}, "value"),
)
def toggle_submit(employee_id, employee_name, team_lead, contact_number, items, qtys):
    form = dict(zip(ENQUIRY_FIELDS, (employee_id, employee_name, team_lead, contact_number)))
    return not can_submit(form, current_items(items, qtys))


def enquiry_transition(trigger, clicked, form, items, files, enquiries, now=None):
    if trigger == "enq-submit":
        if not clicked or not can_submit(form, items):
            raise PreventUpdate
        updated = submit_enquiry(enquiries, form, items, files, now=now)
        phase = {"state": SUBMITTED, "enquiry_id": updated[-1]["id"], "status": updated[-1]["status"]}
        return (updated, phase, False, 0) + (no_update,) * len(ENQUIRY_FIELDS)
    if trigger == "enq-reset-timer" and clicked:
        return (no_update, {"state": IDLE}, True, no_update) + ("",) * len(ENQUIRY_FIELDS)
    raise PreventUpdate


@app.callback(
    Output("enq-store", "data"),
    Output("enq-phase", "data"),
    Output("enq-reset-timer", "disabled"),
    Output("enq-reset-timer", "n_intervals"),
    *[Output(f"enq-{f}", "value") for f in ENQUIRY_FIELDS],
    Input("enq-submit", "n_clicks"),
    Input("enq-reset-timer", "n_intervals"),
    *[State(f"enq-{f}", "value") for f in ENQUIRY_FIELDS],
    State({"type": "enq-item", "index": ALL}, "value"),
    State({"type": "enq-qty", "index": ALL}, "value"),
    State("enq-files", "data"),
    State("enq-store", "data"),
    prevent_initial_call=True,
)
def submit_or_reset(n_clicks, n_intervals, employee_id, employee_name, team_lead, contact_number,
                    items, qtys, files, enquiries):
    clicked = ctx.triggered[0]["value"] if ctx.triggered else None
    form = dict(zip(ENQUIRY_FIELDS, (employee_id, employee_name, team_lead, contact_number)))
    return enquiry_transition(ctx.triggered_id, clicked, form, current_items(items, qtys),
                              files or [], enquiries or [])


@app.callback(
    Output("enq-form", "style"),
    Output("enq-success", "style"),
    Output("enq-success", "children"),
    Input("enq-phase", "data"),
)
def show_phase(phase):
    if not phase or phase.get("state") != SUBMITTED:
        return SHOWN, HIDDEN, None
    message = [
        html.H3("Enquiry Submitted Successfully!", style={"color": "#4ADE80"}),
        html.P(content.ENQUIRY_SUCCESS, style={"color": "#9CA3AF"}),
        html.P([html.Strong("Enquiry ID: "), phase["enquiry_id"]]),
        html.P([html.Strong("Status: "), status_label(phase.get("status", PENDING))]),
    ]
    return HIDDEN, {**PANEL, "textAlign": "center"}, message


@app.callback(
    Output("enq-admin", "children"),
    Output("enq-admin-tab", "label"),
    Input("enq-store", "data"),
)
def render_admin(enquiries):
    enquiries = enquiries or []
    label = f"Admin View ({len(enquiries)})"
    if not enquiries:
        return html.P(content.NO_ENQUIRIES, style={"textAlign": "center", "color": "#9CA3AF"}), label
    return [enquiry_card(e) for e in enquiries], label


def decide(trigger, clicked, enquiries):
    if not isinstance(trigger, dict) or not clicked:
        raise PreventUpdate
    if trigger["index"] not in {e["id"] for e in actionable(enquiries)}:
        raise PreventUpdate
    status = "approved" if trigger["type"] == "enq-approve" else "rejected"
    return update_status(enquiries, trigger["index"], status)


@app.callback(
    Output("enq-store", "data", allow_duplicate=True),
    Input({"type": "enq-approve", "index": ALL}, "n_clicks"),
    Input({"type": "enq-reject", "index": ALL}, "n_clicks"),
    State("enq-store", "data"),
    prevent_initial_call=True,
)
def review_enquiry(approve_clicks, reject_clicks, enquiries):
    clicked = ctx.triggered[0]["value"] if ctx.triggered else None
    return decide(ctx.triggered_id, clicked, enquiries or [])

# ---------------------- ROUTING ----------------------
PAGES = {
    "/": home_page,
    "/dashboard": dashboard_page,
    "/about": about_page,
    "/contact": contact_page,
    "/ppe-enquiries": enquiries_page,
}

app.layout = html.Div([
    dcc.Location(id="url"),
    html.Div(id="navbar"),
    html.Div(id="page"),
], style={"maxWidth": "1200px", "margin": "0 auto", "padding": "10px 16px", "background": "#111827",
          "color": "#fff", "minHeight": "100vh", "fontFamily": "Inter, system-ui, sans-serif"})


@app.callback(
    Output("navbar", "children"),
    Output("page", "children"),
    Input("url", "pathname"),
)
def render_page(pathname):
    pathname = pathname or "/"
    page = PAGES.get(pathname)
    if page is None:
        logger.info("No page for %s", pathname)
        return navbar(pathname), not_found_page(pathname)
    return navbar(pathname), page()

# ---------------------- MAIN ----------------------
if __name__ == "__main__":
    config.configure_logging()
    app.run(host=config.DASH_HOST, port=config.DASH_PORT, debug=config.DASH_DEBUG)
