"""
PillPal AI (Streamlit frontend)

Purpose: render the medication form and the analysis result. Every state change goes through
form_state.MedicationForm, kept in st.session_state for the lifetime of the browser session.

Usage:
- streamlit run UI_main.py
- API_KEY must be set (environment or .env) for the analysis call.
"""
import streamlit as st

from log import setup_logging
from form_state import MedicationForm

setup_logging()

st.set_page_config(page_title="PillPal AI", page_icon="💊")

if "form" not in st.session_state:
    st.session_state.form = MedicationForm()
form: MedicationForm = st.session_state.form


# --- Callbacks (run before the next rerender) ---
def on_name_change(row_id: str):
    form.edit_field(row_id, "name", st.session_state[f"name-{row_id}"])


def on_dosage_change(row_id: str):
    form.edit_field(row_id, "dosage", st.session_state[f"dosage-{row_id}"])
    form.dismiss_suggestions()


def on_suggestion(row_id: str, suggestion: str):
    form.select_suggestion(row_id, suggestion)
    st.session_state[f"name-{row_id}"] = suggestion


def on_focus(row_id: str):
    form.focus_row(row_id)


def on_remove(row_id: str):
    form.remove_row(row_id)
    form.dismiss_suggestions()


def on_add():
    form.add_row()
    form.dismiss_suggestions()


def on_submit():
    form.dismiss_suggestions()
    with st.spinner("Analyzing..."):
        form.submit()


# --- Header ---
st.title("💬 PillPal AI")
st.caption("Your AI-powered drug interaction assistant.")

st.subheader("Drug Interaction Checker")
st.write("Enter the medications and dosages you'd like to check.")

# --- Medication rows ---
for row in form.rows:
    st.session_state.setdefault(f"name-{row.id}", row.name)
    st.session_state.setdefault(f"dosage-{row.id}", row.dosage)
    name_col, dosage_col, remove_col = st.columns([4, 2, 1], vertical_alignment="bottom")
    with name_col:
        st.text_input(
            "Medication Name",
            key=f"name-{row.id}",
            placeholder="e.g., Lisinopril",
            on_change=on_name_change,
            args=(row.id,),
        )
        if form.active_row_id == row.id and form.suggestions:
            for suggestion in form.suggestions:
                st.button(
                    suggestion,
                    key=f"suggest-{row.id}-{suggestion}",
                    on_click=on_suggestion,
                    args=(row.id, suggestion),
                )
        elif row.name:
            st.button("▾", key=f"focus-{row.id}", help="Show suggestions", on_click=on_focus, args=(row.id,))
    with dosage_col:
        st.text_input(
            "Dosage",
            key=f"dosage-{row.id}",
            placeholder="e.g., 10mg",
            on_change=on_dosage_change,
            args=(row.id,),
        )
    with remove_col:
        st.button("✖", key=f"remove-{row.id}", help="Remove medication", on_click=on_remove, args=(row.id,))

st.button("➕ Add another medication", on_click=on_add)

st.button(
    "Analyzing..." if form.is_loading else "Check Interactions",
    type="primary",
    use_container_width=True,
    disabled=form.is_loading,
    on_click=on_submit,
)

# --- Notices ---
for notice in form.pop_notices():
    st.toast(f"**{notice.title}**: {notice.description}", icon="⚠️")

# --- Result ---
result = form.last_result
if result is not None and not form.is_loading:
    if result.error:
        st.subheader("⚠️ An Error Occurred")
        st.error(result.error)
    else:
        st.subheader("🧪 AI Analysis Result")
        st.markdown(result.summary)

st.markdown("""
<div style='background:#fff3cd; border-left:6px solid #f9a825; padding:12px 18px; border-radius:8px; margin-top:18px; color:#222;'>
<b>Disclaimer:</b> This is not medical advice. Always consult your doctor or pharmacist before changing medications.
</div>
""", unsafe_allow_html=True)
