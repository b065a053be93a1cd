# app.py

import streamlit as st

# Importera de modulära komponenterna
from utils.parameters import get_default_parameters
from utils.data_loader import AGE_GROUPS, FACTOR_CATALOG, SEXES, SEX_LABEL_SENTENCE, load_strata_frame, stratum_label
from utils.summary import create_factor_table, create_summary, format_percent, overflow_message
from pictogram.engine import PictogramEngine
from pictogram.figures import build_breakdown_figure, build_pictogram_figure
from pictogram.selection import SelectionState

# --- SIDANS GRUNDINSTÄLLNINGAR OCH TITEL ---
st.set_page_config(page_title="Modifierbar demensrisk", layout="wide")

# --- INITIERA SESSION STATE ---
if 'params' not in st.session_state:
    st.session_state['params'] = get_default_parameters()

if 'selection' not in st.session_state:
    st.session_state['selection'] = SelectionState.default(st.session_state['params'])

params = st.session_state['params']
colors = params['display']['colors']


# --- CALLBACKS FÖR ANVÄNDARENS VAL ---
def set_stratum(sex, age_group):
    # Ingen automatisk återställning av riskfaktorerna vid byte av kön/ålder.
    st.session_state['selection'] = st.session_state['selection'].with_stratum(sex, age_group)


def toggle_factor(factor_id):
    on = st.session_state[f"toggle_{factor_id}"]
    st.session_state['selection'] = st.session_state['selection'].toggle(factor_id, on)


def reset():
    st.session_state['selection'] = st.session_state['selection'].reset(params)
    for factor_id, _ in FACTOR_CATALOG:
        st.session_state.pop(f"toggle_{factor_id}", None)


# --- BERÄKNING ---
selection = st.session_state['selection']
engine = PictogramEngine(params)
result = engine.run(selection.key, selection.selected_ids)
summary = create_summary(result)

# --- HUVUDPROGRAM & ANVÄNDARGRÄNSSNITT ---
header_col, reset_col = st.columns([5, 1])
with header_col:
    st.title("👥 Modifierbar demensrisk")
    st.caption(
        "Livstidsprevalens baserad på [Alzheimer Europe](https://www.alzheimer-europe.org/dementia/prevalence-dementia-europe?language_content_entity=en). "
        "Ungefärliga värden för riskfaktorer enligt Livingston et al., The Lancet 2024."
    )
with reset_col:
    st.button("Återställ", key="reset", on_click=reset, use_container_width=True)

message = overflow_message(result)
if message:
    st.warning(message, icon="⚠️")

left, right = st.columns([1, 2])

with left:
    with st.container(border=True):
        st.markdown(f"**{stratum_label(selection.key)}**")
        sex_cols = st.columns(len(SEXES))
        for col, (sex, label) in zip(sex_cols, SEXES.items()):
            col.button(
                label, key=f"sex_{sex}", use_container_width=True,
                type="primary" if sex == selection.sex else "secondary",
                on_click=set_stratum, args=(sex, selection.age_group),
            )
        age_cols = st.columns(len(AGE_GROUPS))
        for col, (age_group, label) in zip(age_cols, AGE_GROUPS.items()):
            col.button(
                label, key=f"age_{age_group}", use_container_width=True,
                type="primary" if age_group == selection.age_group else "secondary",
                on_click=set_stratum, args=(selection.sex, age_group),
            )

    with st.container(border=True):
        st.markdown("**Riskfaktorer**")
        for factor in result.factors:
            on = factor.id in selection.selected_ids
            st.toggle(
                f"{factor.label} ({format_percent(factor.value)} / 100)",
                value=on, key=f"toggle_{factor.id}",
                on_change=toggle_factor, args=(factor.id,),
            )

with right:
    age_label = AGE_GROUPS[selection.age_group]
    st.markdown(
        f"Om du {SEX_LABEL_SENTENCE[selection.sex]} når en ålder av **{age_label} år** är din demensrisk "
        f"<span style='color:{colors['dementia']};font-weight:600'>{format_percent(summary['Prevalence'])} %</span>.<br>"
        f"Genom riktade insatser kan du nu minska den påverkbara delen av din risk med upp till "
        f"<span style='color:{colors['selected']};font-weight:600'>{format_percent(summary['Addressed'])} %</span> "
        f"och därmed nå hela din förebyggande potential på "
        f"<span style='color:{colors['preventable']};font-weight:600'>{format_percent(summary['Preventable_Cap'])} %</span>.",
        unsafe_allow_html=True,
    )

    m1, m2, m3, m4 = st.columns(4)
    m1.metric("Demensrisk", f"{format_percent(summary['Prevalence'])} %")
    m2.metric("Förebyggbar potential", f"{format_percent(summary['Preventable_Cap'])} %")
    m3.metric("Valda riskfaktorer", f"{format_percent(summary['Addressed'])} %")
    m4.metric("Återstående potential", f"{format_percent(summary['Remaining'])} %")

    st.plotly_chart(build_pictogram_figure(result.units, params, selection.sex), use_container_width=True)

    st.subheader("Förklaring")
    legend_cols = st.columns(3)
    for col, (name, color) in zip(legend_cols, [
        ("Demens", colors['dementia']),
        ("Modifierbar totalt", colors['preventable']),
        ("Aktuella riskfaktorer", colors['selected']),
    ]):
        col.markdown(f"<span style='color:{color}'>●</span> {name}", unsafe_allow_html=True)

    st.plotly_chart(build_breakdown_figure(result, params), use_container_width=True)

    with st.expander("Visa datatabeller"):
        st.markdown("**Riskfaktorer för valt stratum**")
        st.dataframe(create_factor_table(result).style.format({'Per 100': "{:.1f}"}), use_container_width=True)
        st.markdown("**Stratumtabell (prevalens och råa vikter)**")
        st.dataframe(load_strata_frame(), use_container_width=True)
        st.markdown("**Personenheter**")
        st.dataframe(engine.units_frame(result), use_container_width=True)
