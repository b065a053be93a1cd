from types import MappingProxyType

import pandas as pd
import streamlit as st

from pictogram.models import Stratum, StratumKey

# --- FAKTORKATALOG ---
# Fast ordning; den styr både listan i gränssnittet och staplingsordningen.
FACTOR_CATALOG = (
    ("rf-edu", "Låg kognitiv aktivitet"),
    ("rf-hearing", "Hörselnedsättning"),
    ("rf-ldl", "Högt LDL-kolesterol"),
    ("rf-depr", "Depression"),
    ("rf-tbi", "Traumatisk hjärnskada"),
    ("rf-inactivity", "Fysisk inaktivitet"),
    ("rf-smoking", "Rökning"),
    ("rf-diabetes", "Diabetes"),
    ("rf-htn", "Högt blodtryck"),
    ("rf-obesity", "Fetma"),
    ("rf-alcohol", "Hög alkoholkonsumtion"),
    ("rf-isolation", "Social isolering"),
    ("rf-air", "Luftföroreningar"),
    ("rf-vision", "Obehandlad synnedsättning"),
)
FACTOR_IDS = tuple(factor_id for factor_id, _ in FACTOR_CATALOG)

# --- STRATA ---
SEXES = {"m": "Män", "w": "Kvinnor"}
SEX_LABEL_SENTENCE = {"m": "som man", "w": "som kvinna"}
AGE_GROUPS = {"75-79": "75–79", "80-84": "80–84", "85-89": "85–89", "90+": "90+"}

# Prevalens per 100 (Alzheimer Europe) och vikter (Livingston et al., Lancet 2024), i katalogordning.
_RAW_STRATA = {
    ("m", "75-79"): (7.0, [0.3, 0.5, 0.5, 0.2, 0.2, 0.2, 0.2, 0.2, 0.2, 0.1, 0.1, 0.3, 0.2, 0.2]),
    ("m", "80-84"): (10.7, [0.5, 0.7, 0.7, 0.3, 0.3, 0.3, 0.2, 0.2, 0.2, 0.1, 0.1, 0.5, 0.3, 0.2]),
    ("m", "85-89"): (16.3, [0.7, 1.1, 1.1, 0.5, 0.5, 0.4, 0.4, 0.4, 0.4, 0.2, 0.2, 0.7, 0.4, 0.4]),
    ("m", "90+"): (29.7, [1.3, 2.1, 2.0, 0.9, 0.9, 0.7, 0.7, 0.7, 0.6, 0.4, 0.3, 1.4, 0.8, 0.6]),
    ("w", "75-79"): (8.9, [0.4, 0.6, 0.6, 0.3, 0.3, 0.2, 0.2, 0.2, 0.2, 0.1, 0.1, 0.4, 0.2, 0.2]),
    ("w", "80-84"): (13.1, [0.6, 0.9, 0.9, 0.4, 0.4, 0.3, 0.3, 0.3, 0.3, 0.2, 0.1, 0.6, 0.3, 0.3]),
    ("w", "85-89"): (24.9, [1.1, 1.7, 1.7, 0.7, 0.7, 0.6, 0.6, 0.6, 0.5, 0.3, 0.2, 1.1, 0.6, 0.5]),
    ("w", "90+"): (44.8, [2.0, 3.1, 3.1, 1.3, 1.3, 1.1, 1.0, 1.0, 1.0, 0.6, 0.4, 2.0, 1.2, 1.0]),
}

STRATA = MappingProxyType({
    StratumKey(sex, age_group): Stratum(prevalence=prevalence, weights=dict(zip(FACTOR_IDS, weights)))
    for (sex, age_group), (prevalence, weights) in _RAW_STRATA.items()
})


def get_stratum(key, strata=STRATA):
    """Slår upp ett stratum. Okända nycklar ligger utanför den uppräknade mängden och avvisas."""
    try:
        return strata[key]
    except KeyError:
        raise ValueError(f"Okänt stratum: kön={key.sex!r}, åldersgrupp={key.age_group!r}") from None


def stratum_label(key):
    """Rubrik för ett stratum, t.ex. 'Kvinnor 80–84'."""
    return f"{SEXES.get(key.sex, key.sex)} {AGE_GROUPS.get(key.age_group, key.age_group)}"


@st.cache_data
def load_strata_frame():
    """Returnerar stratumtabellen som en DataFrame med en rad per stratum."""
    rows = []
    for key, stratum in STRATA.items():
        row = {'Kön': SEXES[key.sex], 'Åldersgrupp': AGE_GROUPS[key.age_group], 'Prevalens': stratum.prevalence}
        row.update({label: stratum.weights.get(factor_id, 0.0) for factor_id, label in FACTOR_CATALOG})
        rows.append(row)
    return pd.DataFrame(rows).set_index(['Kön', 'Åldersgrupp'])
