# pictogram/stratum.py

import math

from .models import ResolvedStratum, RiskFactor

# --- MODELLKONSTANTER ---
PREVENTABLE_SHARE = 0.45  # Andel av prevalensen som anses påverkbar via riskfaktorer
MAX_EXTENT = 100.0
EPSILON = 1e-9  # Flyttalstolerans; summan av faktorvärden är bara ungefär lika med taket


def _non_negative(value):
    """Saknade, negativa eller ogiltiga vikter räknas som 0."""
    if value is None:
        return 0.0
    value = float(value)
    if math.isnan(value):
        return 0.0
    return max(0.0, value)


def sum_weights(weights, catalog):
    """Summerar de deklarerade faktorernas vikter (negativa golvas till 0)."""
    return sum(_non_negative(weights.get(factor_id)) for factor_id, _ in catalog)


def resolve_stratum(stratum, catalog, preventable_share=PREVENTABLE_SHARE):
    """Räknar ut prevalens, modifierbart tak och absoluta faktorvärden för ett stratum.

    Faktorvärdena skalas så att deras summa blir lika med det modifierbara taket.
    Ordningen följer katalogens deklarationsordning, oavsett stratum.
    """
    prevalence = _non_negative(stratum.prevalence)
    preventable_cap = min(MAX_EXTENT, prevalence * preventable_share)
    total = sum_weights(stratum.weights, catalog) or 1.0

    factors = tuple(
        RiskFactor(
            id=factor_id,
            label=label,
            value=(preventable_cap * _non_negative(stratum.weights.get(factor_id))) / total,
        )
        for factor_id, label in catalog
    )
    return ResolvedStratum(prevalence=prevalence, preventable_cap=preventable_cap, factors=factors)
