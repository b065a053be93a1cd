import logging

import pandas as pd

from utils.data_loader import FACTOR_CATALOG, STRATA, get_stratum
from .allocation import allocate_segments, selected_total
from .models import PictogramResult
from .raster import is_active, rasterize
from .stratum import EPSILON, MAX_EXTENT, resolve_stratum

logger = logging.getLogger(__name__)


def compute_pictogram(key, selected_ids, params, strata=STRATA, catalog=FACTOR_CATALOG):
    """Kör hela kedjan stratum -> segment -> personenheter för ett (stratum, urval)."""
    stratum = get_stratum(key, strata)
    resolved = resolve_stratum(stratum, catalog, params['model']['preventable_share'])

    # Ordningen styrs av katalogen, inte av i vilken ordning användaren valde.
    selected_ids = frozenset(selected_ids)
    selected_factors = tuple(f for f in resolved.factors if f.id in selected_ids)

    baseline_end = min(MAX_EXTENT, max(0.0, resolved.prevalence))
    preventable_end = min(baseline_end, max(0.0, resolved.preventable_cap))

    allocation = allocate_segments(preventable_end, selected_factors)
    units = rasterize(baseline_end, preventable_end, allocation.segments, params['display']['unit_width'])

    selected_sum = selected_total(selected_factors)
    addressed = min(resolved.preventable_cap, selected_sum)
    has_overflow = selected_sum - preventable_end > EPSILON

    logger.debug(
        "Pictogram %s/%s: %d valda faktorer, tak=%.3f, valt=%.3f, överskott=%.3f",
        key.sex, key.age_group, len(selected_factors), resolved.preventable_cap, selected_sum, allocation.overflow,
    )
    if has_overflow:
        logger.warning(
            "Valda faktorer (%.3f) överskrider den modifierbara andelen (%.3f) för %s/%s",
            selected_sum, preventable_end, key.sex, key.age_group,
        )

    return PictogramResult(
        key=key,
        prevalence=resolved.prevalence,
        preventable_cap=resolved.preventable_cap,
        factors=resolved.factors,
        selected_factors=selected_factors,
        selected_sum=selected_sum,
        addressed=addressed,
        remaining=max(0.0, resolved.preventable_cap - addressed),
        baseline_end=baseline_end,
        preventable_end=preventable_end,
        segments=allocation.segments,
        overflow=allocation.overflow,
        has_overflow=has_overflow,
        units=units,
    )


class PictogramEngine:
    """Håller den statiska konfigurationen och beräknar nya resultat vid varje indataändring."""
    def __init__(self, params: dict, strata=STRATA, catalog=FACTOR_CATALOG):
        self.params = params
        self.strata = strata
        self.catalog = catalog

    def run(self, key, selected_ids):
        return compute_pictogram(key, selected_ids, self.params, self.strata, self.catalog)

    @staticmethod
    def units_frame(result):
        """En rad per personenhet, för tabellvisning och kontroller."""
        rows = [{
            'index': unit.index,
            'baseline_fraction': unit.baseline_fraction,
            'preventable_fraction': unit.preventable_fraction,
            'overlay_parts': len(unit.overlay_parts),
            'factors': ", ".join(dict.fromkeys(part.label for part in unit.overlay_parts)),
            'active': is_active(unit),
        } for unit in result.units]
        return pd.DataFrame(rows).set_index('index')
