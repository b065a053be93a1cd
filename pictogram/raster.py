# pictogram/raster.py

import math

import numpy as np

from .models import OverlayPart, PersonUnit

# --- MODELLKONSTANTER ---
NUM_UNITS = 100
UNIT_WIDTH = 24  # Ritkoordinaternas bredd för en person


def _cell_fractions(extent):
    """Andel av varje cell [i, i+1) som täcks av intervallet [0, extent]."""
    starts = np.arange(NUM_UNITS, dtype=float)
    return np.maximum(0.0, np.minimum(starts + 1.0, extent) - starts)


def rasterize(baseline_end, preventable_end, segments, unit_width=UNIT_WIDTH):
    """Diskretiserar linjen [0, 100] till 100 personenheter.

    Varje enhet får sin andel demens (baslinje), modifierbar andel och de
    överläggsdelar som segmenten ger inom just den cellen. Anroparen ansvarar
    för att 0 <= preventable_end <= baseline_end <= 100.
    """
    baseline = _cell_fractions(baseline_end)
    preventable = _cell_fractions(preventable_end)

    # En lista per enhet; delar läggs till i segmentordning.
    parts = [[] for _ in range(NUM_UNITS)]
    for seg in segments:
        first = math.floor(seg.start)
        last = math.ceil(seg.end)
        for i in range(first, last):
            if i < 0 or i >= NUM_UNITS:
                continue
            clip_start = max(i, seg.start)
            clip_end = min(i + 1, seg.end)
            if clip_end <= clip_start:
                continue
            parts[i].append(OverlayPart(
                offset=(clip_start - i) * unit_width,
                width=(clip_end - clip_start) * unit_width,
                factor_id=seg.factor_id,
                label=seg.label,
            ))

    return tuple(
        PersonUnit(
            index=i,
            baseline_fraction=float(baseline[i]),
            preventable_fraction=float(preventable[i]),
            overlay_parts=tuple(parts[i]),
        )
        for i in range(NUM_UNITS)
    )


# --- PRESENTATIONSREGLER ---

def is_active(unit):
    return unit.baseline_fraction > 0


def visible_overlay_parts(unit):
    """Överlägg visas bara på enheter som har en demensandel."""
    return unit.overlay_parts if is_active(unit) else ()
