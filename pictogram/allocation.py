# pictogram/allocation.py

from .models import Allocation, OverlaySegment
from .stratum import EPSILON


def _clamp(value, low, high):
    return min(high, max(low, value))


def selected_total(selected_factors):
    """Summan av de valda faktorernas värden (negativa värden bidrar inte)."""
    return sum(max(0.0, factor.value) for factor in selected_factors)


def allocate_segments(cap, selected_factors):
    """Placerar valda faktorer som segment inom [0, cap], förankrade från högerkanten.

    Faktorerna staplas från taket och bakåt mot origo i den ordning de ges
    (katalogens deklarationsordning). Den del som skulle hamna under 0 placeras
    inte utan redovisas som överskott.
    """
    segments = []
    cursor = 0.0

    for factor in selected_factors:
        value = max(0.0, factor.value)
        end = _clamp(cap - cursor, 0.0, cap)
        start = _clamp(cap - (cursor + value), 0.0, cap)

        # Faktorer som helt hamnat bortom 0 ger inget segment men flyttar ändå markören.
        if end > start:
            segments.append(OverlaySegment(start=start, end=end, factor_id=factor.id, label=factor.label))

        cursor += value

    # Avrundningsrester när valet precis fyller taket räknas inte som överskott.
    overflow = cursor - cap
    if overflow <= EPSILON:
        overflow = 0.0
    return Allocation(segments=tuple(segments), overflow=overflow)
