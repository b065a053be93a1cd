# pictogram/models.py

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


# --- INDATA ---

@dataclass(frozen=True)
class StratumKey:
    """Identifierar ett stratum (kön × åldersgrupp) i den statiska tabellen."""
    sex: str
    age_group: str


@dataclass(frozen=True)
class Stratum:
    """Prevalens per 100 och råa riskfaktorvikter för ett stratum."""
    prevalence: float
    weights: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self):
        # Vikterna ska inte kunna ändras efter att tabellen byggts.
        object.__setattr__(self, 'weights', MappingProxyType(dict(self.weights)))


# --- HÄRLEDDA VÄRDEN ---

@dataclass(frozen=True)
class RiskFactor:
    id: str
    label: str
    value: float  # absoluta personer per 100 inom den modifierbara andelen


@dataclass(frozen=True)
class ResolvedStratum:
    prevalence: float
    preventable_cap: float
    factors: tuple


@dataclass(frozen=True)
class OverlaySegment:
    start: float  # i personenheter, 0..preventable_cap
    end: float
    factor_id: str
    label: str

    @property
    def length(self):
        return self.end - self.start


@dataclass(frozen=True)
class Allocation:
    segments: tuple
    overflow: float


@dataclass(frozen=True)
class OverlayPart:
    offset: float  # lokal x-position inom enheten, 0..unit_width
    width: float
    factor_id: str
    label: str


@dataclass(frozen=True)
class PersonUnit:
    index: int
    baseline_fraction: float
    preventable_fraction: float
    overlay_parts: tuple = ()


@dataclass(frozen=True)
class PictogramResult:
    """Hela utdata för en beräkning. Gäller endast för exakt den (stratum, urval) som gav den."""
    key: StratumKey
    prevalence: float
    preventable_cap: float
    factors: tuple
    selected_factors: tuple
    selected_sum: float
    addressed: float
    remaining: float
    baseline_end: float
    preventable_end: float
    segments: tuple
    overflow: float
    has_overflow: bool
    units: tuple
