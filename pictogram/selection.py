from dataclasses import dataclass, field, replace

from utils.data_loader import AGE_GROUPS, FACTOR_IDS, SEXES
from .models import StratumKey


@dataclass(frozen=True)
class SelectionState:
    """Användarens val: stratum och valda riskfaktorer.

    Urvalet behålls när kön eller åldersgrupp byts; endast reset tömmer det.
    """
    sex: str
    age_group: str
    selected_ids: frozenset = field(default_factory=frozenset)

    @classmethod
    def default(cls, params):
        defaults = params['defaults']
        return cls(sex=defaults['sex'], age_group=defaults['age_group'])

    @property
    def key(self):
        return StratumKey(self.sex, self.age_group)

    def toggle(self, factor_id, on):
        if factor_id not in FACTOR_IDS:
            raise ValueError(f"Okänd riskfaktor: {factor_id!r}")
        if on:
            selected = self.selected_ids | {factor_id}
        else:
            selected = self.selected_ids - {factor_id}
        return replace(self, selected_ids=frozenset(selected))

    def with_stratum(self, sex, age_group):
        if sex not in SEXES:
            raise ValueError(f"Okänt kön: {sex!r}")
        if age_group not in AGE_GROUPS:
            raise ValueError(f"Okänd åldersgrupp: {age_group!r}")
        return replace(self, sex=sex, age_group=age_group)

    def reset(self, params):
        return SelectionState.default(params)
