"""Tester för användarens urvalstillstånd."""

import pytest

from pictogram.models import StratumKey
from pictogram.selection import SelectionState


def test_default_state(params) -> None:
    state = SelectionState.default(params)
    assert state.key == StratumKey("w", "80-84")
    assert state.selected_ids == frozenset()


def test_toggle_on_and_off(params) -> None:
    state = SelectionState.default(params)
    on = state.toggle("rf-edu", True).toggle("rf-air", True)
    assert on.selected_ids == {"rf-edu", "rf-air"}
    off = on.toggle("rf-edu", False)
    assert off.selected_ids == {"rf-air"}
    # Det ursprungliga tillståndet ändras aldrig.
    assert state.selected_ids == frozenset()


def test_toggle_is_idempotent(params) -> None:
    state = SelectionState.default(params).toggle("rf-edu", True)
    assert state.toggle("rf-edu", True) == state
    assert state.toggle("rf-air", False) == state


def test_stratum_change_preserves_selection(params) -> None:
    state = SelectionState.default(params).toggle("rf-hearing", True)
    moved = state.with_stratum("m", "90+")
    assert moved.key == StratumKey("m", "90+")
    assert moved.selected_ids == {"rf-hearing"}


def test_reset_restores_default(params) -> None:
    state = SelectionState.default(params).toggle("rf-hearing", True).with_stratum("m", "75-79")
    assert state.reset(params) == SelectionState.default(params)


@pytest.mark.parametrize("sex, age_group", [("x", "80-84"), ("m", "60-64")])
def test_unknown_stratum_values_are_rejected(params, sex, age_group) -> None:
    with pytest.raises(ValueError):
        SelectionState.default(params).with_stratum(sex, age_group)


def test_unknown_factor_is_rejected(params) -> None:
    with pytest.raises(ValueError, match="Okänd riskfaktor"):
        SelectionState.default(params).toggle("rf-unknown", True)
