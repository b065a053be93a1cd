"""Tester för standardparametrarna."""

from pictogram.raster import UNIT_WIDTH
from pictogram.stratum import PREVENTABLE_SHARE
from utils.parameters import get_default_parameters


def test_defaults_use_model_constants() -> None:
    params = get_default_parameters()
    assert params['model']['preventable_share'] == PREVENTABLE_SHARE
    assert params['display']['unit_width'] == UNIT_WIDTH


def test_each_call_returns_a_fresh_dict() -> None:
    first = get_default_parameters()
    first['model']['preventable_share'] = 0.9
    assert get_default_parameters()['model']['preventable_share'] == PREVENTABLE_SHARE
