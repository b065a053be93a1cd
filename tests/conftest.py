from pathlib import Path
import sys

import pytest

# Lägg projektroten på import-sökvägen (oberoende av var pytest körs ifrån)
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pictogram.engine import PictogramEngine
from pictogram.models import RiskFactor, StratumKey
from utils.data_loader import STRATA
from utils.parameters import get_default_parameters


@pytest.fixture
def params():
    return get_default_parameters()


@pytest.fixture
def engine(params):
    return PictogramEngine(params)


@pytest.fixture
def default_key():
    return StratumKey("w", "80-84")


@pytest.fixture(params=list(STRATA.keys()), ids=lambda k: f"{k.sex}-{k.age_group}")
def stratum_key(request):
    return request.param


@pytest.fixture
def make_factors():
    """Bygger riskfaktorer f0, f1, ... med givna värden, i ordning."""
    def _make(*values):
        return tuple(RiskFactor(id=f"f{i}", label=f"Faktor {i}", value=v) for i, v in enumerate(values))
    return _make
