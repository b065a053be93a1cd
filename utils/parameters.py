from pictogram.raster import UNIT_WIDTH
from pictogram.stratum import PREVENTABLE_SHARE


def get_default_parameters():
    """Returnerar en strukturerad ordbok med alla standardparametrar för visualiseringen."""
    params = {
        "model": {
            "preventable_share": PREVENTABLE_SHARE
        },
        "display": {
            "unit_width": UNIT_WIDTH,
            "unit_height": 28,
            "columns": 10,
            "gap": 4,
            "colors": {
                "dementia": "#F37458",
                "preventable": "#09AD6F",
                "selected": "#5B72C8",
                "inactive": "#CBD5E1",
                "background": "#FFFFFF"
            }
        },
        "defaults": {
            "sex": "w",
            "age_group": "80-84"
        }
    }
    return params
