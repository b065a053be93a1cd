"""Tester för Plotly-figurerna (piktogram och fördelningsstapel)."""

import plotly.graph_objects as go
import pytest

from pictogram.figures import build_breakdown_figure, build_pictogram_figure, silhouette_mask_path
from pictogram.models import OverlayPart, PersonUnit


def _fills(fig, color):
    return [s for s in fig.layout.shapes if s.fillcolor == color]


def test_pictogram_figure_draws_every_unit(engine, default_key, params) -> None:
    result = engine.run(default_key, {"rf-hearing", "rf-ldl"})
    fig = build_pictogram_figure(result.units, params)
    colors = params['display']['colors']
    assert isinstance(fig, go.Figure)
    assert len(_fills(fig, colors['inactive'])) == 100
    # 13,1 -> 14 enheter med demensandel, 5,895 -> 6 med modifierbar andel
    assert len(_fills(fig, colors['dementia'])) == 14
    assert len(_fills(fig, colors['preventable'])) == 6
    blue = _fills(fig, colors['selected'])
    assert blue
    total_width = sum(s.x1 - s.x0 for s in blue)
    assert total_width == pytest.approx(result.selected_sum * params['display']['unit_width'])
    assert len(fig.data[0].hovertext) == 100


def test_pictogram_figure_hides_overlay_on_inactive_units(params) -> None:
    part = OverlayPart(offset=0, width=24, factor_id="a", label="A")
    units = tuple(PersonUnit(index=i, baseline_fraction=0.0, preventable_fraction=0.0, overlay_parts=(part,)) for i in range(100))
    fig = build_pictogram_figure(units, params)
    assert _fills(fig, params['display']['colors']['selected']) == []
    assert set(fig.data[0].hovertext) == {"Ej markerad"}


def test_breakdown_figure_stacks_prevalence(engine, default_key, params) -> None:
    result = engine.run(default_key, {"rf-edu"})
    fig = build_breakdown_figure(result, params)
    assert fig.layout.barmode == "stack"
    values = [trace.x[0] for trace in fig.data]
    assert sum(values) == pytest.approx(result.prevalence)
    assert values[0] == pytest.approx(result.addressed)


def _masks(fig):
    return [s for s in fig.layout.shapes if s.type == "path"]


def test_every_unit_gets_a_silhouette_mask(engine, default_key, params) -> None:
    result = engine.run(default_key, set())
    fig = build_pictogram_figure(result.units, params, "w")
    masks = _masks(fig)
    assert len(masks) == 100
    assert all(m.fillrule == "evenodd" for m in masks)
    assert all(m.fillcolor == params['display']['colors']['background'] for m in masks)
    # Cell, huvud och kropp.
    assert masks[0].path.count("M ") == 3


def test_silhouette_depends_on_sex(engine, default_key, params) -> None:
    result = engine.run(default_key, set())
    women = _masks(build_pictogram_figure(result.units, params, "w"))
    men = _masks(build_pictogram_figure(result.units, params, "m"))
    assert women[0].path != men[0].path


@pytest.mark.parametrize("sex", ["m", "w"])
def test_silhouette_stays_inside_cell(sex) -> None:
    path = silhouette_mask_path(48.0, -32.0, 24.0, 28.0, sex)
    points = [tuple(map(float, token.split(","))) for token in path.split() if "," in token]
    assert all(48.0 <= x <= 72.0 for x, _ in points)
    assert all(-60.0 <= y <= -32.0 for _, y in points)
