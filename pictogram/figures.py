import math

import plotly.graph_objects as go

from utils.summary import unit_tooltip
from .raster import is_active, visible_overlay_parts


def _unit_origin(index, display):
    """Övre vänstra hörnet för enhet `index` i rutnätet (rad 0 överst)."""
    columns = display['columns']
    row, col = divmod(index, columns)
    x0 = col * (display['unit_width'] + display['gap'])
    y0 = -row * (display['unit_height'] + display['gap'])
    return x0, y0


# --- SILUETTER ---
# Kontur i en ruta på 24 × 28 (y nedåt); huvudet ritas separat som en cirkel.
SILHOUETTE_BOX = (24.0, 28.0)
SILHOUETTES = {
    "m": {
        "head": (12.0, 4.2, 2.8),
        "body": [
            (10.0, 7.4), (14.0, 7.4), (16.0, 8.2), (17.8, 9.5), (19.0, 17.0), (17.4, 17.3), (16.0, 11.2),
            (15.0, 11.0), (15.0, 16.0), (14.6, 16.0), (14.6, 25.5), (12.5, 25.5), (12.3, 17.0), (11.7, 17.0),
            (11.5, 25.5), (9.4, 25.5), (9.4, 16.0), (9.0, 16.0), (9.0, 11.0), (8.0, 11.2), (6.6, 17.3),
            (5.0, 17.0), (6.2, 9.5), (8.0, 8.2),
        ],
    },
    "w": {
        "head": (12.0, 4.1, 2.9),
        "body": [
            (10.2, 7.4), (13.8, 7.4), (15.6, 8.2), (17.4, 9.5), (18.6, 17.0), (17.0, 17.3), (16.2, 11.4),
            (15.2, 11.6), (16.6, 18.6), (14.8, 18.6), (14.8, 26.0), (12.8, 26.0), (12.8, 18.6), (11.2, 18.6),
            (11.2, 26.0), (9.2, 26.0), (9.2, 18.6), (7.4, 18.6), (8.8, 11.6), (7.8, 11.4), (7.0, 17.3),
            (5.4, 17.0), (6.6, 9.5), (8.4, 8.2),
        ],
    },
}


def _subpath(points):
    return "M " + " L ".join(f"{x:.3f},{y:.3f}" for x, y in points) + " Z"


def silhouette_mask_path(x0, y0, width, height, sex):
    """Cellens rektangel minus personens siluett (evenodd), för att maskera fyllnaderna."""
    shape = SILHOUETTES[sex]
    sx, sy = width / SILHOUETTE_BOX[0], height / SILHOUETTE_BOX[1]

    def to_figure(x, y):
        return x0 + x * sx, y0 - y * sy

    cx, cy, r = shape["head"]
    head = [to_figure(cx + r * math.cos(a), cy + r * math.sin(a))
            for a in (2 * math.pi * k / 16 for k in range(16))]
    body = [to_figure(x, y) for x, y in shape["body"]]
    cell = [(x0, y0), (x0 + width, y0), (x0 + width, y0 - height), (x0, y0 - height)]
    return " ".join(_subpath(points) for points in (cell, head, body))


def _rect(x0, y0, width, height, color, opacity):
    return dict(
        type="rect", xref="x", yref="y",
        x0=x0, x1=x0 + width, y0=y0 - height, y1=y0,
        fillcolor=color, opacity=opacity, line=dict(width=0), layer="above",
    )


def build_pictogram_figure(units, params, sex="w"):
    """Ritar de 100 personerna som siluetter (man eller kvinna) med delvis färgade fyllnader."""
    display = params['display']
    colors = display['colors']
    width, height = display['unit_width'], display['unit_height']

    shapes = []
    centers_x, centers_y, hover = [], [], []
    for unit in units:
        x0, y0 = _unit_origin(unit.index, display)
        shapes.append(_rect(x0, y0, width, height, colors['inactive'], 0.9))

        if is_active(unit):
            baseline_w = max(0.0, min(width, unit.baseline_fraction * width))
            preventable_w = max(0.0, min(width, unit.preventable_fraction * width))
            if baseline_w > 0:
                shapes.append(_rect(x0, y0, baseline_w, height, colors['dementia'], 0.85))
            if preventable_w > 0:
                shapes.append(_rect(x0, y0, preventable_w, height, colors['preventable'], 0.85))
            for part in visible_overlay_parts(unit):
                shapes.append(_rect(x0 + part.offset, y0, part.width, height, colors['selected'], 1.0))

        # Masken täcker allt utom siluetten, så fyllnaderna syns bara inuti personen.
        shapes.append(dict(
            type="path", xref="x", yref="y", path=silhouette_mask_path(x0, y0, width, height, sex),
            fillcolor=colors['background'], fillrule="evenodd", line=dict(width=0), layer="above",
        ))

        centers_x.append(x0 + width / 2)
        centers_y.append(y0 - height / 2)
        hover.append(unit_tooltip(unit))

    rows = -(-len(units) // display['columns'])
    fig = go.Figure(go.Scatter(
        x=centers_x, y=centers_y, mode="markers",
        marker=dict(size=1, opacity=0), hovertext=hover, hoverinfo="text", showlegend=False,
    ))
    fig.update_layout(
        shapes=shapes,
        xaxis=dict(visible=False, range=[-display['gap'], display['columns'] * (width + display['gap'])]),
        yaxis=dict(visible=False, range=[-rows * (height + display['gap']), display['gap']], scaleanchor="x"),
        margin=dict(l=0, r=0, t=0, b=0),
        plot_bgcolor=colors['background'],
        height=560,
    )
    return fig


def build_breakdown_figure(result, params):
    """Stapel över prevalensen: adresserad, återstående modifierbar och ej modifierbar andel."""
    colors = params['display']['colors']
    parts = [
        ("Aktuella riskfaktorer", result.addressed, colors['selected']),
        ("Modifierbar (ej vald)", result.remaining, colors['preventable']),
        ("Ej modifierbar", max(0.0, result.prevalence - result.preventable_cap), colors['dementia']),
    ]
    fig = go.Figure()
    for name, value, color in parts:
        fig.add_trace(go.Bar(
            x=[value], y=["Demens"], name=name, orientation="h", marker_color=color,
            hovertemplate=f"{name}: %{{x:.1f}} / 100<extra></extra>",
        ))
    fig.update_layout(
        barmode="stack", height=160, margin=dict(l=0, r=0, t=10, b=10),
        xaxis=dict(title="Personer per 100", range=[0, max(1.0, result.prevalence)]),
        legend=dict(orientation="h", y=-0.6),
    )
    return fig
