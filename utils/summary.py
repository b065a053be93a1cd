import pandas as pd

from pictogram.raster import is_active, visible_overlay_parts


def format_percent(value):
    """Formaterar ett värde med en decimal och decimalkomma, t.ex. 13,1."""
    return f"{value:.1f}".replace('.', ',')


def create_summary(result):
    """Skapar de sammanfattande nyckeltalen för visning, avrundade till en decimal."""
    return {
        'Prevalence': round(result.prevalence, 1),
        'Preventable_Cap': round(result.preventable_cap, 1),
        'Selected_Sum': round(result.selected_sum, 1),
        'Addressed': round(result.addressed, 1),
        'Remaining': round(result.remaining, 1),
        'Overflow': round(result.overflow, 1),
        'Has_Overflow': result.has_overflow,
    }


def unit_tooltip(unit):
    if not is_active(unit):
        return "Ej markerad"
    parts = visible_overlay_parts(unit)
    if not parts:
        return "Demens"
    labels = list(dict.fromkeys(part.label for part in parts))
    return f"Demens (del) – aktuella riskfaktorer: {', '.join(labels)}"


def overflow_message(result):
    """Informationstext när valda faktorer överskrider den modifierbara andelen, annars None."""
    if not result.has_overflow:
        return None
    return (
        f"Summan av valda faktorer är {format_percent(result.selected_sum)}. "
        f"Det överskrider den modifierbara andelen ({format_percent(result.preventable_end)}). "
        f"Överskottet visas inte: {format_percent(result.overflow)}."
    )


def create_factor_table(result):
    selected_ids = {factor.id for factor in result.selected_factors}
    return pd.DataFrame([{
        'id': factor.id,
        'Riskfaktor': factor.label,
        'Per 100': factor.value,
        'Vald': factor.id in selected_ids,
    } for factor in result.factors]).set_index('id')
