"""
Unit Conversion Service

Converts ingredient quantities between metric and imperial for display.
Stored recipes always keep their original units.
"""

from dataclasses import replace

from constants import METRIC_UNITS, IMPERIAL_UNITS, UNIT_CONVERSIONS


def convert_ingredient(ingredient, target_system):
    """
    Convert an ingredient to the 'metric' or 'imperial' system.

    Ingredients without a quantity or unit, units already in the target
    system, and units with no conversion (pcs, tsp, cup...) pass through.
    """
    if not ingredient.qty or not ingredient.unit:
        return ingredient

    unit = ingredient.unit
    if target_system == 'imperial' and unit in METRIC_UNITS:
        to_unit, factor = UNIT_CONVERSIONS[unit]
    elif target_system == 'metric' and unit in IMPERIAL_UNITS:
        to_unit, factor = UNIT_CONVERSIONS[unit]
    else:
        return ingredient

    return replace(ingredient, qty=round(ingredient.qty * factor, 2), unit=to_unit)


def convert_ingredients(ingredients, target_system):
    return [convert_ingredient(i, target_system) for i in ingredients]


def format_qty(qty):
    """Format a quantity for display; '' for zero/None so the caller can omit it."""
    qty = round(qty or 0, 2)
    if not qty:
        return ''
    if qty == int(qty):
        return str(int(qty))
    return str(qty)
