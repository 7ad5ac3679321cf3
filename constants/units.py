"""
Unit Constants and Conversion Tables

Contains the closed set of unit codes, the English/Hebrew unit synonym table,
and the metric/imperial conversion factors used for display.
"""

# Closed set of unit codes an ingredient may carry
UNIT_CODES = {'g', 'kg', 'ml', 'L', 'tsp', 'tbsp', 'cup', 'oz', 'lbs', 'fl oz', 'cups', 'pcs'}

# Fallback for absent or unrecognized units
DEFAULT_UNIT = 'pcs'

# Unit mappings for ingredient parsing (lowercase input -> unit code)
UNIT_MAPPINGS = {
    # Weight
    'g': 'g', 'gr': 'g', 'gram': 'g', 'grams': 'g', 'gramm': 'g', 'grammi': 'g',
    'גרם': 'g', 'גר': 'g', "גר'": 'g', 'גר׳': 'g',
    'kg': 'kg', 'kilo': 'kg', 'kilos': 'kg', 'kilogram': 'kg', 'kilograms': 'kg',
    'קילו': 'kg', 'ק"ג': 'kg', 'ק״ג': 'kg', 'קג': 'kg',
    'oz': 'oz', 'ounce': 'oz', 'ounces': 'oz', 'אונקיה': 'oz', 'אונקיות': 'oz',
    'lbs': 'lbs', 'lb': 'lbs', 'pound': 'lbs', 'pounds': 'lbs',
    # Volume
    'ml': 'ml', 'milliliter': 'ml', 'milliliters': 'ml', 'millilitre': 'ml', 'millilitres': 'ml',
    'מ"ל': 'ml', 'מ״ל': 'ml', 'מל': 'ml',
    'l': 'L', 'liter': 'L', 'liters': 'L', 'litre': 'L', 'litres': 'L', 'ליטר': 'L',
    'fl oz': 'fl oz', 'fl. oz': 'fl oz', 'fl. oz.': 'fl oz', 'fluid ounce': 'fl oz', 'fluid ounces': 'fl oz',
    'tsp': 'tsp', 'teaspoon': 'tsp', 'teaspoons': 'tsp', 'כפית': 'tsp', 'כפיות': 'tsp',
    'tbsp': 'tbsp', 'tablespoon': 'tbsp', 'tablespoons': 'tbsp', 'tbs': 'tbsp', 'כף': 'tbsp', 'כפות': 'tbsp',
    'cup': 'cup', 'cups': 'cup', 'כוס': 'cup', 'כוסות': 'cup',
    # Count
    'pcs': 'pcs', 'pc': 'pcs', 'piece': 'pcs', 'pieces': 'pcs',
    'יחידות': 'pcs', 'יחידה': 'pcs', "יח'": 'pcs', 'יח׳': 'pcs',
}

# Units partition for display conversion
METRIC_UNITS = {'g', 'kg', 'ml', 'L'}
IMPERIAL_UNITS = {'oz', 'lbs', 'fl oz', 'cups'}

UNIT_SYSTEMS = {'metric', 'imperial'}

# Unit conversion factors (unit -> (target unit, factor))
UNIT_CONVERSIONS = {
    # metric -> imperial
    'g': ('oz', 1 / 28.3495),
    'kg': ('lbs', 2.20462),
    'ml': ('fl oz', 1 / 29.5735),
    'L': ('cups', 4.22675),
    # imperial -> metric
    'oz': ('g', 28.3495),
    'lbs': ('kg', 1 / 2.20462),
    'fl oz': ('ml', 29.5735),
    'cups': ('L', 1 / 4.22675),
}

# Unicode fraction characters mapping
UNICODE_FRACTIONS = {
    '½': 0.5,    # ½
    '⅓': 1/3,    # ⅓
    '⅔': 2/3,    # ⅔
    '¼': 0.25,   # ¼
    '¾': 0.75,   # ¾
    '⅛': 0.125,  # ⅛
}
