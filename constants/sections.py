"""
Free-Text Section Tables

Multilingual patterns for recognising recipe section headers, metadata
fields and nutrition values in pasted recipe text. Each table holds
(language tag, pattern) pairs; adding a language means adding a row.
"""

import re

# Section header words (section -> [(language, pattern)])
SECTION_HEADERS = {
    'ingredients': [
        ('he', r'מרכיבים|חומרים|רכיבים|מצרכים'),
        ('en', r'ingredients?'),
        ('it', r'ingredienti'),
        ('de', r'zutaten'),
        ('nl', r'ingredi[eë]nten'),
        ('ru', r'ингредиенты|состав'),
    ],
    'instructions': [
        ('he', r'הוראות(?: הכנה)?|אופן ה?הכנה|דרך ההכנה|שלבי הכנה|הכנה'),
        ('en', r'instructions|directions|steps|method|preparation'),
        ('it', r'preparazione|procedimento|istruzioni'),
        ('de', r'zubereitung|anleitung'),
        ('nl', r'bereiding(?:swijze)?|instructies'),
        ('ru', r'приготовление|способ приготовления|инструкции'),
    ],
    'nutrition': [
        ('he', r'ערכים תזונתיים|ערך תזונתי|סימון תזונתי'),
        ('en', r'nutrition(?: facts| information| info)?|nutritional (?:information|values)'),
        ('it', r'valori nutrizionali'),
        ('de', r'nährwerte|nährwertangaben'),
        ('nl', r'voedingswaarden?'),
        ('ru', r'пищевая ценность|энергетическая ценность'),
    ],
    'equipment': [
        ('he', r'ציוד|כלים|כלי עבודה'),
        ('en', r'equipment|tools|utensils'),
        ('it', r'attrezzatura|utensili'),
        ('de', r'ausrüstung|utensilien|küchengeräte'),
        ('nl', r'benodigdheden|keukengerei'),
        ('ru', r'оборудование|инвентарь'),
    ],
}

_MINUTES = r'min(?:utes?|s)?\.?|דקות|דק[\'׳]|minuti|minuten|мин(?:ут[аы]?)?\.?'
_HOURS = r'h|hrs?|hours?|שעה|שעות|ore|ora|stunden?|uur|час(?:а|ов)?'

# Metadata fields (field -> [(language, key pattern)])
METADATA_FIELDS = {
    'prep_time': [
        ('he', r'זמן הכנה'),
        ('en', r'prep(?:aration)? time|prep'),
        ('it', r'tempo di preparazione'),
        ('de', r'vorbereitungszeit'),
        ('nl', r'voorbereidingstijd'),
        ('ru', r'время подготовки'),
    ],
    'cook_time': [
        ('he', r'זמן בישול|זמן אפייה'),
        ('en', r'cook(?:ing)? time|bake time|baking time'),
        ('it', r'tempo di cottura'),
        ('de', r'kochzeit|backzeit|garzeit'),
        ('nl', r'kooktijd|baktijd'),
        ('ru', r'время приготовления'),
    ],
    'servings': [
        ('he', r'מספר מנות|כמות מנות|מנות'),
        ('en', r'servings|serves|yield|portions'),
        ('it', r'porzioni|dosi'),
        ('de', r'portionen'),
        ('nl', r'porties|personen'),
        ('ru', r'порции|количество порций'),
    ],
    'course': [
        ('he', r'סוג מנה|מנה'),
        ('en', r'course|meal type'),
        ('it', r'portata'),
        ('de', r'gang'),
        ('nl', r'gang'),
        ('ru', r'блюдо|тип блюда'),
    ],
    'cuisine': [
        ('he', r'מטבח'),
        ('en', r'cuisine'),
        ('it', r'cucina'),
        ('de', r'küche'),
        ('nl', r'keuken'),
        ('ru', r'кухня'),
    ],
}

TIME_FIELDS = ('prep_time', 'cook_time')

# Nutrients, in match order (saturated fat before fat)
NUTRIENTS = [
    ('calories', r'calories|kcal|energy|קלוריות|אנרגיה|calorie|kalorien|energie|калории|калорийность'),
    ('protein', r'proteins?|חלבונים|חלבון|proteine|eiweiß|eiweiss|eiwitten|eiwit|белки|белок'),
    ('carbs', r'carbs|carbohydrates?|פחמימות|carboidrati|kohlenhydrate|koolhydraten|углеводы'),
    ('saturated_fat', r'saturated fat|sat\.? fat|שומן רווי|grassi saturi|gesättigte fettsäuren|verzadigd vet|насыщенные жиры'),
    ('fat', r'total fat|fats?|שומנים|שומן|grassi|fett|vetten|vet|жиры'),
    ('fiber', r'dietary fib(?:er|re)|fib(?:er|re)s?|סיבים תזונתיים|סיבים|ballaststoffe|vezels|клетчатка'),
    ('sugar', r'sugars?|סוכרים|סוכר|zuccheri|zucker|suikers|сахар'),
    ('sodium', r'sodium|נתרן|sodio|natrium|натрий'),
]

_VALUE = r'(\d+(?:[.,]\d+)?\s*(?:[^\W\d_]+|[^\W\d_]*["״\'׳][^\W\d_]*)?)'


def _alternation(rows):
    return '|'.join(f'(?:{pattern})' for _lang, pattern in rows)


def _compile_header(rows):
    # Optional markdown heading/bold, optional parenthetical, optional colon
    return re.compile(
        r'^(?:#+\s*)?(?:\*\*)?(?:' + _alternation(rows) + r')(?:\*\*)?'
        r'(?:\s*\([^)]*\))?\s*:?(?:\*\*)?$',
        re.IGNORECASE,
    )


def _compile_metadata(field, rows):
    if field in TIME_FIELDS:
        value = rf'(\d+)\s*({_MINUTES}|{_HOURS})?(?:\s*(\d+)\s*(?:{_MINUTES}))?'
    elif field == 'servings':
        value = r'(\d+)(?:\s.*)?'
    else:
        value = r'(\S.*)'
    return re.compile(
        r'^(?:[-•*]\s*)?(?:' + _alternation(rows) + r')\s*:\s*' + value + r'$',
        re.IGNORECASE,
    )


HEADER_PATTERNS = {section: _compile_header(rows) for section, rows in SECTION_HEADERS.items()}

METADATA_PATTERNS = {field: _compile_metadata(field, rows) for field, rows in METADATA_FIELDS.items()}

HOURS_PATTERN = re.compile(rf'^(?:{_HOURS})$', re.IGNORECASE)

# "Protein: 10g", "Protein 10 g", "10g protein"
NUTRIENT_PATTERNS = [
    (key, re.compile(
        rf'^(?:[-•*]\s*)?(?:(?:{pattern})\s*[:\-–]?\s*{_VALUE}|{_VALUE}\s+(?:{pattern}))\.?$',
        re.IGNORECASE,
    ))
    for key, pattern in NUTRIENTS
]
