"""
Tests for the free-text recipe parser.
"""

import pytest

from constants import UNIT_CODES
from services import EquipmentItem, Ingredient, RecipeDraft, parse_free_text


def test_simple_english_recipe():
    draft = parse_free_text("Pancakes\n200g flour\n2 eggs\n\nMix everything and fry.")

    assert draft.title == 'Pancakes'
    assert draft.ingredients == [Ingredient(200, 'g', 'flour'), Ingredient(2, 'pcs', 'eggs')]
    assert draft.instructions == 'Mix everything and fry.'
    assert draft.description == ''


def test_prose_line_ends_ingredients_without_blank_line():
    draft = parse_free_text("Pancakes\n200g flour\n2 eggs\nMix everything and fry.")

    assert len(draft.ingredients) == 2
    assert draft.instructions == 'Mix everything and fry.'


def test_full_recipe_with_sections():
    text = """# Shakshuka
A spicy North African breakfast.
Prep time: 10 minutes
Cook time: 1 hour
Servings: 4
Cuisine: Israeli

Ingredients:
- 4 eggs
- 2 tbsp olive oil
- 1 onion
- 400g crushed tomatoes

Equipment:
- Large skillet
- Wooden spoon

Instructions:
1. Heat the oil in the skillet.
2. Add onion and tomatoes.

Nutrition:
Calories: 250
Protein: 12g
Fat 15 g
"""
    draft = parse_free_text(text)

    assert draft.title == 'Shakshuka'
    assert draft.description == 'A spicy North African breakfast.'
    assert draft.ingredients == [
        Ingredient(4, 'pcs', 'eggs'),
        Ingredient(2, 'tbsp', 'olive oil'),
        Ingredient(1, 'pcs', 'onion'),
        Ingredient(400, 'g', 'crushed tomatoes'),
    ]
    assert draft.equipment == [EquipmentItem(1, 'Large skillet'), EquipmentItem(1, 'Wooden spoon')]
    assert draft.instructions == '1. Heat the oil in the skillet.\n2. Add onion and tomatoes.'
    assert draft.nutrition == {'calories': '250', 'protein': '12g', 'fat': '15 g'}
    assert draft.prep_time == 10
    assert draft.cook_time == 60
    assert draft.servings == 4
    assert draft.cuisine == 'Israeli'
    assert draft.course == ''


def test_hebrew_recipe():
    text = "עוגת שוקולד\nמרכיבים:\n2 כוסות קמח\n1 כוס סוכר\n3 ביצים\nאופן ההכנה:\nמערבבים הכל ואופים."
    draft = parse_free_text(text)

    assert draft.title == 'עוגת שוקולד'
    assert draft.ingredients == [
        Ingredient(2, 'cup', 'קמח'),
        Ingredient(1, 'cup', 'סוכר'),
        Ingredient(3, 'pcs', 'ביצים'),
    ]
    assert draft.instructions == 'מערבבים הכל ואופים.'


@pytest.mark.parametrize('header', ['Zutaten', 'Ingredienti:', 'Ингредиенты', '**Ingredients**', '## Ingredients (serves 4)'])
def test_ingredient_headers_in_several_languages(header):
    draft = parse_free_text(f"Soup\n{header}\n1 L water")
    assert draft.ingredients == [Ingredient(1, 'L', 'water')]


def test_blank_line_before_prose_starts_instructions():
    draft = parse_free_text("Lemonade\n1 cup lemon juice\n4 cups water\n\nStir together and chill")

    assert draft.ingredients == [Ingredient(1, 'cup', 'lemon juice'), Ingredient(4, 'cup', 'water')]
    assert draft.instructions == 'Stir together and chill'


def test_step_line_starts_instructions():
    draft = parse_free_text("Rice\n1 cup rice\n2 cups water\nStep 1 boil water\nStep 2 add rice")

    assert len(draft.ingredients) == 2
    assert draft.instructions == 'Step 1 boil water\nStep 2 add rice'


def test_long_numbered_line_starts_instructions():
    text = (
        "Toast\nIngredients\n2 slices bread\n"
        "1. Put the bread in the toaster and wait until it is golden brown on both sides\n"
        "2. Butter it"
    )
    draft = parse_free_text(text)

    assert draft.ingredients == [Ingredient(2, 'pcs', 'slices bread')]
    assert draft.instructions.splitlines() == [
        '1. Put the bread in the toaster and wait until it is golden brown on both sides',
        '2. Butter it',
    ]


def test_unknown_line_in_nutrition_falls_through_to_instructions():
    draft = parse_free_text("Soup\nNutrition\nCalories: 100\nServe warm.")

    assert draft.nutrition == {'calories': '100'}
    assert draft.instructions == 'Serve warm.'


def test_markdown_title():
    assert parse_free_text("## Pancakes\n1 egg").title == 'Pancakes'


def test_metadata_in_hebrew():
    draft = parse_free_text("מרק\nזמן הכנה: 20 דקות\nמנות: 6\n1 בצל")

    assert draft.prep_time == 20
    assert draft.servings == 6
    assert draft.ingredients == [Ingredient(1, 'pcs', 'בצל')]


def test_title_falls_back_to_first_ingredient():
    draft = parse_free_text("Ingredients:\n200g flour\n2 eggs")
    assert draft.title == 'flour'

    draft = parse_free_text("2 eggs\n1 cup milk")
    assert draft.title == 'eggs'
    assert len(draft.ingredients) == 2


def test_empty_input_gives_untitled_draft():
    draft = parse_free_text('')

    assert draft == RecipeDraft(title='Untitled Recipe')
    assert parse_free_text(None).title == 'Untitled Recipe'


@pytest.mark.parametrize('text', [
    '\n\n\n',
    '\x00\x01\x02',
    'a' * 200000,
    '1.' * 10000,
    '½' * 500 + '\n' + '/' * 500,
    'Ingredients:\n' + '\n'.join(['- 1 cup x'] * 2000),
    '🍕🍕🍕\n�\n‮',
])
def test_never_raises(text):
    draft = parse_free_text(text)

    assert isinstance(draft, RecipeDraft)
    assert draft.title
    assert all(i.unit in UNIT_CODES for i in draft.ingredients)
    assert isinstance(draft.to_dict(), dict)


def test_hours_and_minutes_are_summed():
    draft = parse_free_text("Stew\nCook time: 1 hr 30 min\nPrep time: 2 hours\n1 kg beef")

    assert draft.cook_time == 90
    assert draft.prep_time == 120
    assert draft.description == ''
    assert draft.ingredients == [Ingredient(1, 'kg', 'beef')]


def test_metadata_after_blank_line_keeps_ingredient_list_open():
    draft = parse_free_text("Stew\n1 kg beef\n\nServings: 4\n2 carrots\n\nCook slowly.")

    assert draft.servings == 4
    assert draft.ingredients == [Ingredient(1, 'kg', 'beef'), Ingredient(2, 'pcs', 'carrots')]
    assert draft.instructions == 'Cook slowly.'


def test_many_blank_lines_after_ingredients():
    draft = parse_free_text("Stew\n1 kg beef" + "\n" * 50000 + "Cook slowly.")

    assert draft.ingredients == [Ingredient(1, 'kg', 'beef')]
    assert draft.instructions == 'Cook slowly.'
