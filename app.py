import json
import logging
import sqlite3
from functools import partial

from flask import Flask, jsonify, request, send_from_directory
from flask_migrate import Migrate
from sqlalchemy import event
from sqlalchemy.engine import Engine

from config import get_config
from constants import DEFAULT_LABELS, MAX_LENGTHS, SUPPORTED_LANGUAGES, UNIT_SYSTEMS
from models import db, Label, Recipe
from services import (
    build_bilingual_record,
    compile_search,
    convert_ingredients,
    dump_ingredients,
    format_qty,
    load_ingredients,
    parse_free_text,
    rank_recipes,
    translate,
)
from utils import (
    ImageValidationError,
    save_uploaded_image,
    sanitize_multiline,
    sanitize_rating,
    sanitize_text,
    sanitize_url,
)

app = Flask(__name__)
app.config.from_object(get_config())
app.json.ensure_ascii = False

logging.basicConfig(
    level=app.config['LOG_LEVEL'],
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
log = logging.getLogger(__name__)

db.init_app(app)
migrate = Migrate(app, db)


@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    # Enable SQLite foreign key enforcement so label links cascade
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# ============================================
# HELPERS
# ============================================

def error_response(message, status=400):
    return jsonify({'error': message}), status


def json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def parse_bool(value):
    if isinstance(value, str):
        return value.strip().lower() in ('true', '1', 'yes')
    return bool(value)


def parse_ids(value):
    """Parse '1,2,3' or [1, 2, 3] into a list of positive ints, skipping junk."""
    if isinstance(value, str):
        value = value.split(',')
    ids = []
    for item in value or []:
        try:
            item = int(str(item).strip())
        except ValueError:
            continue
        if item > 0 and item not in ids:
            ids.append(item)
    return ids


def optional_int(value, min_val=0):
    try:
        result = int(value)
    except (ValueError, TypeError):
        return None
    return max(min_val, result)


def ingredients_json(value):
    """Store ingredients as a normalized JSON array whatever shape the client sent."""
    return dump_ingredients(load_ingredients(value))


def translator():
    return partial(translate, url=app.config['TRANSLATE_URL'], timeout=app.config['TRANSLATE_TIMEOUT'])


def apply_labels(recipe, label_ids):
    ids = parse_ids(label_ids)
    recipe.labels = Label.query.filter(Label.id.in_(ids)).order_by(Label.id).all() if ids else []


TEXT_FIELDS = {
    'title_he': MAX_LENGTHS['title'],
    'title_en': MAX_LENGTHS['title'],
    'course': MAX_LENGTHS['course'],
    'cuisine': MAX_LENGTHS['cuisine'],
}

MULTILINE_FIELDS = {
    'description_he': MAX_LENGTHS['description'],
    'description_en': MAX_LENGTHS['description'],
    'instructions_he': MAX_LENGTHS['instructions'],
    'instructions_en': MAX_LENGTHS['instructions'],
}


def apply_recipe_fields(recipe, data):
    """Copy the fields present in a request body onto a recipe."""
    for key, max_length in TEXT_FIELDS.items():
        if key in data:
            setattr(recipe, key, sanitize_text(data[key], max_length))
    for key, max_length in MULTILINE_FIELDS.items():
        if key in data:
            setattr(recipe, key, sanitize_multiline(data[key], max_length))
    for key in ('ingredients_he', 'ingredients_en'):
        if key in data:
            setattr(recipe, key, ingredients_json(data[key]))
    for key in ('prep_time', 'cook_time', 'servings'):
        if key in data:
            setattr(recipe, key, optional_int(data[key]))
    if 'nutrition' in data:
        nutrition = data['nutrition'] if isinstance(data['nutrition'], dict) else {}
        recipe.nutrition = json.dumps({str(k): sanitize_text(v, 50) for k, v in nutrition.items()}, ensure_ascii=False)
    if 'equipment' in data:
        equipment = data['equipment'] if isinstance(data['equipment'], list) else []
        recipe.equipment = json.dumps(
            [{'qty': optional_int(e.get('qty'), 1) or 1, 'name': sanitize_text(e.get('name'), 200)}
             for e in equipment if isinstance(e, dict) and e.get('name')],
            ensure_ascii=False,
        )
    if 'image_url' in data:
        recipe.image_url = sanitize_url(data['image_url'])
    if 'tried' in data:
        recipe.tried = parse_bool(data['tried'])
    if 'tried' in data or 'rating' in data:
        recipe.rating = sanitize_rating(data.get('rating', recipe.rating), recipe.tried)
    if 'label_ids' in data:
        apply_labels(recipe, data['label_ids'])


def display_ingredients(raw, system):
    """Ingredients converted to a unit system, with a ready-to-show line each."""
    rows = []
    for ingredient in convert_ingredients(load_ingredients(raw), system):
        qty = format_qty(ingredient.qty)
        parts = [qty, ingredient.unit] if qty and ingredient.unit != 'pcs' else [qty]
        row = ingredient.to_dict()
        row['display'] = ' '.join(p for p in parts + [ingredient.name] if p)
        rows.append(row)
    return rows


# ============================================
# LABELS
# ============================================

@app.route('/api/labels')
def labels_list():
    return jsonify([label.to_dict() for label in Label.query.order_by(Label.id).all()])


@app.route('/api/labels', methods=['POST'])
def label_add():
    data = json_body()
    name_he = sanitize_text(data.get('name_he'), MAX_LENGTHS['label_name'])
    name_en = sanitize_text(data.get('name_en'), MAX_LENGTHS['label_name'])
    if not name_he or not name_en:
        return error_response('name_he and name_en are required')

    label = Label(name_he=name_he, name_en=name_en, emoji=sanitize_text(data.get('emoji'), MAX_LENGTHS['emoji']))
    db.session.add(label)
    db.session.commit()
    return jsonify(label.to_dict())


# ============================================
# RECIPES
# ============================================

@app.route('/api/recipes')
def recipes_list():
    """
    List recipes, optionally filtered and searched.

    Query args: labels (comma ids, all required), tried (true/false),
    search (free text; label names inside it become label filters) and
    ingredients (comma-separated terms, searched like tokens).
    """
    label_ids = parse_ids(request.args.get('labels', ''))
    tried = request.args.get('tried')
    search = request.args.get('search', '')
    ingredient_terms = [t.strip() for t in request.args.get('ingredients', '').split(',') if t.strip()]

    tokens = []
    if search.strip():
        query = compile_search(search, Label.query.all())
        label_ids = sorted(set(label_ids) | query.label_ids)
        tokens = query.tokens
    tokens += [term for term in ingredient_terms if term not in tokens]

    recipes = Recipe.query
    for label_id in label_ids:
        recipes = recipes.filter(Recipe.labels.any(Label.id == label_id))
    if tried is not None:
        recipes = recipes.filter(Recipe.tried == parse_bool(tried))
    candidates = [r.to_dict() for r in recipes.order_by(Recipe.created_at.desc(), Recipe.id.desc()).all()]

    if not tokens:
        return jsonify(candidates)
    return jsonify(rank_recipes(tokens, candidates, min_confidence=app.config['SEARCH_MIN_CONFIDENCE']))


@app.route('/api/recipes/<int:id>')
def recipe_view(id):
    recipe = db.session.get(Recipe, id)
    if not recipe:
        return error_response('Recipe not found', 404)

    data = recipe.to_dict()
    units = request.args.get('units')
    if units in UNIT_SYSTEMS:
        data['units'] = units
        data['display_ingredients_he'] = display_ingredients(recipe.ingredients_he, units)
        data['display_ingredients_en'] = display_ingredients(recipe.ingredients_en, units)
    return jsonify(data)


@app.route('/api/recipes', methods=['POST'])
def recipe_add():
    data = json_body()
    if not sanitize_text(data.get('title_he')) and not sanitize_text(data.get('title_en')):
        return error_response('At least one title is required')

    recipe = Recipe()
    apply_recipe_fields(recipe, data)
    db.session.add(recipe)
    db.session.commit()
    return jsonify({'id': recipe.id})


@app.route('/api/recipes/<int:id>', methods=['PUT'])
def recipe_edit(id):
    recipe = db.session.get(Recipe, id)
    if not recipe:
        return error_response('Recipe not found', 404)

    apply_recipe_fields(recipe, json_body())
    db.session.commit()
    return jsonify({'success': True})


@app.route('/api/recipes/<int:id>', methods=['DELETE'])
def recipe_delete(id):
    recipe = db.session.get(Recipe, id)
    if not recipe:
        return error_response('Recipe not found', 404)

    db.session.delete(recipe)
    db.session.commit()
    return jsonify({'success': True})


# ============================================
# FREE-TEXT INGESTION
# ============================================

@app.route('/api/parse', methods=['POST'])
def recipe_parse():
    """Preview: parse pasted recipe text into a draft without saving."""
    text = sanitize_multiline(json_body().get('text'), MAX_LENGTHS['freetext'])
    if not text:
        return error_response('Please enter recipe text')
    return jsonify(parse_free_text(text).to_dict())


@app.route('/api/recipes/import', methods=['POST'])
def recipe_import():
    """Parse pasted recipe text, translate it into the other language and save it."""
    data = json_body()
    text = sanitize_multiline(data.get('text'), MAX_LENGTHS['freetext'])
    if not text:
        return error_response('Please enter recipe text')
    lang = data.get('lang', 'he')
    if lang not in SUPPORTED_LANGUAGES:
        return error_response(f"lang must be one of: {', '.join(SUPPORTED_LANGUAGES)}")

    draft = parse_free_text(text)
    if not draft.title or not draft.ingredients:
        return error_response('Title and ingredients are required')

    record = build_bilingual_record(draft, lang, translate_fn=translator())

    recipe = Recipe()
    apply_recipe_fields(recipe, {
        **record,
        'ingredients_he': [i.to_dict() for i in record['ingredients_he']],
        'ingredients_en': [i.to_dict() for i in record['ingredients_en']],
        'nutrition': draft.nutrition,
        'equipment': [e.to_dict() for e in draft.equipment],
        'prep_time': draft.prep_time,
        'cook_time': draft.cook_time,
        'servings': draft.servings,
        'course': draft.course,
        'cuisine': draft.cuisine,
        'image_url': data.get('image_url', ''),
        'tried': data.get('tried', False),
        'rating': data.get('rating'),
        'label_ids': data.get('label_ids', []),
    })
    db.session.add(recipe)
    db.session.commit()

    log.info("Imported recipe %s (%s, %d ingredients)", recipe.id, lang, len(draft.ingredients))
    return jsonify({'id': recipe.id, 'draft': draft.to_dict()})


# ============================================
# TRANSLATION
# ============================================

@app.route('/api/translate', methods=['POST'])
def translate_text():
    data = json_body()
    text, from_lang, to_lang = data.get('text'), data.get('from'), data.get('to')
    if not text or not from_lang or not to_lang:
        return error_response('text, from, to required')
    return jsonify({'translated': translator()(str(text), str(from_lang), str(to_lang))})


# ============================================
# IMAGES
# ============================================

@app.route('/api/upload', methods=['POST'])
def image_upload():
    try:
        filename = save_uploaded_image(request.files.get('image'), app.config['UPLOAD_FOLDER'])
    except ImageValidationError as e:
        return error_response(str(e))
    log.info("Stored upload %s", filename)
    return jsonify({'url': '/uploads/' + filename})


@app.route('/uploads/<path:filename>')
def uploaded_file(filename):
    return send_from_directory(app.config['UPLOAD_FOLDER'], filename)


@app.errorhandler(413)
def upload_too_large(e):
    return error_response('File too large', 413)


# ============================================
# INITIALIZE DATABASE
# ============================================

def seed_labels():
    """Insert the default labels into an empty label table."""
    if Label.query.count() == 0:
        for name_he, name_en, emoji in DEFAULT_LABELS:
            db.session.add(Label(name_he=name_he, name_en=name_en, emoji=emoji))
        db.session.commit()


def init_db():
    with app.app_context():
        db.create_all()
        seed_labels()


if __name__ == '__main__':
    init_db()
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=app.config['PORT'], use_reloader=False)
