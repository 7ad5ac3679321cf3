"""
HTTP API tests against an in-memory database.
Translation is stubbed on the app module; no request leaves the machine.
"""

import io

import pytest
from PIL import Image

import app as app_module


def create(client, **fields):
    response = client.post('/api/recipes', json=fields)
    assert response.status_code == 200
    return response.get_json()['id']


@pytest.fixture
def fake_translate(monkeypatch):
    sent = []

    def _translate(text, from_lang, to_lang, url=None, timeout=None):
        sent.append((text, from_lang, to_lang))
        return f'[{to_lang}] {text}'

    monkeypatch.setattr(app_module, 'translate', _translate)
    return sent


def test_default_labels_are_seeded(client):
    labels = client.get('/api/labels').get_json()

    assert len(labels) == 11
    assert labels[0] == {'id': 1, 'name_he': 'ארוחת בוקר', 'name_en': 'Breakfast', 'emoji': '☀️'}


def test_add_label(client):
    response = client.post('/api/labels', json={'name_he': 'טבעוני', 'name_en': 'Vegan', 'emoji': '🌱'})

    assert response.status_code == 200
    assert response.get_json()['name_en'] == 'Vegan'
    assert client.post('/api/labels', json={'name_en': 'Vegan'}).status_code == 400


def test_recipe_crud(client):
    recipe_id = create(
        client,
        title_en='Pancakes',
        title_he='פנקייק',
        ingredients_en='[{"qty": 200, "unit": "grams", "name": "flour"}]',
        instructions_en='Mix\r\nFry',
        label_ids=[1],
    )

    recipe = client.get(f'/api/recipes/{recipe_id}').get_json()
    assert recipe['title_en'] == 'Pancakes'
    assert recipe['instructions_en'] == 'Mix\nFry'
    assert recipe['ingredients_en'] == '[{"qty": 200, "unit": "g", "name": "flour"}]'
    assert [label['name_en'] for label in recipe['labels']] == ['Breakfast']
    assert recipe['tried'] is False
    assert recipe['rating'] is None

    response = client.put(f'/api/recipes/{recipe_id}', json={'title_en': 'Fluffy Pancakes', 'label_ids': [3]})
    assert response.get_json() == {'success': True}
    recipe = client.get(f'/api/recipes/{recipe_id}').get_json()
    assert recipe['title_en'] == 'Fluffy Pancakes'
    assert recipe['title_he'] == 'פנקייק'
    assert [label['id'] for label in recipe['labels']] == [3]

    assert client.delete(f'/api/recipes/{recipe_id}').get_json() == {'success': True}
    assert client.get(f'/api/recipes/{recipe_id}').status_code == 404


def test_recipe_requires_a_title(client):
    response = client.post('/api/recipes', json={'title_en': '   '})

    assert response.status_code == 400
    assert 'error' in response.get_json()


@pytest.mark.parametrize('method', ['get', 'put', 'delete'])
def test_missing_recipe_is_404(client, method):
    assert getattr(client, method)('/api/recipes/999').status_code == 404


def test_rating_only_kept_while_tried(client):
    recipe_id = create(client, title_en='Soup', rating=8)
    assert client.get(f'/api/recipes/{recipe_id}').get_json()['rating'] is None

    client.put(f'/api/recipes/{recipe_id}', json={'tried': True, 'rating': 15})
    recipe = client.get(f'/api/recipes/{recipe_id}').get_json()
    assert recipe['tried'] is True
    assert recipe['rating'] == 10

    client.put(f'/api/recipes/{recipe_id}', json={'tried': False})
    assert client.get(f'/api/recipes/{recipe_id}').get_json()['rating'] is None


def test_unsafe_image_url_is_dropped(client):
    recipe_id = create(client, title_en='Soup', image_url='javascript:alert(1)')
    assert client.get(f'/api/recipes/{recipe_id}').get_json()['image_url'] == ''


def test_search_by_label_and_typo(client):
    pancakes = create(client, title_en='Pancakes', ingredients_en=[{'qty': 2, 'unit': 'pcs', 'name': 'eggs'}], label_ids=[1])
    curry = create(client, title_en='Curry', ingredients_en=[{'qty': 300, 'unit': 'g', 'name': 'chicken breast'}], label_ids=[3])

    results = client.get('/api/recipes', query_string={'search': 'Breakfast'}).get_json()
    assert [r['id'] for r in results] == [pancakes]

    results = client.get('/api/recipes', query_string={'search': 'chiken'}).get_json()
    assert [r['id'] for r in results] == [curry]

    results = client.get('/api/recipes', query_string={'ingredients': 'eggs'}).get_json()
    assert [r['id'] for r in results] == [pancakes]

    results = client.get('/api/recipes', query_string={'labels': '3'}).get_json()
    assert [r['id'] for r in results] == [curry]


def test_list_filters_by_tried(client):
    tried = create(client, title_en='Tried', tried=True)
    create(client, title_en='Untried')

    results = client.get('/api/recipes', query_string={'tried': 'true'}).get_json()
    assert [r['id'] for r in results] == [tried]
    assert len(client.get('/api/recipes').get_json()) == 2


def test_view_in_imperial_units(client):
    recipe_id = create(client, title_en='Bread', ingredients_en=[
        {'qty': 200, 'unit': 'g', 'name': 'flour'},
        {'qty': 2, 'unit': 'pcs', 'name': 'eggs'},
    ])

    recipe = client.get(f'/api/recipes/{recipe_id}', query_string={'units': 'imperial'}).get_json()
    assert recipe['units'] == 'imperial'
    assert recipe['display_ingredients_en'][0] == {'qty': 7.05, 'unit': 'oz', 'name': 'flour', 'display': '7.05 oz flour'}
    assert recipe['display_ingredients_en'][1]['display'] == '2 eggs'
    assert recipe['display_ingredients_he'] == []
    # Stored units are untouched
    assert '"unit": "g"' in recipe['ingredients_en']


def test_parse_preview(client):
    response = client.post('/api/parse', json={'text': 'Pancakes\n200g flour\n2 eggs\n\nMix everything and fry.'})
    draft = response.get_json()

    assert draft['title'] == 'Pancakes'
    assert draft['ingredients'] == [
        {'qty': 200, 'unit': 'g', 'name': 'flour'},
        {'qty': 2, 'unit': 'pcs', 'name': 'eggs'},
    ]
    assert draft['instructions'] == 'Mix everything and fry.'
    assert client.post('/api/parse', json={'text': '  '}).status_code == 400


def test_import_translates_and_saves(client, fake_translate):
    response = client.post('/api/recipes/import', json={
        'text': 'Pancakes\nServings: 4\n200g flour\n2 eggs\n\nMix everything and fry.',
        'lang': 'en',
        'label_ids': [1],
    })
    assert response.status_code == 200
    body = response.get_json()
    assert body['draft']['servings'] == 4

    recipe = client.get(f"/api/recipes/{body['id']}").get_json()
    assert recipe['title_en'] == 'Pancakes'
    assert recipe['title_he'] == '[he] Pancakes'
    assert recipe['instructions_he'] == '[he] Mix everything and fry.'
    assert '[he] flour' in recipe['ingredients_he']
    assert recipe['servings'] == 4
    assert [label['id'] for label in recipe['labels']] == [1]
    assert ('flour', 'en', 'he') in fake_translate


def test_import_rejects_bad_input(client, fake_translate):
    assert client.post('/api/recipes/import', json={'text': ''}).status_code == 400
    assert client.post('/api/recipes/import', json={'text': 'Pancakes\n1 egg', 'lang': 'fr'}).status_code == 400
    # A title alone is not a recipe
    assert client.post('/api/recipes/import', json={'text': 'Just a title'}).status_code == 400
    assert fake_translate == []


def test_translate_endpoint(client, fake_translate):
    response = client.post('/api/translate', json={'text': 'קמח', 'from': 'he', 'to': 'en'})

    assert response.get_json() == {'translated': '[en] קמח'}
    assert client.post('/api/translate', json={'text': 'x'}).status_code == 400


def png_bytes(mode='RGBA'):
    buffer = io.BytesIO()
    Image.new(mode, (8, 8), (255, 0, 0, 128) if mode == 'RGBA' else (255, 0, 0)).save(buffer, 'PNG')
    buffer.seek(0)
    return buffer


def test_upload_reencodes_to_jpeg(client):
    response = client.post(
        '/api/upload',
        data={'image': (png_bytes(), 'photo.png')},
        content_type='multipart/form-data',
    )
    assert response.status_code == 200
    url = response.get_json()['url']
    assert url.startswith('/uploads/') and url.endswith('.jpg')

    served = client.get(url)
    assert served.status_code == 200
    assert Image.open(io.BytesIO(served.data)).format == 'JPEG'
    served.close()


@pytest.mark.parametrize('filename, payload', [
    ('notes.txt', b'hello'),
    ('fake.png', b'not an image'),
])
def test_upload_rejects_non_images(client, filename, payload):
    response = client.post(
        '/api/upload',
        data={'image': (io.BytesIO(payload), filename)},
        content_type='multipart/form-data',
    )
    assert response.status_code == 400


def test_upload_without_file(client):
    assert client.post('/api/upload', data={}, content_type='multipart/form-data').status_code == 400
