from fastapi.testclient import TestClient

from jsonrecipe.cmd.server import app

client = TestClient(app)


def test_get_fraction():
    response = client.get("/fraction", params={"text": "1 1/2"})
    assert response.status_code == 200
    assert response.json() == {"numerator": 3, "denominator": 2, "text": "1 1/2"}


def test_get_fraction_invalid():
    response = client.get("/fraction", params={"text": "abc"})
    assert response.status_code == 422
    assert "No fractional number specified" in response.json()["detail"]


def test_get_ingredient():
    response = client.get(
        "/ingredient", params={"description": "1 2/3 cups potatoes, diced, peeled"}
    )
    assert response.status_code == 200
    data = response.json()["ingredient"]
    assert data["quantity"] == {"numerator": 5, "denominator": 3, "text": "1 2/3"}
    assert data["unit"] == "cups"
    assert data["item"] == "potatoes"
    assert data["preparation"] == ["diced", "peeled"]
    assert data["text"] == "1 2/3 cups potatoes, diced, peeled"


def test_get_ingredient_invalid():
    response = client.get("/ingredient", params={"description": "2"})
    assert response.status_code == 422
    assert response.json()["detail"] == "Unit not specified."


def test_post_recipe(german_potato_salad):
    response = client.post("/recipe", json=german_potato_salad)
    assert response.status_code == 200
    recipe = response.json()["recipe"]
    assert recipe["title"] == "Authentic German potato salad"
    assert recipe["ingredients"][0] == {
        "quantity": 3,
        "unit": "cups",
        "item": "potatoes",
        "preparation": ["diced", "peeled"],
    }
    assert recipe["ingredients"][3]["quantity"] == "1/4"
    assert recipe["source"]["location"]["retrievalDate"] == "2018-08-11"


def test_post_invalid_recipe():
    response = client.post("/recipe", json={"title": "Toast"})
    assert response.status_code == 422
    assert isinstance(response.json()["detail"], list)


def test_post_recipe_with_bad_ingredient():
    response = client.post(
        "/recipe",
        json={"title": "Toast", "ingredients": ["2 slices"], "directions": []},
    )
    assert response.status_code == 422
    assert response.json()["detail"] == "Item not specified."


def test_get_fraction_zero_denominator():
    response = client.get("/fraction", params={"text": "1/0"})
    assert response.status_code == 422
    assert response.json()["detail"] == "Denominator must not be zero."


def test_get_ingredient_number_too_long():
    response = client.get(
        "/ingredient", params={"description": "1" * 5000 + " cups flour"}
    )
    assert response.status_code == 422
    assert "Number too long" in response.json()["detail"]
