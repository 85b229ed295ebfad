from app import create_app


def _client():
    app = create_app("TestingConfig")
    return app.test_client()


def test_categories_endpoint_lists_units():
    client = _client()
    response = client.get("/api/unit_converter/categories")
    assert response.status_code == 200
    payload = response.get_json()
    assert payload["success"] is True
    categories = payload["data"]["categories"]
    assert [item["id"] for item in categories][:2] == ["length", "temperature"]
    temperature = categories[1]
    assert temperature["base_unit"] == "°C"
    assert [unit["label"] for unit in temperature["units"]] == ["°C", "°F", "K"]
    assert [unit["index"] for unit in temperature["units"]] == [0, 1, 2]


def test_units_endpoint_rejects_unknown_category():
    client = _client()
    response = client.get("/api/unit_converter/units/energy")
    assert response.status_code == 400
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["error"]["code"] == "unit.unknown_category"


def test_units_endpoint_returns_ordered_units():
    client = _client()
    response = client.get("/api/unit_converter/units/force")
    assert response.status_code == 200
    units = response.get_json()["data"]["units"]
    assert [unit["id"] for unit in units] == ["N", "kN", "kgf", "tonf", "lb", "kip"]


def test_convert_endpoint_success():
    client = _client()
    response = client.post(
        "/api/unit_converter/convert",
        json={"category": "length", "from_unit": "km", "to_unit": "m", "value": "1"},
    )
    assert response.status_code == 200
    payload = response.get_json()
    assert payload["success"] is True
    assert payload["data"]["formatted"] == "1000.000"
    assert payload["data"]["base"]["value"] == 1000.0


def test_convert_endpoint_honours_decimals():
    client = _client()
    response = client.post(
        "/api/unit_converter/convert",
        json={
            "category": "temperature",
            "from_unit": "°C",
            "to_unit": "K",
            "value": 0,
            "decimals": 1,
        },
    )
    assert response.status_code == 200
    assert response.get_json()["data"]["formatted"] == "273.1"


def test_convert_endpoint_reports_invalid_input():
    client = _client()
    response = client.post(
        "/api/unit_converter/convert",
        json={"category": "length", "from_unit": "m", "to_unit": "ft", "value": "ten"},
    )
    assert response.status_code == 400
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["error"]["code"] == "unit.invalid_input"
    assert payload["error"]["details"]["formatted"] == "Invalid input"


def test_convert_endpoint_rejects_bad_unit():
    client = _client()
    response = client.post(
        "/api/unit_converter/convert",
        json={"category": "pressure", "from_unit": "MPa", "to_unit": "N"},
    )
    assert response.status_code == 400
    assert response.get_json()["error"]["code"] == "unit.invalid_request"

    response = client.post(
        "/api/unit_converter/convert",
        json={"category": "pressure", "from_unit": "MPa", "to_unit": "N", "value": 1},
    )
    assert response.status_code == 400
    assert response.get_json()["error"]["code"] == "unit.invalid_unit"


def test_convert_query_endpoint():
    client = _client()
    response = client.get(
        "/api/unit_converter/convert",
        query_string={"category": "pressure", "from_unit": "MPa", "to_unit": "Pa", "value": "1"},
    )
    assert response.status_code == 200
    assert response.get_json()["data"]["formatted"] == "1000000.000"


def test_convert_query_endpoint_requires_value():
    client = _client()
    response = client.get(
        "/api/unit_converter/convert",
        query_string={"category": "force", "from_unit": "kN", "to_unit": "N"},
    )
    assert response.status_code == 400
    payload = response.get_json()
    assert payload["error"]["code"] == "unit.invalid_request"
    assert "Value is required" in payload["error"]["message"]


def test_convert_endpoint_reports_huge_integer_as_invalid_input():
    client = _client()
    response = client.post(
        "/api/unit_converter/convert",
        data='{"category": "length", "from_unit": "m", "to_unit": "ft", "value": 1'
        + "0" * 400
        + "}",
        content_type="application/json",
    )
    assert response.status_code == 400
    payload = response.get_json()
    assert payload["error"]["code"] == "unit.invalid_input"
    assert payload["error"]["details"]["formatted"] == "Invalid input"


def test_convert_endpoint_bounds_decimals():
    client = _client()
    base = {"category": "length", "from_unit": "m", "to_unit": "ft", "value": 1}
    for decimals in (-1, 13, 10**10):
        response = client.post("/api/unit_converter/convert", json={**base, "decimals": decimals})
        assert response.status_code == 400
        assert response.get_json()["error"]["code"] == "unit.invalid_request"

    response = client.post("/api/unit_converter/convert", json={**base, "decimals": 0})
    assert response.status_code == 200
    assert response.get_json()["data"]["formatted"] == "3"

    response = client.post("/api/unit_converter/convert", json={**base, "decimals": 12})
    assert response.status_code == 200
    assert response.get_json()["data"]["formatted"] == "3.280839895013"


def test_convert_query_endpoint_bounds_decimals():
    client = _client()
    response = client.get(
        "/api/unit_converter/convert",
        query_string={"category": "length", "from_unit": "m", "to_unit": "ft", "value": "1", "decimals": "13"},
    )
    assert response.status_code == 400
    assert response.get_json()["error"]["code"] == "unit.invalid_request"
