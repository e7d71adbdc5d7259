import pytest

from app import create_app
from plugins.unit_converter.core import CATALOG_VERSION, CatalogInitError


def _app():
    return create_app("TestingConfig")


def _client():
    return _app().test_client()


def _convert(client, **payload):
    return client.post("/api/unit_converter/convert", json=payload)


def test_categories_endpoint_lists_categories_in_order():
    response = _client().get("/api/unit_converter/categories")
    assert response.status_code == 200
    payload = response.get_json()
    assert payload["success"] is True
    assert payload["data"]["categories"][0] == "length"
    assert "temperature" in payload["data"]["categories"]
    assert payload["data"]["version"] == CATALOG_VERSION


def test_units_endpoint_returns_details():
    response = _client().get("/api/unit_converter/units/temperature")
    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["category"] == "temperature"
    assert data["units"][0] == {"name": "Celsius", "abbreviation": "°C"}


def test_unit_names_endpoint():
    response = _client().get("/api/unit_converter/units/length/names")
    assert response.status_code == 200
    names = response.get_json()["data"]["units"]
    assert names[:2] == ["meter", "kilometer"]


def test_units_endpoint_unknown_category_is_404():
    response = _client().get("/api/unit_converter/units/colour")
    assert response.status_code == 404
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["error"]["code"] == "unit.unknown_category"


@pytest.mark.parametrize(
    ("raw", "valid"), [("42", True), ("-3.14", True), ("1.2.3", False), (" 42", False)]
)
def test_validate_endpoint(raw, valid):
    response = _client().post("/api/unit_converter/validate", json={"value": raw})
    assert response.status_code == 200
    assert response.get_json()["data"] == {"value": raw, "valid": valid}


def test_validate_endpoint_honours_max_input_length():
    app = _app()
    app.config["PLUGIN_SETTINGS"]["unit_converter"] = {"max_input_length": 3}
    client = app.test_client()
    short = client.post("/api/unit_converter/validate", json={"value": "123"})
    long = client.post("/api/unit_converter/validate", json={"value": "1234"})
    assert short.get_json()["data"]["valid"] is True
    assert long.get_json()["data"]["valid"] is False


def test_validate_endpoint_requires_value():
    response = _client().post("/api/unit_converter/validate", json={})
    assert response.status_code == 400
    assert response.get_json()["error"]["code"] == "unit.invalid_request"


def test_convert_endpoint_success():
    response = _convert(
        _client(), value=1500, category="length", from_unit="meter", to_unit="kilometer"
    )
    assert response.status_code == 200
    payload = response.get_json()
    assert payload["success"] is True
    assert payload["data"]["value"] == 1.5
    assert payload["data"]["formatted"] == "1.5"
    assert payload["data"]["input"] == 1500


def test_convert_endpoint_accepts_raw_text():
    response = _convert(
        _client(), value="100", category="temperature", from_unit="Celsius", to_unit="Fahrenheit"
    )
    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["value"] == 212
    assert data["formatted"] == "212"


def test_convert_endpoint_rejects_malformed_text():
    response = _convert(
        _client(), value="1e5", category="length", from_unit="meter", to_unit="kilometer"
    )
    assert response.status_code == 400
    assert response.get_json()["error"]["code"] == "unit.invalid_value"


def test_convert_endpoint_rejects_nan():
    response = _client().post(
        "/api/unit_converter/convert",
        data='{"value": NaN, "category": "length", "from_unit": "meter", "to_unit": "foot"}',
        content_type="application/json",
    )
    assert response.status_code == 400
    assert response.get_json()["error"]["code"] == "unit.invalid_value"


def test_convert_endpoint_rejects_bad_unit():
    response = _convert(
        _client(), value=1, category="length", from_unit="meter", to_unit="bogus"
    )
    assert response.status_code == 400
    error = response.get_json()["error"]
    assert error["code"] == "unit.unknown_unit"
    assert error["details"] == {"category": "length", "unit": "bogus"}


def test_convert_endpoint_rejects_bad_category():
    response = _convert(
        _client(), value=1, category="colour", from_unit="red", to_unit="blue"
    )
    assert response.status_code == 400
    assert response.get_json()["error"]["code"] == "unit.unknown_category"


def test_convert_endpoint_rejects_unexpected_fields():
    response = _convert(
        _client(),
        value=1,
        category="length",
        from_unit="meter",
        to_unit="foot",
        precision=3,
    )
    assert response.status_code == 400
    payload = response.get_json()
    assert payload["error"]["code"] == "unit.invalid_request"
    assert payload["error"]["details"]["errors"]


def test_broken_catalog_prevents_startup(monkeypatch):
    import plugins.unit_converter.api as api_module

    def _broken():
        raise CatalogInitError("bad table")

    monkeypatch.setattr(api_module, "get_catalog", _broken)
    with pytest.raises(CatalogInitError):
        create_app("TestingConfig")


@pytest.mark.parametrize("value", [True, False])
def test_convert_endpoint_rejects_boolean_value(value):
    response = _convert(
        _client(), value=value, category="length", from_unit="kilometer", to_unit="meter"
    )
    assert response.status_code == 400
    assert response.get_json()["error"]["code"] == "unit.invalid_request"
