"""JSON API under /api."""

import pytest


def test_list_units(client):
    response = client.get("/api/units/mass")

    assert response.status_code == 200
    payload = response.get_json()
    assert payload["success"] is True
    assert payload["data"]["base_unit"] == "kilogram"
    assert payload["data"]["decimals"] == 6
    assert {"key": "pound", "name": "Pound", "factor_to_base": 0.453592} in payload["data"]["units"]


def test_list_temperature_units(client):
    payload = client.get("/api/units/temperature").get_json()

    assert payload["data"]["base_unit"] == "celsius"
    assert [unit["key"] for unit in payload["data"]["units"]] == ["celsius", "fahrenheit", "kelvin"]


def test_unknown_quantity_is_404(client):
    response = client.get("/api/units/energy")

    assert response.status_code == 404
    assert response.get_json() == {"success": False, "message": "Quantity not found", "errors": {}}


def test_convert(client):
    response = client.post("/api/convert/mass", json={"value": 1, "from_unit": "kilogram", "to_unit": "pound"})

    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["result"] == 2.204624
    assert data["display"] == "2.204624"


def test_convert_temperature(client):
    data = client.post(
        "/api/convert/temperature", json={"value": -40, "from_unit": "fahrenheit", "to_unit": "celsius"}
    ).get_json()["data"]

    assert data["result"] == -40
    assert data["display"] == "-40"


def test_convert_validation_errors_are_422(client):
    response = client.post("/api/convert/length", json={"value": "ten", "from_unit": "meter", "to_unit": "parsec"})

    assert response.status_code == 422
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["message"] == "Validation failed"
    assert set(payload["errors"]) == {"value", "to_unit"}


def test_convert_requires_a_json_object(client):
    response = client.post("/api/convert/length", json=[1, "meter", "foot"])

    assert response.status_code == 400
    assert response.get_json()["message"] == "Request body must be a JSON object."


def test_convert_unknown_quantity_is_404(client):
    response = client.post("/api/convert/energy", json={"value": 1, "from_unit": "joule", "to_unit": "calorie"})

    assert response.status_code == 404


def test_converter_sync(client):
    response = client.post(
        "/api/convert/length/sync",
        json={"from_value": "", "to_value": "10", "from_unit": "meter", "to_unit": "foot", "changed": "to_value"},
    )

    assert response.status_code == 200
    assert response.get_json()["data"] == {
        "from_value": "3.048",
        "to_value": "10",
        "from_unit": "meter",
        "to_unit": "foot",
    }


def test_converter_sync_rejects_unknown_changed_field(client):
    response = client.post(
        "/api/convert/length/sync",
        json={"from_value": "1", "from_unit": "meter", "to_unit": "foot", "changed": "ems"},
    )

    assert response.status_code == 422
    assert "changed" in response.get_json()["errors"]


def test_pixel_em_sync(client):
    response = client.post("/api/pixel-em/sync", json={"pixels": "16", "ems": "2", "base_size": "20", "changed": "base_size"})

    assert response.status_code == 200
    assert response.get_json()["data"] == {"pixels": "40", "ems": "2", "base_size": "20"}


def test_fuel_cost_calculator(client):
    response = client.post(
        "/api/calculators/distance-fuel-cost-calculator",
        json={"distance": 400, "efficiency": 15, "fuel_price": 100},
    )

    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["calculator"] == "distance-fuel-cost-calculator"
    assert data["name"] == "Distance & Fuel Cost"
    assert data["result"] == {"fuel_needed": 26.667, "total_cost": 2666.67}
    assert data["lines"][1] == {"label": "Total Fuel Cost", "value": "₹2,666.67"}
    assert "400 km" in data["share_text"]


def test_fuel_cost_with_very_long_distance(client):
    response = client.post(
        "/api/calculators/distance-fuel-cost-calculator",
        json={"distance": 1e30, "efficiency": 15, "fuel_price": 100},
    )

    assert response.status_code == 200
    result = response.get_json()["data"]["result"]
    assert result["total_cost"] == pytest.approx(1e30 / 15 * 100)


def test_gst_calculator_removes_tax(client):
    response = client.post(
        "/api/calculators/gst-calculator",
        json={"amount": 1180, "gst_rate": 18, "calculation_type": "remove"},
    )

    assert response.status_code == 200
    assert response.get_json()["data"]["result"] == {
        "base_amount": 1000.0,
        "gst_amount": 180.0,
        "cgst": 90.0,
        "sgst": 90.0,
        "total_amount": 1180.0,
    }


def test_lucky_number_calculator(client):
    data = client.post("/api/calculators/lucky-number-calculator", json={"birth_date": "1990-05-15"}).get_json()["data"]

    assert data["result"] == {"lucky_number": 3}


def test_modulo_zero_divisor_is_422(client):
    response = client.post("/api/calculators/modulo-calculator", json={"dividend": 10, "divisor": 0})

    assert response.status_code == 422
    assert response.get_json()["errors"] == {"divisor": ["Divisor cannot be zero."]}


def test_missing_fields_do_not_fall_back_to_defaults(client):
    response = client.post("/api/calculators/distance-fuel-cost-calculator", json={})

    assert response.status_code == 422
    assert set(response.get_json()["errors"]) == {"distance", "efficiency", "fuel_price"}


@pytest.mark.parametrize("bad_value", [None, True, {"nested": 1}, [1, 2]])
def test_non_scalar_values_count_as_missing(client, bad_value):
    response = client.post(
        "/api/calculators/modulo-calculator",
        json={"dividend": bad_value, "divisor": 3},
    )

    assert response.status_code == 422
    assert "dividend" in response.get_json()["errors"]


def test_percentage_change_from_zero_reports_null(client):
    data = client.post(
        "/api/calculators/percentage-change-calculator",
        json={"initial_value": 0, "final_value": 10},
    ).get_json()["data"]

    assert data["result"] == {"change": None, "change_type": "increase"}


def test_speed_distance_time_requires_both_inputs(client):
    response = client.post(
        "/api/calculators/speed-distance-time-calculator",
        json={"solve_for": "speed", "distance": 120},
    )

    assert response.status_code == 422
    assert "time" in response.get_json()["errors"]


def test_unknown_calculator_is_404(client):
    response = client.post("/api/calculators/mortgage-calculator", json={})

    assert response.status_code == 404
    assert response.get_json()["message"] == "Calculator not found"


def test_unknown_api_path_returns_json_404(client):
    response = client.get("/api/does-not-exist")

    assert response.status_code == 404
    assert response.get_json() == {"error": "Not found"}


def test_api_ignores_csrf(app):
    app.config["WTF_CSRF_ENABLED"] = True
    client = app.test_client()

    response = client.post("/api/calculators/lucky-number-calculator", json={"birth_date": "1990-05-15"})

    assert response.status_code == 200
