"""
Tests for decoding vendor payloads into models.
"""
import os
import sys

import pytest
from pydantic import ValidationError

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from price_gateway.engine import Driver, Plan, PriceQuote, PricesResponse


def test_plan_known_values():
    assert Plan("Connect") is Plan.CONNECT
    assert Plan("Production") is Plan.PRODUCTION


@pytest.mark.parametrize("value", ["Enterprise", "connect", "", "Other"])
def test_plan_unknown_values_are_other(value):
    assert Plan(value) is Plan.OTHER


def test_prices_response_decodes_positional_results():
    response = PricesResponse.model_validate({
        "Type": "subscription",
        "Results": [
            ["Connect", 30, 35.00, 29.99],
            ["Production", 365, None, 540],
        ],
    })
    assert response.type == "subscription"
    assert response.quotes == [
        PriceQuote(plan=Plan.CONNECT, period_days=30, list_price=35.00, discounted_price=29.99),
        PriceQuote(plan=Plan.PRODUCTION, period_days=365, list_price=None, discounted_price=540.0),
    ]


def test_prices_response_keeps_unknown_plans():
    response = PricesResponse.model_validate({
        "Type": "x",
        "Results": [["Enterprise", 30, 1, 2]],
    })
    assert response.quotes[0].plan is Plan.OTHER


@pytest.mark.parametrize("payload", [
    {"Results": []},
    {"Type": "x"},
    {"Type": "x", "Results": [["Connect", 30, 35.00]]},
    {"Type": "x", "Results": [["Connect", 30, 35.00, 29.99, 1]]},
    {"Type": "x", "Results": [[7, 30, 35.00, 29.99]]},
    {"Type": "x", "Results": [["Connect", "monthly", 35.00, 29.99]]},
    {"Type": "x", "Results": [{"Plan": "Connect"}]},
    {"Type": "x", "Results": [["Connect", "30", 35.00, 29.99]]},
    {"Type": "x", "Results": [["Connect", 30, "35", 29.99]]},
    {"Type": "x", "Results": [["Connect", 30, 35.00, "29.99"]]},
    {"Type": "x", "Results": [["Connect", True, 1, 2]]},
    {"Type": "x", "Results": [["Connect", 30, 1, False]]},
    {"Type": 1, "Results": []},
    ["Connect", 30, 35.00, 29.99],
])
def test_prices_response_rejects_bad_shapes(payload):
    with pytest.raises(ValidationError):
        PricesResponse.model_validate(payload)


def test_driver_decodes_pascal_case_and_dumps_lowercase():
    driver = Driver.model_validate({"Name": "Epson SureColor", "Code": "EPS-SC"})
    assert driver.name == "Epson SureColor"
    assert driver.code == "EPS-SC"
    assert driver.model_dump() == {"name": "Epson SureColor", "code": "EPS-SC"}


def test_driver_key_matching_is_case_insensitive():
    driver = Driver.model_validate({"NAME": "HP Latex", "code": "HP-L"})
    assert driver.name == "HP Latex"
    assert driver.code == "HP-L"


def test_driver_requires_both_fields():
    with pytest.raises(ValidationError):
        Driver.model_validate({"Name": "No code"})
