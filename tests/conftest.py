import json
from unittest.mock import Mock

import pytest
import requests

import config


MCG_BODY = {
    "status": "OK",
    "results": [
        {
            "formatted_address": "Brunton Ave, Richmond VIC 3002, Australia",
            "place_id": "ChIJgWIaV5VC1moR-bKgR9ZfV2I",
            "types": ["establishment", "point_of_interest", "stadium"],
            "geometry": {
                "location": {"lat": -37.8199669, "lng": 144.9834493},
                "location_type": "GEOMETRIC_CENTER",
                "viewport": {
                    "northeast": {"lat": -37.8186179, "lng": 144.9847982},
                    "southwest": {"lat": -37.8213158, "lng": 144.9821003},
                },
            },
            "address_components": [],
        }
    ],
}


def make_response(body=None, status_code=200, text=None):
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.text = text if text is not None else json.dumps(body)
    if body is not None:
        response.json.return_value = body
    else:
        response.json.side_effect = ValueError("Expecting value")
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(response=response)
    return response


@pytest.fixture
def fake_session():
    def _build(body=MCG_BODY, status_code=200, text=None, error=None):
        session = Mock(spec=requests.Session)
        if error is not None:
            session.get.side_effect = error
        else:
            session.get.return_value = make_response(body, status_code, text)
        return session

    return _build


@pytest.fixture(autouse=True)
def clean_keys(monkeypatch):
    config.clear_keys()
    monkeypatch.delenv("GOOGLE_GEOCODE_API_KEY", raising=False)
    monkeypatch.delenv("GOOGLE_MAPS_API_KEY", raising=False)
    yield
    config.clear_keys()
