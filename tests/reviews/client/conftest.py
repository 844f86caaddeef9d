from unittest.mock import MagicMock

import pytest
from reviews.client.api import ClientSettings, ReviewClient, ReviewRecord


def _response(status_code=200, body=None):
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    if isinstance(body, Exception):
        response.json.side_effect = body
    else:
        response.json.return_value = body
    return response


def _record(review_id="r1", product_name="Phone case", **fields):
    return ReviewRecord(id=review_id, product_name=product_name, **fields)


@pytest.fixture()
def make_response():
    return _response


@pytest.fixture()
def make_record():
    return _record


@pytest.fixture()
def http_session():
    return MagicMock()


@pytest.fixture()
def review_client(http_session):
    return ReviewClient(settings=ClientSettings(base_url="http://reviews.test", timeout=5.0), session=http_session)


@pytest.fixture()
def stub_client():
    """A stand-in for ReviewClient whose calls are scripted per test."""
    return MagicMock(spec=ReviewClient)
