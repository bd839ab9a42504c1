import json
from unittest.mock import MagicMock

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from cwmanage import Client, ClientBuilder

BASE_URL = "https://na.myconnectwise.net/v4_6_release/apis/3.0"


def make_response(body=None, status_code=200, headers=None, text=None, url=None):
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response.headers = CaseInsensitiveDict(headers or {})
    response.encoding = "utf-8"
    response.url = url
    raw = text if text is not None else json.dumps(body)
    response._content = raw.encode("utf-8")
    return response


def next_link(page_id, path="/system/members"):
    return f'<{BASE_URL}{path}?pageId={page_id}&pageSize=25>; rel="next"'


@pytest.fixture
def config():
    return ClientBuilder("myco", "pub", "priv", "something").build()


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(config, session):
    return Client(config, session=session)
