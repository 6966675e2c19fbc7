import os
import httpx
import pytest

FIXTURES = os.path.join(os.path.dirname(__file__), "fixtures")


def load_fixture(name: str) -> str:
    with open(os.path.join(FIXTURES, name), encoding="utf-8") as fh:
        return fh.read()


def html_transport(body: str, status_code: int = 200, seen=None) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, text=body, headers={"Content-Type": "text/html; charset=utf-8"})
    return httpx.MockTransport(handler)


@pytest.fixture
def investidor10_html():
    return load_fixture("investidor10_bbas3.html")


@pytest.fixture
def fundsexplorer_html():
    return load_fixture("fundsexplorer_alzr11.html")


@pytest.fixture
def not_found_html():
    return load_fixture("page_not_found.html")
