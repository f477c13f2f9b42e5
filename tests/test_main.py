import argparse

import pytest
from fastapi.testclient import TestClient

from sysinfo_core.__main__ import port, setup_parser
from sysinfo_core.asgi import app
from sysinfo_core.constants import DEFAULT_PORT


def test_app_startup():
    """Test that the FastAPI application starts without error."""
    with TestClient(app) as client:
        assert client is not None


def test_health_check():
    """Test basic application health via root endpoint."""
    with TestClient(app) as client:
        response = client.get("/")
        assert response.status_code < 500


def test_port_in_range():
    assert port("8083") == 8083


@pytest.mark.parametrize("value", ["eighty", "80", "70000"])
def test_port_rejected(value):
    with pytest.raises(argparse.ArgumentTypeError):
        port(value)


def test_parser_defaults():
    args = setup_parser().parse_args([])

    assert args.port == DEFAULT_PORT
    assert args.host == "0.0.0.0"
    assert args.debug is False
    assert args.livereload is False


def test_parser_options():
    args = setup_parser().parse_args(["-p", "9000", "--debug", "--host", "127.0.0.1"])

    assert args.port == 9000
    assert args.debug is True
    assert args.host == "127.0.0.1"
