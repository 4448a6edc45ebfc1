import pytest

from app import create_app
from controllers.device_repository import get_repository


@pytest.fixture
def app(tmp_path):
    app = create_app({
        "TESTING": True,
        "SECRET_KEY": "test",
        "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'devices.db'}",
    })
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def repo(app):
    return get_repository()


def device_form(**overrides):
    """A valid add/update form; override or drop (None) any field."""
    form = {
        "device_type": "Lamp",
        "custom_name": "lamp_01",
        "on_off": "1",
        "temperature": "",
        "volume": "",
        "batteries_included": "",
        "open_closed": "",
    }
    form.update(overrides)
    return {k: v for k, v in form.items() if v is not None}
