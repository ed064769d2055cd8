"""Shared test fixtures."""

import pytest

from superrifas.catalogo import CatalogoProductos
from superrifas.settings import Settings
from superrifas.web_server import create_app

HEADER = ["Nombre", "Vigencia", "Min", "Img"]


class FakeSource:
    """Stands in for GoogleSheetsSource; counts fetches."""

    def __init__(self, rows=None, error=None):
        self.rows = rows
        self.error = error
        self.calls = 0

    def fetch_rows(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.rows

    def get_spreadsheet_url(self):
        return "https://docs.google.com/spreadsheets/d/sheet-123/edit"


@pytest.fixture
def raw_table():
    """Header plus a mix of complete, incomplete and blank rows."""
    return [
        HEADER,
        ["Widget A", "del 01/01/2024 al 31/01/2024", "$100", "img1.png"],
        ["", "no vigencia", "", ""],
        ["Gadget B", "texto libre", "", ""],
        ["  Combo C  ", "Vigencia DEL 05/02/2024   AL 10/02/2024", "$250", "  https://cdn.example.com/c.png "],
    ]


@pytest.fixture
def settings():
    return Settings(
        APP_ENV="production",
        GOOGLE_SHEETS_SPREADSHEET_ID="sheet-123",
        GOOGLE_SHEETS_WORKSHEET_NAME="Productos participantes",
        GOOGLE_PRIVATE_KEY="",
        GOOGLE_CLIENT_EMAIL="",
        CORS_ALLOW_ORIGINS="*",
        RATE_LIMIT_MAX_REQUESTS=1000,
        RATE_LIMIT_WINDOW_SECONDS=900,
    )


@pytest.fixture
def fake_source(raw_table):
    return FakeSource(rows=raw_table)


@pytest.fixture
def make_client(settings):
    """Build a Flask test client around a given source (and optional settings)."""

    def _make(source, app_settings=None):
        app = create_app(app_settings or settings, CatalogoProductos(source))
        return app.test_client()

    return _make


@pytest.fixture
def client(make_client, fake_source):
    return make_client(fake_source)
