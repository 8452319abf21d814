import pytest

from accubooks.core import config
from accubooks.core.config import DevSettings, ProdSettings


def test_heroku_postgres_url_normalised():
    cfg = DevSettings(DATABASE_URL="postgres://user:pw@host:5432/books")
    assert cfg.DATABASE_URL == "postgresql://user:pw@host:5432/books"


def test_test_settings_defaults():
    cfg = config.TestSettings()
    assert cfg.DATABASE_URL == "sqlite:///:memory:"
    assert cfg.DEFAULT_FISCAL_YEAR_START_MONTH == 4


def test_prod_requires_database_url():
    with pytest.raises(ValueError):
        ProdSettings(DATABASE_URL=None, JWT_SECRET="s3cret")


def test_prod_rejects_placeholder_secret():
    with pytest.raises(ValueError):
        ProdSettings(DATABASE_URL="postgresql://db/books", JWT_SECRET="change_me")


def test_fiscal_month_bounds():
    with pytest.raises(ValueError):
        DevSettings(DEFAULT_FISCAL_YEAR_START_MONTH=13)
