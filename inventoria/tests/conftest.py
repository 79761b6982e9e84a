"""Configuration et fixtures pytest"""

import os
import tempfile

# Settings are read at import time: keep the app's default data dir out of the repo.
os.environ.setdefault("DATA_DIR", tempfile.mkdtemp(prefix="inventoria-tests-"))

import pytest
from fastapi.testclient import TestClient

from inventoria.core.app_config import AppConfig
from inventoria.core.config import settings
from inventoria.core.database import WorkbookStore
from inventoria.core.dependencies import get_app_config, get_store
from inventoria.main import app
from inventoria.services.category_service import CategoryService
from inventoria.services.product_service import ProductService
from inventoria.services.storage_service import StorageService


@pytest.fixture(scope="function")
def test_settings(tmp_path):
    """Paramètres pointant vers un dossier temporaire"""
    return settings.model_copy(
        update={
            "DATA_DIR": tmp_path / "data",
            "CONFIG_FILE": tmp_path / "config.json",
        }
    )


@pytest.fixture(scope="function")
def app_config(test_settings):
    return AppConfig.load(test_settings.config_file, test_settings)


@pytest.fixture(scope="function")
def store(app_config):
    """Classeur de test vide"""
    store = WorkbookStore(app_config)
    store.initialize()
    return store


@pytest.fixture(scope="function")
def client(store, app_config):
    """Fixture du client de test FastAPI"""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_app_config] = lambda: app_config

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def media_files(store):
    """Noms des fichiers présents dans le dossier media"""

    def _list():
        if not store.media_dir.exists():
            return []
        return sorted(p.name for p in store.media_dir.iterdir())

    return _list


@pytest.fixture
def product_service(store):
    return ProductService(store)


@pytest.fixture
def test_product(product_service):
    """Fixture d'un produit de test"""
    result = product_service.create_product(
        {
            "name": "Widget Pro",
            "category": "Electronics",
            "price": 9.99,
            "stock": 5,
            "location": "Shelf A",
        }
    )
    return result.product


@pytest.fixture
def test_category(store):
    return CategoryService(store).create_category({"name": "Electronics"})


@pytest.fixture
def test_storage_location(store):
    return StorageService(store).create_location(
        {"name": "Main warehouse", "location": "12 Dock Road"}
    )
