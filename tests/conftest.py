"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile

# The application creates its upload directory at import time.
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="slshopping-uploads-"))

from unittest.mock import AsyncMock, Mock  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from slshopping_admin.app.api import deps  # noqa: E402
from slshopping_admin.app.core.config import settings  # noqa: E402
from slshopping_admin.app.core.db import init_db  # noqa: E402
from slshopping_admin.app.core.flash import flash_store  # noqa: E402
from slshopping_admin.app.main import app  # noqa: E402
from slshopping_admin.app.services import (  # noqa: E402
    BrandService,
    CategoryService,
    ProductImageService,
    ProductService,
    UserService,
)


@pytest.fixture
def temp_db(tmp_path, monkeypatch):
    """Point the application at a fresh, migrated SQLite file."""
    db_path = tmp_path / "test.db"
    monkeypatch.setattr(settings, "database_url", str(db_path))
    init_db()
    return db_path


@pytest.fixture
def client():
    """Test client that does not follow redirects and resets overrides afterwards."""
    flash_store.clear()
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()
    flash_store.clear()


def _mock_entity_service(service_class):
    service = Mock(spec=service_class)
    service.list_all = AsyncMock(return_value=[])
    service.check_unique = AsyncMock(return_value=True)
    service.get = AsyncMock()
    service.save = AsyncMock()
    service.delete = AsyncMock(return_value=None)
    return service


@pytest.fixture
def mock_category_service():
    service = _mock_entity_service(CategoryService)
    app.dependency_overrides[deps.get_category_service] = lambda: service
    return service


@pytest.fixture
def mock_brand_service():
    service = _mock_entity_service(BrandService)
    app.dependency_overrides[deps.get_brand_service] = lambda: service
    return service


@pytest.fixture
def mock_product_service():
    service = _mock_entity_service(ProductService)
    app.dependency_overrides[deps.get_product_service] = lambda: service
    return service


@pytest.fixture
def mock_product_image_service():
    service = Mock(spec=ProductImageService)
    service.is_valid = AsyncMock(return_value=True)
    service.save = AsyncMock(return_value="stored.png")
    service.delete = AsyncMock(return_value=None)
    app.dependency_overrides[deps.get_product_image_service] = lambda: service
    return service


@pytest.fixture
def mock_user_service():
    service = _mock_entity_service(UserService)
    service.list_roles = AsyncMock(return_value=[])
    app.dependency_overrides[deps.get_user_service] = lambda: service
    return service
