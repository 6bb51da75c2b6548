# tests/conftest.py
import pytest
import os
import sys
from pathlib import Path
from sqlalchemy.orm import sessionmaker
from dotenv import load_dotenv

# Load test environment variables
load_dotenv(".env.test", override=True)

# Settings are read at import time: point the app at a throwaway database first
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite://")
os.environ["DATABASE_URL"] = TEST_DATABASE_URL

# Add project root to Python path
project_root = Path(__file__).parent.parent.absolute()
sys.path.insert(0, str(project_root))

from doc_catalog.db.base import Base, make_engine, get_db_session
from doc_catalog.db.models import Category, Doc, Code  # noqa: F401
from doc_catalog.services.doc_service import DocService
from doc_catalog.services.category_service import CategoryService
from doc_catalog.schemas.category import CategoryCreate
from doc_catalog.schemas.doc import DocCreate


@pytest.fixture(scope="function")
def db_engine():
    """Create a test database engine with a fresh schema."""
    engine = make_engine(TEST_DATABASE_URL)
    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture(scope="function")
def db_session(session_factory):
    """Create a test database session."""
    session = session_factory()

    yield session

    session.close()


@pytest.fixture(scope="function")
def doc_service(db_session):
    """Create a doc service for testing."""
    return DocService(db_session)


@pytest.fixture(scope="function")
def category_service(db_session):
    """Create a category service for testing."""
    return CategoryService(db_session)


@pytest.fixture(scope="function")
def buttons_category(category_service):
    """The "Buttons" category."""
    return category_service.create_category(
        CategoryCreate(category_name="Buttons", slug="buttons")
    )


@pytest.fixture(scope="function")
def button_doc(doc_service, buttons_category):
    """A main doc with a jsx and a tailwind snippet."""
    return doc_service.create_doc(
        DocCreate(
            ui_name="Button",
            ui_subtitle="Primary Button",
            docs="# Button\n\nClickable.",
            category_id=buttons_category.id,
            codes=[
                {"language": "jsx", "code": "function Button() { return <button /> }"},
                {"language": "tailwind", "code": "<button class=\"px-4 py-2\" />"},
            ],
        )
    )


@pytest.fixture(scope="function")
def test_client(db_session):
    """Create FastAPI test client with test database session."""
    from fastapi.testclient import TestClient
    from doc_catalog.api.web_app import app

    # Override the database dependency
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db_session] = override_get_db

    with TestClient(app) as client:
        yield client

    # Clear the override after the test
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def test_catalog_data():
    """Sample seed data for testing."""
    return {
        "categories": [
            {"categoryName": "Buttons", "slug": "buttons"},
            {"categoryName": "Alerts", "slug": "alerts"},
        ],
        "docs": [
            {
                "uiName": "Button",
                "uiSubtitle": "Primary Button",
                "docs": "# Button",
                "category": "buttons",
                "codes": [
                    {"language": "jsx", "code": "<Button />"},
                    {"language": "tailwind", "code": "<button class=\"btn\" />"},
                ],
                "variants": [
                    {
                        "uiName": "Outline Button",
                        "codes": [{"language": "jsx", "code": "<Button outline />"}],
                    }
                ],
            },
            {
                "uiName": "Alert",
                "category": "alerts",
                "codes": [{"language": "css", "code": ".alert { color: red; }"}],
            },
            {"uiName": "Divider"},
        ],
    }
