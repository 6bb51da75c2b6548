from contextlib import contextmanager
from typing import Annotated
from fastapi import Depends
from sqlalchemy.orm import Session

from doc_catalog.db.base import SessionLocal, get_db_session
from doc_catalog.services.doc_service import DocService
from doc_catalog.services.category_service import CategoryService


@contextmanager
def session_scope():
    """Create a database session with proper cleanup (CLI and scripts)"""
    db_session = SessionLocal()
    try:
        yield db_session
    except Exception:
        db_session.rollback()
        raise
    finally:
        db_session.close()


def get_doc_service(db: Session = Depends(get_db_session)) -> DocService:
    """FastAPI dependency for the doc service, bound to the request session"""
    return DocService(db)


def get_category_service(db: Session = Depends(get_db_session)) -> CategoryService:
    """FastAPI dependency for the category service, bound to the request session"""
    return CategoryService(db)


# Type aliases for dependency injection
DocServiceDep = Annotated[DocService, Depends(get_doc_service)]
CategoryServiceDep = Annotated[CategoryService, Depends(get_category_service)]
