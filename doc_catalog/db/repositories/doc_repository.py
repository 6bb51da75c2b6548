# doc_catalog/db/repositories/doc_repository.py
from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session, selectinload, joinedload, contains_eager, load_only
from doc_catalog.db.models.doc import Doc
from doc_catalog.db.models.code import Code
from doc_catalog.db.models.category import Category
from doc_catalog.schemas.doc import DocCreate


class DocRepository:
    """Repository for CRUD operations on Doc model and its code snippets"""

    def __init__(self, db_session: Session):
        self.db_session = db_session

    @staticmethod
    def _detail_options(with_variants: bool = True):
        options = [
            selectinload(Doc.codes),
            joinedload(Doc.category),
        ]
        if with_variants:
            options.append(selectinload(Doc.ui_variants).selectinload(Doc.codes))
        return options

    def _detail_query(self, with_variants: bool = True):
        # populate_existing: a filtered code listing may have loaded partial collections earlier
        return (
            self.db_session.query(Doc)
            .options(*self._detail_options(with_variants))
            .populate_existing()
        )

    def get_by_id(
        self, doc_id: int, with_relations: bool = False, with_variants: bool = True
    ) -> Optional[Doc]:
        """Get doc by ID, optionally with codes, category and variants loaded"""
        if not with_relations:
            return self.db_session.query(Doc).filter(Doc.id == doc_id).first()
        return self._detail_query(with_variants).filter(Doc.id == doc_id).first()

    def get_by_slug(self, unique_slug: str) -> Optional[Doc]:
        """Get doc by unique slug with codes, category and variants loaded"""
        return self._detail_query().filter(Doc.unique_slug == unique_slug).first()

    def slug_exists(self, unique_slug: str) -> bool:
        return (
            self.db_session.query(Doc.id).filter(Doc.unique_slug == unique_slug).first()
            is not None
        )

    def list_main(self) -> List[Doc]:
        """List main docs (no parent) ordered by id, fully loaded"""
        return (
            self._detail_query()
            .filter(Doc.parent_id.is_(None))
            .order_by(Doc.id.asc())
            .all()
        )

    def list_main_slugs(self) -> List[Doc]:
        """
        List main docs with a minimal projection, ordered by category name.

        Docs without a category come last; ties keep id order.
        """
        return (
            self.db_session.query(Doc)
            .outerjoin(Doc.category)
            .options(
                load_only(Doc.id, Doc.ui_name, Doc.unique_slug, Doc.category_id),
                contains_eager(Doc.category).load_only(
                    Category.id, Category.category_name, Category.slug
                ),
            )
            .filter(Doc.parent_id.is_(None))
            .order_by(Category.category_name.asc().nulls_last(), Doc.id.asc())
            .all()
        )

    def list_main_with_code(
        self, language: str, category_id: Optional[int] = None
    ) -> List[Doc]:
        """
        List main docs with their codes restricted to ``language``.

        Docs without a matching snippet are returned with an empty code list.
        """
        query = (
            self.db_session.query(Doc)
            .options(
                joinedload(Doc.category),
                selectinload(Doc.codes.and_(Code.language == language)),
            )
            .populate_existing()
            .filter(Doc.parent_id.is_(None))
        )
        if category_id is not None:
            query = query.filter(Doc.category_id == category_id)

        return query.order_by(Doc.category_id.asc().nulls_last(), Doc.id.asc()).all()

    def create(self, doc_data: DocCreate, unique_slug: str) -> Doc:
        """
        Create a doc and all of its code snippets in one transaction.

        Nothing is stored when any insert fails.
        """
        try:
            db_doc = Doc(
                ui_name=doc_data.ui_name,
                ui_subtitle=doc_data.ui_subtitle,
                docs=doc_data.docs,
                unique_slug=unique_slug,
                category_id=doc_data.category_id,
                parent_id=doc_data.parent_id,
            )
            self.db_session.add(db_doc)
            # Flush to get the doc id for the snippets
            self.db_session.flush()

            for code_entry in doc_data.codes:
                self.db_session.add(
                    Code(
                        language=code_entry.language,
                        code=code_entry.code,
                        doc_id=db_doc.id,
                    )
                )

            self.db_session.commit()
        except Exception:
            self.db_session.rollback()
            raise

        self.db_session.refresh(db_doc)
        return db_doc

    def update(self, db_doc: Doc, changes: Dict[str, Any]) -> Doc:
        """Apply ``changes`` to an existing doc"""
        for key, value in changes.items():
            setattr(db_doc, key, value)

        self._commit()
        self.db_session.refresh(db_doc)

        return db_doc

    def delete(self, db_doc: Doc) -> None:
        """Delete a doc; its codes and variants go with it"""
        self.db_session.delete(db_doc)
        self._commit()

    def _commit(self):
        try:
            self.db_session.commit()
        except Exception:
            self.db_session.rollback()
            raise
