# doc_catalog/db/models/doc.py
from sqlalchemy import Column, Integer, String, Text, ForeignKey, DateTime, func
from sqlalchemy.orm import relationship
from doc_catalog.db.base import Base
from doc_catalog.core.slug_generator import SLUG_COLUMN_LENGTH


class Doc(Base):
    """
    Documentation entry for a UI component.

    A doc without a parent is a main doc; a doc with a parent is a UI variant
    of that parent. Variants are leaves (two levels at most).
    """

    __tablename__ = "docs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    ui_name = Column(String(255), nullable=False, index=True)
    ui_subtitle = Column(String(255))
    docs = Column(Text, comment="Long-form markup body")
    unique_slug = Column(String(SLUG_COLUMN_LENGTH), nullable=False, unique=True, index=True)
    category_id = Column(
        Integer,
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    parent_id = Column(
        Integer,
        ForeignKey("docs.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    category = relationship("Category", back_populates="docs")
    codes = relationship(
        "Code",
        back_populates="doc",
        cascade="all, delete-orphan",
        order_by="Code.id",
    )
    parent = relationship("Doc", remote_side=[id], back_populates="ui_variants")
    ui_variants = relationship(
        "Doc",
        back_populates="parent",
        cascade="all, delete-orphan",
        order_by="Doc.id",
    )

    @property
    def is_variant(self) -> bool:
        return self.parent_id is not None

    def __repr__(self):
        return f"<Doc(id={self.id}, unique_slug='{self.unique_slug}')>"
