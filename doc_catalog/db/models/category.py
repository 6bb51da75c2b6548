# doc_catalog/db/models/category.py
from sqlalchemy import Column, Integer, String, DateTime, func
from sqlalchemy.orm import relationship
from doc_catalog.db.base import Base
from doc_catalog.core.slug_generator import SLUG_COLUMN_LENGTH


class Category(Base):
    """
    Category grouping documented UI components (e.g. "Buttons").
    """

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    category_name = Column(String(255), nullable=False)
    slug = Column(String(SLUG_COLUMN_LENGTH), nullable=False, unique=True, index=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Docs survive their category; the foreign key is nulled instead
    docs = relationship("Doc", back_populates="category", passive_deletes=True)

    def __repr__(self):
        return f"<Category(id={self.id}, slug='{self.slug}')>"
