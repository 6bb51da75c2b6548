# doc_catalog/db/models/code.py
from sqlalchemy import Column, Integer, String, Text, ForeignKey, DateTime, func
from sqlalchemy.orm import relationship
from doc_catalog.db.base import Base


class Code(Base):
    """
    Language-tagged source snippet owned by exactly one doc.
    """

    __tablename__ = "codes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    language = Column(String(64), nullable=False, index=True, comment="e.g. jsx, css, tailwind")
    code = Column(Text, nullable=False)
    doc_id = Column(
        Integer, ForeignKey("docs.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    doc = relationship("Doc", back_populates="codes")

    def __repr__(self):
        return f"<Code(id={self.id}, language='{self.language}', doc_id={self.doc_id})>"
