"""
SQLAlchemy ORM Models for the item store.

One row per learning item, content fields flattened into columns so the
category flags can be queried directly.
"""

from sqlalchemy import JSON, BigInteger, Boolean, Column, Float, Integer, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class VocabularyItem(Base):
    """
    Persistent state for a single learning item (owner_id + id).
    """
    __tablename__ = 'vocabulary_items'

    # Primary key: composite of owner_id and item id
    owner_id = Column(String(255), primary_key=True, nullable=False)
    id = Column(String(64), primary_key=True, nullable=False)

    # Content (opaque to the scheduler)
    word = Column(String(255), nullable=False)
    ipa = Column(String(255), nullable=False, default="")
    meaning = Column(Text, nullable=False, default="")
    example = Column(Text, nullable=False, default="")
    note = Column(Text, nullable=False, default="")
    tags = Column(JSON, nullable=False, default=list)

    # Category flags
    is_idiom = Column(Boolean, nullable=False, default=False)
    is_phrasal_verb = Column(Boolean, nullable=False, default=False)
    is_collocation = Column(Boolean, nullable=False, default=False)
    is_standard_phrase = Column(Boolean, nullable=False, default=False)
    needs_pronunciation_focus = Column(Boolean, nullable=False, default=False)
    is_passive = Column(Boolean, nullable=False, default=False)

    # Scheduling state (timestamps are epoch ms)
    next_review_at = Column(BigInteger, nullable=False, index=True)
    interval_days = Column(Integer, nullable=False)
    ease_factor = Column(Float, nullable=False)
    consecutive_correct = Column(Integer, nullable=False)
    forgot_count = Column(Integer, nullable=False, default=0)
    last_review_at = Column(BigInteger, nullable=True)

    # Bookkeeping
    created_at = Column(BigInteger, nullable=False)
    updated_at = Column(BigInteger, nullable=False)

    def __repr__(self):
        return f"<VocabularyItem({self.owner_id}, {self.id}, {self.word!r})>"
