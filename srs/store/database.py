"""
Database - SQL item store

Handles all database operations for learning items.
Uses SQLAlchemy ORM; Postgres in production, SQLite for tests and local use.

This module handles ONLY database I/O.
Scheduling logic is handled by the scheduler module.
"""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from srs import config
from srs.errors import UnknownFlagError
from srs.items import FLAG_NAMES, LearningItem, WordContent
from srs.store.base import ItemStore
from srs.store.models import Base, VocabularyItem as VocabularyItemModel

logger = logging.getLogger(__name__)

CONTENT_COLUMNS = (
    "word",
    "ipa",
    "meaning",
    "example",
    "note",
    "tags",
    "is_idiom",
    "is_phrasal_verb",
    "is_collocation",
    "is_standard_phrase",
    "needs_pronunciation_focus",
    "is_passive",
)

STATE_COLUMNS = (
    "next_review_at",
    "interval_days",
    "ease_factor",
    "consecutive_correct",
    "forgot_count",
    "last_review_at",
    "created_at",
    "updated_at",
)


def get_engine(database_url: Optional[str] = None) -> Engine:
    """
    Build a SQLAlchemy engine.

    SQLite URLs share one connection so in-memory databases survive across
    sessions; other backends use a connection pool.

    Args:
        database_url: Connection string (defaults to DATABASE_URL)

    Returns:
        SQLAlchemy Engine instance
    """
    db_url = database_url or config.get_database_url()

    if db_url.startswith("sqlite"):
        return create_engine(
            db_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=False
        )

    return create_engine(
        db_url,
        pool_size=5,           # Keep 5 connections open
        max_overflow=10,       # Allow up to 10 extra connections
        pool_pre_ping=True,    # Verify connections before use
        echo=False
    )


def to_item(row: VocabularyItemModel) -> LearningItem:
    content = WordContent(**{name: getattr(row, name) for name in CONTENT_COLUMNS})
    return LearningItem(
        id=row.id,
        owner_id=row.owner_id,
        content=content,
        **{name: getattr(row, name) for name in STATE_COLUMNS}
    )


def _copy_onto(row: VocabularyItemModel, item: LearningItem) -> None:
    for name in CONTENT_COLUMNS:
        value = getattr(item.content, name)
        setattr(row, name, list(value) if name == "tags" else value)
    for name in STATE_COLUMNS:
        setattr(row, name, getattr(item, name))


class SqlItemStore(ItemStore):
    """ItemStore backed by a relational database."""

    def __init__(self, database_url: Optional[str] = None, engine: Optional[Engine] = None):
        self.engine = engine or get_engine(database_url)
        self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)

    def get_session(self) -> Session:
        return self._session_factory()

    def init_db(self) -> None:
        """
        Initialize database schema if tables don't exist.

        Safe to call multiple times.
        """
        existing_tables = inspect(self.engine).get_table_names()
        if VocabularyItemModel.__tablename__ not in existing_tables:
            Base.metadata.create_all(self.engine)
            logger.info("Created table %s", VocabularyItemModel.__tablename__)

    def reset_db(self) -> None:
        """
        DANGEROUS: Delete all items and recreate tables.
        """
        Base.metadata.drop_all(self.engine)
        logger.warning("All item tables dropped")
        self.init_db()

    # ---- Queries ----

    def get_due_items(
        self,
        owner_id: str,
        before_time: int,
        limit: Optional[int] = None
    ) -> list[LearningItem]:
        session = self.get_session()
        try:
            query = session.query(VocabularyItemModel).filter(
                VocabularyItemModel.owner_id == owner_id,
                VocabularyItemModel.next_review_at <= before_time
            ).order_by(VocabularyItemModel.next_review_at)
            if limit is not None:
                query = query.limit(limit)
            return [to_item(row) for row in query.all()]
        finally:
            session.close()

    def get_new_items(self, owner_id: str, limit: Optional[int] = None) -> list[LearningItem]:
        session = self.get_session()
        try:
            query = session.query(VocabularyItemModel).filter(
                VocabularyItemModel.owner_id == owner_id,
                VocabularyItemModel.consecutive_correct == 0
            ).order_by(VocabularyItemModel.created_at.desc())
            if limit is not None:
                query = query.limit(limit)
            return [to_item(row) for row in query.all()]
        finally:
            session.close()

    def get_items_by_flag(self, owner_id: str, flag_name: str) -> list[LearningItem]:
        if flag_name not in FLAG_NAMES:
            raise UnknownFlagError(flag_name)

        session = self.get_session()
        try:
            rows = session.query(VocabularyItemModel).filter(
                VocabularyItemModel.owner_id == owner_id,
                getattr(VocabularyItemModel, flag_name).is_(True)
            ).all()
            return [to_item(row) for row in rows]
        finally:
            session.close()

    def get_all_items(self, owner_id: str) -> list[LearningItem]:
        session = self.get_session()
        try:
            rows = session.query(VocabularyItemModel).filter(
                VocabularyItemModel.owner_id == owner_id
            ).all()
            return [to_item(row) for row in rows]
        finally:
            session.close()

    def get_item(self, owner_id: str, item_id: str) -> Optional[LearningItem]:
        session = self.get_session()
        try:
            row = session.get(VocabularyItemModel, (owner_id, item_id))
            return to_item(row) if row is not None else None
        finally:
            session.close()

    # ---- Mutations ----

    def upsert(self, item: LearningItem) -> None:
        session = self.get_session()
        try:
            row = session.get(VocabularyItemModel, (item.owner_id, item.id))
            if row is None:
                row = VocabularyItemModel(owner_id=item.owner_id, id=item.id)
                session.add(row)
            _copy_onto(row, item)
            session.commit()
        finally:
            session.close()

    def batch_upsert(self, items: list[LearningItem]) -> None:
        """
        Save multiple items in a single transaction.
        """
        if not items:
            return

        session = self.get_session()
        try:
            for item in items:
                row = session.get(VocabularyItemModel, (item.owner_id, item.id))
                if row is None:
                    row = VocabularyItemModel(owner_id=item.owner_id, id=item.id)
                    session.add(row)
                _copy_onto(row, item)
            session.commit()
        finally:
            session.close()
