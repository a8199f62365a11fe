"""Session builder modules for the different study modes."""

from srs.session_builders.pool_types import SessionFilters, StatusPools
from srs.session_builders.pool_utils import fill_in_order, fisher_yates_shuffle, shuffled
from srs.session_builders.review_builder import assemble_session, select_due_or_new
from srs.session_builders.topic_builder import (
    create_topic_session,
    filter_by_keywords,
    matches_keywords,
    partition_by_status,
    smart_pick,
)
from srs.session_builders.category_builder import (
    category_pool,
    create_category_session,
    lab_queue,
)

__all__ = [
    "SessionFilters",
    "StatusPools",
    "fill_in_order",
    "fisher_yates_shuffle",
    "shuffled",
    "assemble_session",
    "select_due_or_new",
    "create_topic_session",
    "filter_by_keywords",
    "matches_keywords",
    "partition_by_status",
    "smart_pick",
    "category_pool",
    "create_category_session",
    "lab_queue",
]
