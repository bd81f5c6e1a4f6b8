"""
Ownership scope for insights queries.

Comments and likes belong to the requesting user's insights only through the
topic they were left on. The scope object carries that rule into every query
explicitly instead of relying on relationship traversal.
"""
from dataclasses import dataclass

from sqlalchemy import select

from forum_insights.models import TopicORM


@dataclass(frozen=True)
class TopicOwnerScope:
    """Restricts queries to topics owned by ``owner_id``."""
    owner_id: int

    def topic_clause(self):
        """WHERE clause selecting the owner's topics."""
        return TopicORM.user_id == self.owner_id

    def owned_topic_ids(self):
        return select(TopicORM.id).where(self.topic_clause())

    def via_topic(self, topic_id_column):
        """WHERE clause for child rows whose topic is owned by ``owner_id``."""
        return topic_id_column.in_(self.owned_topic_ids())

    def admits(self, topic_owner_id: int) -> bool:
        """Same predicate as ``topic_clause`` for rows already in memory."""
        return topic_owner_id == self.owner_id
