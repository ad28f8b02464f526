"""Like-ledger entity.

The ledger is the source of truth for comment like counts: one row per
(comment, user), inserted by a like and deleted by an unlike or by
cascading comment deletion. Rows are never updated in place.
"""

from datetime import datetime, timezone

from pydantic import Field

from engage.domain.model.common import DomainModel
from engage.domain.value import CommentId, LikeId, LikerId


class CommentLike(DomainModel):
    """One user's like of one comment.

    Business rules:
    - One like per user per comment (enforced by database unique constraint)
    - Inserted together with the comment's counter increment
    """

    id: LikeId
    comment_id: CommentId
    user_id: LikerId
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
