"""Response items shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from engage.domain.model import Comment


class CommentItem(BaseModel):
    """Comment or reply in a response."""

    id: str
    anime_id: int
    episode_id: int
    user_name: str
    user_avatar: str
    text: str
    timestamp: datetime
    likes: int
    parent_id: str | None
    is_reply: bool

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        """Build a response item from a domain comment."""
        return cls(
            id=str(comment.id),
            anime_id=comment.anime_id,
            episode_id=comment.episode_id,
            user_name=comment.user_name.root,
            user_avatar=comment.user_avatar.value,
            text=comment.text,
            timestamp=comment.timestamp,
            likes=comment.likes,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            is_reply=comment.is_reply,
        )
