"""Get user comments use case."""

from datetime import datetime

from pydantic import BaseModel

from engage.domain.repository import AnimeRepository
from engage.domain.service import CommentService

UNKNOWN_ANIME_NAME = "Unknown Anime"


class UserCommentItem(BaseModel):
    """Comment in a user's history, labelled with catalog info."""

    id: str
    anime_id: int
    episode_id: int
    anime_name: str
    episode_number: int
    text: str
    timestamp: datetime
    likes: int
    is_reply: bool


class GetUserCommentsRequest(BaseModel):
    """Get user comments request."""

    user_name: str


class GetUserCommentsUseCase:
    """Use case for listing everything a user has written."""

    def __init__(
        self,
        comment_service: CommentService,
        anime_repository: AnimeRepository,
    ) -> None:
        """Initialize get user comments use case.

        Args:
            comment_service: Comment domain service
            anime_repository: Catalog, for anime names and episode numbers
        """
        self.comment_service = comment_service
        self.anime_repository = anime_repository

    async def execute(self, request: GetUserCommentsRequest) -> list[UserCommentItem]:
        """Execute get user comments flow.

        Comments on anime or episodes missing from the catalog are kept,
        labelled "Unknown Anime" and episode number 0.

        Raises:
            ValidationError: If the user name is malformed
        """
        comments = await self.comment_service.get_comments_by_user(request.user_name)

        animes = {a.id: a for a in await self.anime_repository.find_all()}
        items = []
        for comment in comments:
            anime = animes.get(comment.anime_id)
            episode = anime.find_episode(comment.episode_id) if anime else None
            items.append(
                UserCommentItem(
                    id=str(comment.id),
                    anime_id=comment.anime_id,
                    episode_id=comment.episode_id,
                    anime_name=anime.anime_name if anime else UNKNOWN_ANIME_NAME,
                    episode_number=episode.episode_number if episode else 0,
                    text=comment.text,
                    timestamp=comment.timestamp,
                    likes=comment.likes,
                    is_reply=comment.is_reply,
                )
            )
        return items
