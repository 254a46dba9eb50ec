"""Use cases do canal YouTube."""

from app.use_cases.youtube.fetch_video_comments import FetchVideoCommentsUseCase

__all__ = ["FetchVideoCommentsUseCase"]
