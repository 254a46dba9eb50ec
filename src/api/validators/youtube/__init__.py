"""Validadores de entrada do canal YouTube."""

from api.validators.youtube.video_reference import (
    VIDEO_ID_LENGTH,
    is_video_id,
    resolve_video_reference,
)

__all__ = ["VIDEO_ID_LENGTH", "is_video_id", "resolve_video_reference"]
