"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    AggregationError,
    CommentHarvesterError,
    CommentsDisabledError,
    CommentsNotFoundError,
    CredentialError,
    EmptyVideoReferenceError,
    FetchError,
    IncompleteCredentialError,
    InvalidVideoReferenceError,
    MalformedCredentialError,
    NoCredentialConfiguredError,
    PartialAggregationError,
    QuotaOrAuthError,
    TransientFetchError,
    VideoNotFoundError,
    VideoReferenceError,
)

__all__ = [
    "AggregationError",
    "CommentHarvesterError",
    "CommentsDisabledError",
    "CommentsNotFoundError",
    "CredentialError",
    "EmptyVideoReferenceError",
    "FetchError",
    "IncompleteCredentialError",
    "InvalidVideoReferenceError",
    "MalformedCredentialError",
    "NoCredentialConfiguredError",
    "PartialAggregationError",
    "QuotaOrAuthError",
    "TransientFetchError",
    "VideoNotFoundError",
    "VideoReferenceError",
]
