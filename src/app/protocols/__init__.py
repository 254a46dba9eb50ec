"""Protocolos e contratos do core da aplicação."""

from .comment_source import CommentSourceProtocol

__all__ = ["CommentSourceProtocol"]
