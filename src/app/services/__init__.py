"""Serviços de aplicação.

Unidades reutilizáveis de orquestração (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.comment_aggregator import CommentAggregator, FetchSession
from app.services.comment_export import ExportRow, export_filename, flatten_comments

__all__ = [
    "CommentAggregator",
    "ExportRow",
    "FetchSession",
    "export_filename",
    "flatten_comments",
]
