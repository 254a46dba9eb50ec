"""Taxonomia de erros do coletor de comentários.

Camadas inferiores nunca engolem erros: classificam e levantam.
Somente a borda HTTP traduz exceções em respostas.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.comment import Comment


class CommentHarvesterError(Exception):
    """Base de todos os erros do domínio, sempre com mensagem legível."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# ──────────────────────────────────────────────────────────────────────────────
# Validação (corrigível pelo usuário)
# ──────────────────────────────────────────────────────────────────────────────


class VideoReferenceError(CommentHarvesterError):
    """Referência de vídeo ausente ou não reconhecida."""


class EmptyVideoReferenceError(VideoReferenceError):
    """Entrada vazia ou só com espaços."""

    def __init__(self, message: str = "YouTube URL cannot be empty") -> None:
        super().__init__(message)


class InvalidVideoReferenceError(VideoReferenceError):
    """Nenhum formato conhecido de URL/ID casou com a entrada."""

    def __init__(
        self,
        message: str = "Invalid YouTube URL. Please provide a valid YouTube video URL.",
    ) -> None:
        super().__init__(message)


# ──────────────────────────────────────────────────────────────────────────────
# Configuração (corrigível pelo operador, nunca retentada)
# ──────────────────────────────────────────────────────────────────────────────


class CredentialError(CommentHarvesterError):
    """Material de credencial ausente ou inválido."""


class NoCredentialConfiguredError(CredentialError):
    """Nenhuma das variáveis de service account foi definida."""

    def __init__(
        self,
        message: str = (
            "Google service account not configured. Please set "
            "GOOGLE_SERVICE_ACCOUNT_BASE64, GOOGLE_SERVICE_ACCOUNT_JSON or "
            "GOOGLE_SERVICE_ACCOUNT_PATH."
        ),
    ) -> None:
        super().__init__(message)


class MalformedCredentialError(CredentialError):
    """Credencial não decodifica ou não é um objeto JSON."""


class IncompleteCredentialError(CredentialError):
    """Credencial sem um ou mais campos obrigatórios."""

    def __init__(self, missing_fields: tuple[str, ...]) -> None:
        super().__init__(
            "Service account JSON is missing required fields: " + ", ".join(missing_fields)
        )
        self.missing_fields = missing_fields


# ──────────────────────────────────────────────────────────────────────────────
# Fetch (classificação de falhas da YouTube Data API)
# ──────────────────────────────────────────────────────────────────────────────


class FetchError(CommentHarvesterError):
    """Falha classificada de uma chamada à plataforma."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class QuotaOrAuthError(FetchError):
    """HTTP 403: quota esgotada ou credencial sem permissão."""

    def __init__(
        self,
        message: str = "API quota exceeded or invalid API key",
        status_code: int | None = 403,
    ) -> None:
        super().__init__(message, status_code)


class CommentsNotFoundError(FetchError):
    """HTTP 404: recurso inexistente na plataforma."""

    def __init__(self, message: str = "Video not found", status_code: int | None = 404) -> None:
        super().__init__(message, status_code)


class TransientFetchError(FetchError):
    """Qualquer outra falha (5xx, 429, rede, timeout)."""

    def __init__(
        self,
        message: str = "Failed to fetch comments from YouTube",
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, status_code)


# ──────────────────────────────────────────────────────────────────────────────
# Agregação
# ──────────────────────────────────────────────────────────────────────────────


class AggregationError(CommentHarvesterError):
    """Condição terminal ou falha durante a agregação de páginas."""


class VideoNotFoundError(AggregationError):
    """Vídeo inexistente, privado ou inacessível."""

    def __init__(self, message: str = "Video not found or may be private") -> None:
        super().__init__(message)


class CommentsDisabledError(AggregationError):
    """Estatística de comentários igual a zero (desativados ou vazio)."""

    def __init__(
        self,
        message: str = "Comments are disabled for this video or no comments exist",
    ) -> None:
        super().__init__(message)


class PartialAggregationError(AggregationError):
    """Falha de página após ao menos uma página bem-sucedida.

    Carrega os comentários já acumulados para que o chamador decida
    se aproveita o resultado parcial.
    """

    def __init__(
        self,
        cause: FetchError,
        partial_comments: list[Comment],
        video_title: str,
    ) -> None:
        super().__init__(cause.message)
        self.cause = cause
        self.partial_comments = partial_comments
        self.video_title = video_title
