"""Settings específicas de YouTube.

Credencial de service account (três codificações aceitas), ritmo de
paginação, timeouts e retry da YouTube Data API v3.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

# Constantes da YouTube API
YOUTUBE_API_SERVICE_NAME: str = "youtube"
YOUTUBE_API_VERSION: str = "v3"
YOUTUBE_SCOPE: str = "https://www.googleapis.com/auth/youtube.force-ssl"
YOUTUBE_MAX_PAGE_SIZE: int = 100


@dataclass(frozen=True)
class YouTubeSettings:
    """Configurações do canal YouTube.

    Attributes:
        service_account_base64: JSON da service account codificado em base64
        service_account_json: JSON da service account em texto
        service_account_path: Caminho do arquivo JSON da service account
        page_delay_seconds: Pausa entre páginas para orçamentos pequenos
        large_page_delay_seconds: Pausa entre páginas para orçamentos grandes
        large_request_threshold: Orçamento acima do qual usa a pausa maior
        request_timeout_seconds: Timeout de cada chamada à API
        max_retries: Retentativas para falhas transitórias de página
        backoff_base_seconds: Base do backoff exponencial
        backoff_max_seconds: Teto do backoff exponencial
        max_results_limit: Maior orçamento aceito por requisição
        default_max_results: Orçamento quando o chamador não informa
        export_timezone: Timezone usado na exportação achatada
    """

    # Credenciais (prioridade: base64 > json > path)
    service_account_base64: str = ""
    service_account_json: str = ""
    service_account_path: str = ""

    # Ritmo de paginação
    page_delay_seconds: float = 0.1
    large_page_delay_seconds: float = 0.2
    large_request_threshold: int = 1000

    # Timeouts e retries
    request_timeout_seconds: float = 30.0
    max_retries: int = 2
    backoff_base_seconds: float = 0.5
    backoff_max_seconds: float = 8.0

    # Limites de orçamento
    max_results_limit: int = 10000
    default_max_results: int = 100

    export_timezone: str = "UTC"

    @property
    def has_credentials(self) -> bool:
        """True se alguma das três fontes de credencial está preenchida."""
        return any(
            value.strip()
            for value in (
                self.service_account_base64,
                self.service_account_json,
                self.service_account_path,
            )
        )

    @property
    def export_zone(self) -> ZoneInfo:
        """Fuso usado nos timestamps achatados (ver flatten_comments)."""
        return ZoneInfo(self.export_timezone)

    def page_delay_for(self, target_count: int) -> float:
        """Pausa fixa entre páginas conforme o tamanho do orçamento."""
        if target_count > self.large_request_threshold:
            return self.large_page_delay_seconds
        return self.page_delay_seconds

    def validate(self) -> list[str]:
        """Valida configurações mínimas de YouTube."""
        errors: list[str] = []
        if not self.has_credentials:
            errors.append(
                "GOOGLE_SERVICE_ACCOUNT_BASE64, GOOGLE_SERVICE_ACCOUNT_JSON ou "
                "GOOGLE_SERVICE_ACCOUNT_PATH não configurado"
            )
        if self.page_delay_seconds < 0 or self.large_page_delay_seconds < 0:
            errors.append("YOUTUBE_PAGE_DELAY_SECONDS não pode ser negativo")
        if self.request_timeout_seconds <= 0:
            errors.append("YOUTUBE_REQUEST_TIMEOUT_SECONDS deve ser > 0")
        if self.max_retries < 0:
            errors.append("YOUTUBE_MAX_RETRIES não pode ser negativo")
        if self.max_results_limit < 1:
            errors.append("YOUTUBE_MAX_RESULTS_LIMIT deve ser >= 1")
        if not 1 <= self.default_max_results <= self.max_results_limit:
            errors.append("YOUTUBE_DEFAULT_MAX_RESULTS fora do intervalo permitido")
        if not _is_valid_timezone(self.export_timezone):
            errors.append(f"EXPORT_TIMEZONE inválido: {self.export_timezone}")
        return errors


def _is_valid_timezone(name: str) -> bool:
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return False
    return True


def _load_from_env() -> YouTubeSettings:
    """Carrega YouTubeSettings de variáveis de ambiente."""
    return YouTubeSettings(
        service_account_base64=os.getenv("GOOGLE_SERVICE_ACCOUNT_BASE64", ""),
        service_account_json=os.getenv("GOOGLE_SERVICE_ACCOUNT_JSON", ""),
        service_account_path=os.getenv("GOOGLE_SERVICE_ACCOUNT_PATH", ""),
        page_delay_seconds=float(os.getenv("YOUTUBE_PAGE_DELAY_SECONDS", "0.1")),
        large_page_delay_seconds=float(os.getenv("YOUTUBE_LARGE_PAGE_DELAY_SECONDS", "0.2")),
        large_request_threshold=int(os.getenv("YOUTUBE_LARGE_REQUEST_THRESHOLD", "1000")),
        request_timeout_seconds=float(os.getenv("YOUTUBE_REQUEST_TIMEOUT_SECONDS", "30")),
        max_retries=int(os.getenv("YOUTUBE_MAX_RETRIES", "2")),
        backoff_base_seconds=float(os.getenv("YOUTUBE_BACKOFF_BASE_SECONDS", "0.5")),
        backoff_max_seconds=float(os.getenv("YOUTUBE_BACKOFF_MAX_SECONDS", "8")),
        max_results_limit=int(os.getenv("YOUTUBE_MAX_RESULTS_LIMIT", "10000")),
        default_max_results=int(os.getenv("YOUTUBE_DEFAULT_MAX_RESULTS", "100")),
        export_timezone=os.getenv("EXPORT_TIMEZONE", "UTC"),
    )


@lru_cache(maxsize=1)
def get_youtube_settings() -> YouTubeSettings:
    """Retorna instância cacheada de YouTubeSettings."""
    return _load_from_env()


__all__ = [
    "YOUTUBE_API_SERVICE_NAME",
    "YOUTUBE_API_VERSION",
    "YOUTUBE_MAX_PAGE_SIZE",
    "YOUTUBE_SCOPE",
    "YouTubeSettings",
    "get_youtube_settings",
]
