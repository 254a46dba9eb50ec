"""Settings base do serviço: ambiente, logging e servidor HTTP."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

VALID_ENVIRONMENTS: frozenset[str] = frozenset({"development", "staging", "production"})


@dataclass(frozen=True)
class BaseSettings:
    """Configurações comuns ao processo.

    Attributes:
        environment: Ambiente de execução (development|staging|production)
        service_name: Nome do serviço para logs e tracing
        debug: Modo debug ativo (habilita reload no `main()`)
        log_level: Nível de log do handler JSON
        host: Interface de bind do uvicorn
        port: Porta HTTP (Cloud Run injeta PORT)
        cors_allow_origins: Origens aceitas pelo CORS do front-end
    """

    environment: Environment = "development"
    service_name: str = "yt-comment-harvester"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 8080
    cors_allow_origins: tuple[str, ...] = field(default=("*",))

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []
        if self.environment not in VALID_ENVIRONMENTS:
            errors.append(f"ENVIRONMENT inválido: {self.environment}")
        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")
        if not 0 < self.port < 65536:
            errors.append(f"PORT fora do intervalo: {self.port}")
        if self.is_production and "*" in self.cors_allow_origins:
            errors.append("CORS_ALLOW_ORIGINS não pode ser '*' em produção")
        return errors


def _parse_environment(env_str: str) -> Environment:
    env_lower = env_str.strip().lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    return "development"


def _parse_origins(raw: str) -> tuple[str, ...]:
    origins = tuple(origin.strip() for origin in raw.split(",") if origin.strip())
    return origins or ("*",)


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variáveis de ambiente."""
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "yt-comment-harvester"),
        debug=os.getenv("DEBUG", "").lower() in ("true", "1", "yes"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        host=os.getenv("HOST", "0.0.0.0"),  # noqa: S104
        port=int(os.getenv("PORT", "8080")),
        cors_allow_origins=_parse_origins(os.getenv("CORS_ALLOW_ORIGINS", "*")),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
