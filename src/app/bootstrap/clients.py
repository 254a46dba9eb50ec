"""Factories de clientes externos: YouTube Data API.

A credencial e o resource do googleapiclient são criados uma vez por
processo e só lidos depois disso; chamadas concorrentes compartilham
apenas esses objetos imutáveis.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING, Any

from app.infra.youtube import ServiceAccountCredential, resolve_service_account
from config.settings.youtube import (
    YOUTUBE_API_SERVICE_NAME,
    YOUTUBE_API_VERSION,
    YOUTUBE_SCOPE,
    get_youtube_settings,
)
from utils.errors import MalformedCredentialError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


def create_youtube_service(
    credential: ServiceAccountCredential,
    scopes: Sequence[str] = (YOUTUBE_SCOPE,),
) -> Any:
    """Cria o resource `youtube v3` autenticado pela service account.

    Nenhuma chamada de rede acontece aqui: o token é obtido na primeira
    requisição real, mas a chave privada já é carregada pelo signer.

    Raises:
        MalformedCredentialError: google-auth rejeitou a credencial
            (chave PEM inválida, `token_uri` ausente, etc.).
    """
    from google.auth.exceptions import GoogleAuthError
    from google.oauth2 import service_account
    from googleapiclient.discovery import build

    try:
        credentials = service_account.Credentials.from_service_account_info(
            credential.as_dict(),
            scopes=list(scopes),
        )
        service = build(
            YOUTUBE_API_SERVICE_NAME,
            YOUTUBE_API_VERSION,
            credentials=credentials,
            cache_discovery=False,
        )
    except (GoogleAuthError, ValueError) as exc:
        logger.warning(
            "youtube_service_rejected_credential",
            extra={
                "component": "bootstrap",
                "result": "failed",
                "credential_source": credential.source,
                "error_type": type(exc).__name__,
            },
        )
        raise MalformedCredentialError(
            f"Service account rejected by google-auth: {exc}"
        ) from exc
    logger.info(
        "youtube_service_created",
        extra={"credential_source": credential.source, "project_id": credential.project_id},
    )
    return service


@lru_cache(maxsize=1)
def get_service_account_credential() -> ServiceAccountCredential:
    """Credencial do processo (singleton), resolvida a partir das settings.

    Raises:
        CredentialError: Configuração ausente ou inválida.
    """
    return resolve_service_account(get_youtube_settings())


@lru_cache(maxsize=1)
def get_youtube_service() -> Any:
    """Resource do googleapiclient (singleton).

    Raises:
        CredentialError: Credencial ausente, inválida ou rejeitada pelo google-auth.
    """
    return create_youtube_service(get_service_account_credential())
