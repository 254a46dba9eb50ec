"""Resolução da credencial de service account a partir da configuração.

Três codificações aceitas, verificadas nesta ordem fixa:
1. JSON em base64 (GOOGLE_SERVICE_ACCOUNT_BASE64)
2. JSON inline (GOOGLE_SERVICE_ACCOUNT_JSON)
3. Caminho de arquivo (GOOGLE_SERVICE_ACCOUNT_PATH)

Alguns pipelines de deploy corrompem JSON cru mas preservam base64,
por isso base64 vem primeiro. A credencial é resolvida uma vez no startup
e fica imutável; nenhum handshake de rede acontece aqui.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Literal

from utils.errors import (
    IncompleteCredentialError,
    MalformedCredentialError,
    NoCredentialConfiguredError,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from config.settings.youtube import YouTubeSettings

logger = logging.getLogger(__name__)

_COMPONENT = "credential_resolver"
_INLINE_VARIABLE = "GOOGLE_SERVICE_ACCOUNT_JSON"

CredentialSource = Literal["base64", "json", "file"]

REQUIRED_FIELDS: tuple[str, ...] = ("type", "project_id", "private_key", "client_email")


@dataclass(frozen=True)
class ServiceAccountCredential:
    """Credencial normalizada, independente da codificação de origem."""

    source: CredentialSource
    info: Mapping[str, Any] = field(repr=False)

    @property
    def client_email(self) -> str:
        return str(self.info.get("client_email", ""))

    @property
    def project_id(self) -> str:
        return str(self.info.get("project_id", ""))

    def as_dict(self) -> dict[str, Any]:
        """Cópia mutável no formato esperado pelo google-auth."""
        return dict(self.info)


def resolve_service_account(settings: YouTubeSettings) -> ServiceAccountCredential:
    """Seleciona a primeira fonte preenchida e normaliza a credencial.

    Raises:
        NoCredentialConfiguredError: Nenhuma das três fontes definida.
        MalformedCredentialError: Falha de decode, parse ou leitura de arquivo.
        IncompleteCredentialError: Campos obrigatórios ausentes (todos listados).
    """
    if settings.service_account_base64.strip():
        source: CredentialSource = "base64"
        info = parse_base64_credential(settings.service_account_base64)
    elif settings.service_account_json.strip():
        source = "json"
        info = parse_inline_credential(settings.service_account_json)
    elif settings.service_account_path.strip():
        source = "file"
        info = load_credential_file(settings.service_account_path)
    else:
        raise NoCredentialConfiguredError

    validate_credential_fields(info)
    credential = ServiceAccountCredential(source=source, info=MappingProxyType(info))
    logger.info(
        "service_account_resolved",
        extra={
            "component": _COMPONENT,
            "credential_source": source,
            "project_id": credential.project_id,
        },
    )
    return credential


def parse_base64_credential(raw: str) -> dict[str, Any]:
    """Decodifica base64 e faz o parse do JSON resultante."""
    try:
        decoded = base64.b64decode(raw.strip(), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise MalformedCredentialError(
            f"Invalid GOOGLE_SERVICE_ACCOUNT_BASE64 format: {exc}"
        ) from exc
    return _parse_json_object(decoded, "GOOGLE_SERVICE_ACCOUNT_BASE64")


def parse_inline_credential(raw: str) -> dict[str, Any]:
    """Faz o parse do JSON inline, tolerando artefatos de deploy.

    Ordem de tentativas:
    1. JSON válido como está (escapes internos preservados).
    2. String JSON contendo o objeto serializado (``json.dumps`` duas vezes).
    3. Reparo textual de aspas externas e ``\\"``/``\\n`` literais.
    """
    payload = _loads_or_none(raw.strip())
    if isinstance(payload, str):
        payload = _loads_or_none(payload.strip())
    if isinstance(payload, dict):
        return payload
    return _parse_json_object(normalize_inline_json(raw), _INLINE_VARIABLE)


def normalize_inline_json(raw: str) -> str:
    """Remove aspas externas e desfaz escape duplo de ``\\"`` e ``\\n``."""
    text = raw.strip()
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        text = text[1:-1]
    return text.replace('\\"', '"').replace("\\n", "\n")


def load_credential_file(raw_path: str) -> dict[str, Any]:
    """Lê o arquivo de service account relativo ao diretório de trabalho."""
    path = Path(raw_path.strip()).resolve()
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise MalformedCredentialError(f"Service account file not found at: {path}") from exc
    return _parse_json_object(content, "GOOGLE_SERVICE_ACCOUNT_PATH")


def validate_credential_fields(info: Mapping[str, Any]) -> None:
    """Garante os campos obrigatórios, reportando todos os ausentes juntos."""
    missing = tuple(name for name in REQUIRED_FIELDS if not info.get(name))
    if missing:
        raise IncompleteCredentialError(missing)


def _loads_or_none(text: str) -> Any:
    # Falha aqui só desvia para o reparo textual, que reporta o erro final
    try:
        return json.loads(text, strict=False)
    except json.JSONDecodeError:
        return None


def _parse_json_object(text: str, variable: str) -> dict[str, Any]:
    try:
        # strict=False aceita as quebras de linha reais da private_key
        payload = json.loads(text, strict=False)
    except json.JSONDecodeError as exc:
        raise MalformedCredentialError(
            f"Invalid {variable} format. Please ensure it contains valid JSON: {exc.msg}"
        ) from exc
    if not isinstance(payload, dict):
        raise MalformedCredentialError(f"Invalid {variable} format: expected a JSON object")
    return payload


__all__ = [
    "REQUIRED_FIELDS",
    "CredentialSource",
    "ServiceAccountCredential",
    "load_credential_file",
    "normalize_inline_json",
    "parse_base64_credential",
    "parse_inline_credential",
    "resolve_service_account",
    "validate_credential_fields",
]
