#!/usr/bin/env python3
"""Valida um JSON de service account e imprime os valores para deploy.

Uso:
    python scripts/prepare_service_account.py google-service-account.json
    python scripts/prepare_service_account.py sa.json --format base64

Saídas:
    json   -> valor para GOOGLE_SERVICE_ACCOUNT_JSON (JSON minificado)
    base64 -> valor para GOOGLE_SERVICE_ACCOUNT_BASE64 (use se o JSON
              for corrompido pela plataforma de deploy)
"""

from __future__ import annotations

import argparse
import base64
import json
import sys
from dataclasses import dataclass

from app.infra.youtube.credentials import load_credential_file, validate_credential_fields
from utils.errors import CredentialError


@dataclass(frozen=True)
class PreparedCredential:
    client_email: str
    project_id: str
    minified_json: str
    base64_json: str


def prepare_service_account(path: str) -> PreparedCredential:
    info = load_credential_file(path)
    validate_credential_fields(info)
    if info.get("type") != "service_account":
        raise CredentialError("This doesn't appear to be a service account JSON file")
    minified = json.dumps(info, separators=(",", ":"), ensure_ascii=False)
    return PreparedCredential(
        client_email=str(info["client_email"]),
        project_id=str(info["project_id"]),
        minified_json=minified,
        base64_json=base64.b64encode(minified.encode("utf-8")).decode("ascii"),
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", help="Caminho do arquivo JSON da service account.")
    parser.add_argument(
        "--format",
        choices=("json", "base64", "both"),
        default="both",
        help="Formato(s) a imprimir. Padrão: both.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        prepared = prepare_service_account(args.path)
    except CredentialError as exc:
        print(f"error: {exc.message}", file=sys.stderr)
        return 1

    print(f"client_email={prepared.client_email} project_id={prepared.project_id}")
    if args.format in ("json", "both"):
        print(f"GOOGLE_SERVICE_ACCOUNT_JSON='{prepared.minified_json}'")
    if args.format in ("base64", "both"):
        print(f"GOOGLE_SERVICE_ACCOUNT_BASE64={prepared.base64_json}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
