from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from dotenv import load_dotenv

load_dotenv()


# Service-account fields, in the order Google writes them in the JSON key file.
_SERVICE_ACCOUNT_FIELDS = (
    ("type", "GOOGLE_TYPE"),
    ("project_id", "GOOGLE_PROJECT_ID"),
    ("private_key_id", "GOOGLE_PRIVATE_KEY_ID"),
    ("private_key", "GOOGLE_PRIVATE_KEY"),
    ("client_email", "GOOGLE_CLIENT_EMAIL"),
    ("client_id", "GOOGLE_CLIENT_ID"),
    ("auth_uri", "GOOGLE_AUTH_URI"),
    ("token_uri", "GOOGLE_TOKEN_URI"),
    ("auth_provider_x509_cert_url", "GOOGLE_AUTH_PROVIDER_X509_CERT_URL"),
    ("client_x509_cert_url", "GOOGLE_CLIENT_X509_CERT_URL"),
    ("universe_domain", "GOOGLE_UNIVERSE_DOMAIN"),
)


@dataclass(frozen=True)
class Settings:
    # App
    APP_NAME: str = os.environ.get("APP_NAME", "Super Rifas API")
    APP_VERSION: str = os.environ.get("APP_VERSION", "1.0.0")
    # "development" exposes exception messages in 500 responses.
    APP_ENV: str = os.environ.get("APP_ENV", "production")

    # HTTP server
    HOST: str = os.environ.get("HOST", "0.0.0.0")
    PORT: int = int(os.environ.get("PORT", "3000"))
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")

    # Google Sheets source (read-only)
    GOOGLE_SHEETS_SPREADSHEET_ID: str = os.environ.get(
        "GOOGLE_SHEETS_SPREADSHEET_ID", "1xJ65-Z8cpoWzgBW3wcXTinKTAvh-L4zUmesouoAaVRA"
    )
    GOOGLE_SHEETS_WORKSHEET_NAME: str = os.environ.get("GOOGLE_SHEETS_WORKSHEET_NAME", "Productos participantes")
    # Columns A-D: nombre, vigencia, compra minima, imagen
    GOOGLE_SHEETS_RANGE: str = os.environ.get("GOOGLE_SHEETS_RANGE", "A:D")
    GOOGLE_CREDENTIALS_FILE: str = os.environ.get("GOOGLE_CREDENTIALS_FILE", "credentials.json")

    # Service account credentials passed through env (e.g. on a PaaS without files)
    GOOGLE_TYPE: str = os.environ.get("GOOGLE_TYPE", "service_account")
    GOOGLE_PROJECT_ID: str = os.environ.get("GOOGLE_PROJECT_ID", "")
    GOOGLE_PRIVATE_KEY_ID: str = os.environ.get("GOOGLE_PRIVATE_KEY_ID", "")
    GOOGLE_PRIVATE_KEY: str = os.environ.get("GOOGLE_PRIVATE_KEY", "")
    GOOGLE_CLIENT_EMAIL: str = os.environ.get("GOOGLE_CLIENT_EMAIL", "")
    GOOGLE_CLIENT_ID: str = os.environ.get("GOOGLE_CLIENT_ID", "")
    GOOGLE_AUTH_URI: str = os.environ.get("GOOGLE_AUTH_URI", "https://accounts.google.com/o/oauth2/auth")
    GOOGLE_TOKEN_URI: str = os.environ.get("GOOGLE_TOKEN_URI", "https://oauth2.googleapis.com/token")
    GOOGLE_AUTH_PROVIDER_X509_CERT_URL: str = os.environ.get(
        "GOOGLE_AUTH_PROVIDER_X509_CERT_URL", "https://www.googleapis.com/oauth2/v1/certs"
    )
    GOOGLE_CLIENT_X509_CERT_URL: str = os.environ.get("GOOGLE_CLIENT_X509_CERT_URL", "")
    GOOGLE_UNIVERSE_DOMAIN: str = os.environ.get("GOOGLE_UNIVERSE_DOMAIN", "googleapis.com")

    # CORS / rate limiting
    CORS_ALLOW_ORIGINS: str = os.environ.get("CORS_ALLOW_ORIGINS", "*")
    RATE_LIMIT_MAX_REQUESTS: int = int(os.environ.get("RATE_LIMIT_MAX_REQUESTS", "100"))
    RATE_LIMIT_WINDOW_SECONDS: int = int(os.environ.get("RATE_LIMIT_WINDOW_SECONDS", str(15 * 60)))

    def __post_init__(self) -> None:
        # Keys pasted into .env / dashboards usually carry literal "\n" sequences.
        key = str(self.GOOGLE_PRIVATE_KEY or "")
        if "\\n" in key:
            object.__setattr__(self, "GOOGLE_PRIVATE_KEY", key.replace("\\n", "\n"))

        object.__setattr__(self, "APP_ENV", str(self.APP_ENV or "").strip().lower())

    @property
    def is_development(self) -> bool:
        return self.APP_ENV == "development"

    @property
    def sheet_range(self) -> str:
        return f"{self.GOOGLE_SHEETS_WORKSHEET_NAME}!{self.GOOGLE_SHEETS_RANGE}"

    def service_account_info(self) -> dict[str, Any] | None:
        """Credenciales de Service Account armadas desde variables de entorno.

        Devuelve None si faltan la llave privada o el email del cliente; en ese
        caso se usa GOOGLE_CREDENTIALS_FILE.
        """
        if not self.GOOGLE_PRIVATE_KEY or not self.GOOGLE_CLIENT_EMAIL:
            return None
        return {field: getattr(self, attr) for field, attr in _SERVICE_ACCOUNT_FIELDS}
