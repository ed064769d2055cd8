"""
Lectura de la hoja "Productos participantes" desde Google Sheets.

Requisitos:
1. Dependencias: pip install google-auth google-api-python-client
2. Crear un Service Account en Google Cloud Console y habilitar Google Sheets API
3. Compartir la hoja (solo lectura) con el email del Service Account
4. Configurar credenciales en .env, con las variables GOOGLE_* del JSON de la
   llave (GOOGLE_PRIVATE_KEY, GOOGLE_CLIENT_EMAIL, ...) o con la ruta al JSON:
   GOOGLE_CREDENTIALS_FILE=credentials.json
   GOOGLE_SHEETS_SPREADSHEET_ID=tu_spreadsheet_id
   GOOGLE_SHEETS_WORKSHEET_NAME=Productos participantes

Uso:
    from superrifas.google_sheets import GoogleSheetsSource

    source = GoogleSheetsSource(settings)
    rows = source.fetch_rows()  # [[nombre, vigencia, compra minima, imagen], ...] o None
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from superrifas.settings import Settings

logger = logging.getLogger(__name__)


SCOPES = ['https://www.googleapis.com/auth/spreadsheets.readonly']


class GoogleSheetsError(RuntimeError):
    """Fallo al autenticar o leer la hoja (red, permisos, credenciales)."""


class GoogleSheetsSource:
    """Fuente de filas crudas: lee el rango configurado de la hoja."""

    def __init__(self, settings: Settings | None = None, service: Any = None):
        self.settings = settings or Settings()
        # Only for injection (tests); otherwise a client is built per fetch.
        self._service = service

    def _get_credentials(self) -> service_account.Credentials:
        """Credenciales de Service Account (variables de entorno o archivo JSON)."""
        info = self.settings.service_account_info()
        if info is not None:
            logger.debug("Usando Service Account desde variables de entorno (%s)", info.get("client_email"))
            return service_account.Credentials.from_service_account_info(info, scopes=SCOPES)

        creds_file = Path(self.settings.GOOGLE_CREDENTIALS_FILE)
        if not creds_file.exists():
            raise GoogleSheetsError(
                f"Archivo de credenciales {creds_file} no encontrado y sin GOOGLE_PRIVATE_KEY/GOOGLE_CLIENT_EMAIL en el entorno."
            )

        logger.debug("Usando Service Account desde %s", creds_file)
        return service_account.Credentials.from_service_account_file(str(creds_file), scopes=SCOPES)

    def _get_service(self):
        """Obtiene el servicio de Google Sheets API."""
        if self._service is not None:
            return self._service

        creds = self._get_credentials()
        # httplib2 clients are not thread-safe: one per fetch.
        return build('sheets', 'v4', credentials=creds, cache_discovery=False)

    def fetch_rows(self) -> list[list[Any]] | None:
        """
        Lee el rango configurado (por defecto A:D) incluyendo la fila de encabezados.

        Returns:
            Lista de filas, o None si la hoja no devolvió valores

        Raises:
            GoogleSheetsError: si falla la autenticación o la llamada a la API
        """
        spreadsheet_id = self.settings.GOOGLE_SHEETS_SPREADSHEET_ID
        range_name = self.settings.sheet_range

        try:
            service = self._get_service()
            result = service.spreadsheets().values().get(
                spreadsheetId=spreadsheet_id,
                range=range_name,
            ).execute()
        except GoogleSheetsError:
            raise
        except HttpError as e:
            raise GoogleSheetsError(f"Error de la API de Google Sheets ({e.resp.status}): {e}") from e
        except (GoogleAuthError, OSError, ValueError) as e:
            raise GoogleSheetsError(f"Error leyendo Google Sheets: {e}") from e

        rows = result.get('values')
        logger.info("Datos obtenidos de %s: %s filas", range_name, len(rows) if rows else 0)
        return rows

    def get_spreadsheet_url(self) -> str:
        """Obtiene la URL del spreadsheet configurado."""
        if not self.settings.GOOGLE_SHEETS_SPREADSHEET_ID:
            return ""
        return f"https://docs.google.com/spreadsheets/d/{self.settings.GOOGLE_SHEETS_SPREADSHEET_ID}/edit"
