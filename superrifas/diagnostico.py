"""
Diagnóstico de la integración con Google Sheets.

Este script te ayuda a:
1. Verificar que la configuración y las credenciales estén presentes
2. Probar la conexión con Google Sheets
3. Ver cómo quedan los productos normalizados y sus estadísticas

Uso:
    python -m superrifas.diagnostico [--limit 10]
"""

from __future__ import annotations

import argparse
from pathlib import Path

from superrifas.catalogo import CatalogoProductos
from superrifas.estadisticas import calcular_estadisticas, resumen_validacion
from superrifas.google_sheets import GoogleSheetsError, GoogleSheetsSource
from superrifas.settings import Settings
from superrifas.validacion import validar_producto


def _print_config(settings: Settings) -> None:
    print("📋 Configuración actual:")
    print(f"  GOOGLE_SHEETS_SPREADSHEET_ID: {settings.GOOGLE_SHEETS_SPREADSHEET_ID or '(no configurado)'}")
    print(f"  GOOGLE_SHEETS_WORKSHEET_NAME: {settings.GOOGLE_SHEETS_WORKSHEET_NAME}")
    print(f"  Rango: {settings.sheet_range}")
    if settings.service_account_info() is not None:
        print(f"  Credenciales: variables de entorno ({settings.GOOGLE_CLIENT_EMAIL})")
    else:
        print(f"  Credenciales: archivo {settings.GOOGLE_CREDENTIALS_FILE}")
    print()


def main(
    argv: list[str] | None = None,
    settings: Settings | None = None,
    source: GoogleSheetsSource | None = None,
) -> int:
    parser = argparse.ArgumentParser(description="Prueba la lectura de productos desde Google Sheets")
    parser.add_argument("--limit", type=int, default=10, help="Productos a mostrar")
    args = parser.parse_args(argv)

    settings = settings or Settings()
    print("=" * 60)
    print("Google Sheets - Diagnóstico")
    print("=" * 60)
    print()
    _print_config(settings)

    if not settings.GOOGLE_SHEETS_SPREADSHEET_ID:
        print("⚠️  GOOGLE_SHEETS_SPREADSHEET_ID no está configurado en .env")
        return 1

    if source is None:
        if settings.service_account_info() is None and not Path(settings.GOOGLE_CREDENTIALS_FILE).exists():
            print(f"⚠️  Archivo {settings.GOOGLE_CREDENTIALS_FILE} no encontrado")
            print("   Configura GOOGLE_PRIVATE_KEY y GOOGLE_CLIENT_EMAIL en .env, o descarga el JSON")
            print("   del Service Account desde https://console.cloud.google.com/")
            return 1
        source = GoogleSheetsSource(settings)

    print(f"📊 Spreadsheet URL: {source.get_spreadsheet_url()}")
    print("🔄 Leyendo productos...")
    try:
        productos = CatalogoProductos(source).listar()
    except GoogleSheetsError as e:
        print(f"❌ ERROR: {e}")
        return 1

    stats = calcular_estadisticas(productos)
    resumen = resumen_validacion(productos)
    print(f"✅ Productos procesados: {stats.total_productos}")
    print(f"   Con imagen: {stats.con_imagen} - Sin imagen: {stats.sin_imagen} - Con vigencia: {stats.con_vigencia}")
    print(f"   Válidos: {resumen.validos} - Incompletos: {resumen.invalidos}")
    print()

    for i, p in enumerate(productos[: max(args.limit, 0)], 1):
        res = validar_producto(p)
        estado = "OK" if res.is_valid else ", ".join(res.errors)
        print(f"   {i}. [{p.id}] {p.nombre} - {p.fecha_inicio or '?'} a {p.fecha_fin or '?'} - {estado}")

    if len(productos) > args.limit:
        print(f"   ... y {len(productos) - args.limit} productos más")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
