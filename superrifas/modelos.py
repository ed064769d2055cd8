from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def iso_utc(dt: datetime) -> str:
    # 2024-01-31T12:00:00.000Z, same shape JS clients get from toISOString()
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class Producto:
    """Producto participante, normalizado desde una fila del sheet.

    Se recalcula en cada lectura; nada lo modifica después de construido.
    """

    id: str
    nombre: str
    vigencia_completa: str = ""
    fecha_inicio: str = ""
    fecha_fin: str = ""
    compra_minima: str = ""
    imagen: str = ""
    # Informativo: no participa en identidad ni estadísticas.
    fecha_actualizacion: datetime = field(default_factory=utc_now, compare=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "nombre": self.nombre,
            "vigenciaCompleta": self.vigencia_completa,
            "fechaInicio": self.fecha_inicio,
            "fechaFin": self.fecha_fin,
            "compraMinima": self.compra_minima,
            "imagen": self.imagen,
            "id": self.id,
            "fechaActualizacion": iso_utc(self.fecha_actualizacion),
        }
