from __future__ import annotations

from dataclasses import dataclass, field

from superrifas.modelos import Producto

ERROR_NOMBRE = "Nombre requerido"
ERROR_IMAGEN = "Imagen requerida"
ERROR_COMPRA_MINIMA = "Compra mínima requerida"


@dataclass(frozen=True)
class ResultadoValidacion:
    is_valid: bool
    errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"isValid": self.is_valid, "errors": list(self.errors)}


def validar_producto(producto: Producto) -> ResultadoValidacion:
    """Revisa los campos requeridos (todos, sin cortar en el primero).

    Solo informa: un producto inválido se sigue listando.
    """
    errors: list[str] = []

    if not producto.nombre:
        errors.append(ERROR_NOMBRE)
    if not producto.imagen:
        errors.append(ERROR_IMAGEN)
    if not producto.compra_minima:
        errors.append(ERROR_COMPRA_MINIMA)

    return ResultadoValidacion(is_valid=not errors, errors=errors)
