"""Contrato del catálogo de imágenes de perros.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- El orquestador se prueba con fakes en memoria, sin red.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.results import ApiResult


@runtime_checkable
class BreedImageSource(Protocol):
    """Catálogo de razas/sub-razas con imágenes aleatorias.

    Reglas de diseño:
    - Métodos asíncronos porque típicamente harán I/O (HTTP).
    - Nunca lanzan por fallos de red o de protocolo: devuelven `ApiResult`.
    """

    async def list_sub_breeds(self, breed: str) -> ApiResult[list[str]]:
        """Sub-razas de `breed` en el orden del catálogo (puede ser vacía)."""

        ...

    async def random_image(self, breed: str, sub_breed: str | None = None) -> ApiResult[str]:
        """URL de una imagen aleatoria; cadena vacía si no hay."""

        ...
