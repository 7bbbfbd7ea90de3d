"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el Core depende de abstracciones.
"""

from core.interfaces.sources import BreedImageSource
from core.interfaces.storage import FileStorage

__all__ = [
    "BreedImageSource",
    "FileStorage",
]
