from .components_repository import ComponentRepository
from .runtime_images_repository import RuntimeImageRepository

__all__ = [
    'ComponentRepository',
    'RuntimeImageRepository'
]
