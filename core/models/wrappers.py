from pydantic.dataclasses import dataclass

from core.models.component import Component


@dataclass(frozen=True)
class ComponentsFile:
    components: list[Component]


@dataclass(frozen=True)
class RuntimeImagesFile:
    runtime_images: dict[str, str]
