import os
from ruamel.yaml import YAML
from core.models import DEFAULT_RUNTIME_IMAGES, RuntimeImages
from core.models.wrappers import RuntimeImagesFile
from core.utils.yaml_loader import get_yaml_instance


class RuntimeImageRepository:
    def __init__(self, file_path: str | None):
        self.file_path: str | None = file_path
        self.yaml: YAML = get_yaml_instance()

    def load(self) -> RuntimeImages:
        if not self.file_path or not os.path.isfile(self.file_path):
            return DEFAULT_RUNTIME_IMAGES
        with open(self.file_path, "r") as f:
            data = self.yaml.load(f)
            try:
                parsed = RuntimeImagesFile(**data)
                return RuntimeImages(images=dict(parsed.runtime_images))
            except Exception as e:
                raise ValueError(f"Invalid runtime-images.yaml structure: {e}") from e
