import pytest
import os
import shutil

from core.models import DEFAULT_RUNTIME_IMAGES
from core.repositories.runtime_images_repository import RuntimeImageRepository

ASSETS_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "assets")


@pytest.fixture
def runtime_images_file(tmp_path):
    source_file = os.path.join(ASSETS_DIR, "runtime-images.yaml")
    dest_file = tmp_path / "runtime-images.yaml"
    shutil.copy(source_file, dest_file)
    return dest_file


def test_load_overrides_default_table(runtime_images_file):
    images = RuntimeImageRepository(str(runtime_images_file)).load()

    assert images.resolve("nodejs") == "nodeshift/centos7-s2i-nodejs:12.x"
    assert images.resolve("python") == "centos/python-36-centos7"
    assert images.resolve("spring-boot") is None


@pytest.mark.parametrize("path", [None, "", "/does/not/exist.yaml"])
def test_missing_file_falls_back_to_defaults(path):
    assert RuntimeImageRepository(path).load() == DEFAULT_RUNTIME_IMAGES


def test_invalid_runtime_images_file(tmp_path):
    bad_file = tmp_path / "bad.yaml"
    bad_file.write_text("runtime_images:\n  - nodejs\n")

    with pytest.raises(ValueError, match="Invalid runtime-images.yaml structure"):
        RuntimeImageRepository(str(bad_file)).load()
