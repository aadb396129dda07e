from .object_meta import NamespacedName, ObjectMeta, ObjectReference
from .component import Component
from .image_stream import ImageStream, TagReference
from .build_config import BuildConfig, BuildTriggerPolicy, GitBuildSource
from .deployment_config import (
    Container,
    ContainerPort,
    DeploymentConfig,
    DeploymentTriggerImageChangeParams,
    DeploymentTriggerPolicy,
    PodTemplate,
)
from .runtime_images import RuntimeImages, DEFAULT_RUNTIME_IMAGES
from .reconcile_result import ReconcileResult
from .wrappers import ComponentsFile, RuntimeImagesFile

__all__ = [
    "NamespacedName",
    "ObjectMeta",
    "ObjectReference",
    "Component",
    "ImageStream",
    "TagReference",
    "BuildConfig",
    "BuildTriggerPolicy",
    "GitBuildSource",
    "Container",
    "ContainerPort",
    "DeploymentConfig",
    "DeploymentTriggerImageChangeParams",
    "DeploymentTriggerPolicy",
    "PodTemplate",
    "RuntimeImages",
    "DEFAULT_RUNTIME_IMAGES",
    "ReconcileResult",
    "ComponentsFile",
    "RuntimeImagesFile",
]
