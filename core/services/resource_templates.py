"""Desired-state builders for the resources derived from a Component.

Every function here is pure: it takes a Component (and, where needed, an
already resolved upstream image stream) and returns the object that should
exist in the cluster. Nothing is read from or written to a store.
"""
from core.models import (
    BuildConfig,
    BuildTriggerPolicy,
    Component,
    Container,
    ContainerPort,
    DeploymentConfig,
    DeploymentTriggerImageChangeParams,
    DeploymentTriggerPolicy,
    GitBuildSource,
    ImageStream,
    ObjectMeta,
    ObjectReference,
    PodTemplate,
    RuntimeImages,
    TagReference,
)
from core.utils.naming import (
    DEFAULT_CONTAINER_PORT,
    DEFAULT_GIT_REF,
    LATEST_TAG,
    image_stream_tag,
    labels_for,
)

IMAGE_STREAM_TAG_KIND = "ImageStreamTag"
DOCKER_IMAGE_KIND = "DockerImage"

CONFIG_CHANGE_BUILD_TRIGGER = "ConfigChange"
IMAGE_CHANGE_BUILD_TRIGGER = "ImageChange"
CONFIG_CHANGE_DEPLOYMENT_TRIGGER = "ConfigChange"
IMAGE_CHANGE_DEPLOYMENT_TRIGGER = "ImageChange"
RECREATE_STRATEGY = "Recreate"


def build_builder_image(component: Component, runtime_images: RuntimeImages) -> ImageStream | None:
    """Declare the builder image stream for ``component.build_type``.

    Returns None when the build type is empty or has no entry in
    ``runtime_images``; the caller decides what that means.
    """
    docker_image = runtime_images.resolve(component.build_type)
    if docker_image is None:
        return None
    return ImageStream(
        metadata=ObjectMeta(
            name=component.build_type,
            namespace=component.namespace,
            labels=labels_for(component),
        ),
        tags=[
            TagReference(
                name=LATEST_TAG,
                from_=ObjectReference(kind=DOCKER_IMAGE_KIND, name=docker_image),
            )
        ],
        lookup_local=False,
    )


def build_output_image(component: Component) -> ImageStream:
    return ImageStream(
        metadata=ObjectMeta(
            name=component.name,
            namespace=component.namespace,
            labels=labels_for(component),
        )
    )


def build_pipeline(component: Component, builder: ImageStream) -> BuildConfig:
    """Build config turning ``component.codebase`` into ``<name>:latest``.

    ``builder`` may live in the component's namespace or in the shared one;
    the strategy reference follows whichever was resolved.
    """
    return BuildConfig(
        metadata=ObjectMeta(
            name=component.name,
            namespace=component.namespace,
            labels=labels_for(component),
        ),
        source=GitBuildSource(uri=component.codebase, ref=DEFAULT_GIT_REF),
        output_to=ObjectReference(kind=IMAGE_STREAM_TAG_KIND, name=image_stream_tag(component.name)),
        strategy_from=ObjectReference(
            kind=IMAGE_STREAM_TAG_KIND,
            name=image_stream_tag(builder.name),
            namespace=builder.namespace,
        ),
        incremental=True,
        triggers=[
            BuildTriggerPolicy(type=CONFIG_CHANGE_BUILD_TRIGGER),
            BuildTriggerPolicy(type=IMAGE_CHANGE_BUILD_TRIGGER, image_change={}),
        ],
    )


def build_deployment(component: Component, output: ImageStream) -> DeploymentConfig:
    labels = labels_for(component)
    output_tag = image_stream_tag(output.name)
    return DeploymentConfig(
        metadata=ObjectMeta(name=component.name, namespace=component.namespace, labels=labels),
        replicas=1,
        strategy_type=RECREATE_STRATEGY,
        selector=labels,
        template=PodTemplate(
            metadata=ObjectMeta(name=component.name, namespace=component.namespace, labels=labels),
            containers=[
                Container(
                    name=output.name,
                    image=output_tag,
                    ports=[ContainerPort(container_port=DEFAULT_CONTAINER_PORT, protocol="TCP")],
                )
            ],
        ),
        triggers=[
            DeploymentTriggerPolicy(type=CONFIG_CHANGE_DEPLOYMENT_TRIGGER),
            DeploymentTriggerPolicy(
                type=IMAGE_CHANGE_DEPLOYMENT_TRIGGER,
                image_change_params=DeploymentTriggerImageChangeParams(
                    automatic=True,
                    container_names=[output.name],
                    from_=ObjectReference(kind=IMAGE_STREAM_TAG_KIND, name=output_tag),
                ),
            ),
        ],
    )
