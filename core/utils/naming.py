from core.models import Component

LATEST_TAG = "latest"
DEFAULT_GIT_REF = "master"
DEFAULT_CONTAINER_PORT = 8080
APP_LABEL = "app"


def labels_for(component: Component) -> dict[str, str]:
    return {APP_LABEL: component.name}


def image_stream_tag(name: str, tag: str = LATEST_TAG) -> str:
    return f"{name}:{tag}"


def describe(resource) -> str:
    return f"{resource.KIND} {resource.namespace}/{resource.name}"
