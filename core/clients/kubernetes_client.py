import logging
from typing_extensions import override

from kubernetes import client, config
from kubernetes.client.rest import ApiException

from core.clients.store import AlreadyExistsError, NotFoundError, R, Resource, ResourceStore, StoreError
from core.models import BuildConfig, Component, DeploymentConfig, ImageStream

logger = logging.getLogger(__name__)

# kind -> (group, version, plural)
ROUTES: dict[str, tuple[str, str, str]] = {
    Component.KIND: ("devconsole.openshift.io", "v1alpha1", "components"),
    ImageStream.KIND: ("image.openshift.io", "v1", "imagestreams"),
    BuildConfig.KIND: ("build.openshift.io", "v1", "buildconfigs"),
    DeploymentConfig.KIND: ("apps.openshift.io", "v1", "deploymentconfigs"),
}


def load_custom_objects_api() -> client.CustomObjectsApi:
    try:
        config.load_incluster_config()
    except config.ConfigException:
        config.load_kube_config()
    return client.CustomObjectsApi()


class KubernetesStore(ResourceStore):
    def __init__(self, api: client.CustomObjectsApi | None = None):
        self.api: client.CustomObjectsApi = api if api is not None else load_custom_objects_api()

    @override
    def get(self, kind: type[R], namespace: str, name: str) -> R:
        group, version, plural = self._route(kind.KIND)
        try:
            data = self.api.get_namespaced_custom_object(group, version, namespace, plural, name)
        except ApiException as e:
            if e.status == 404:
                raise NotFoundError(kind.KIND, namespace, name) from e
            raise StoreError(f"Failed to get {kind.KIND} {namespace}/{name}: {e.status} {e.reason}", e.status) from e
        return kind.from_manifest(data)

    @override
    def create(self, resource: Resource) -> None:
        group, version, plural = self._route(resource.KIND)
        try:
            self.api.create_namespaced_custom_object(group, version, resource.namespace, plural, resource.to_manifest())
        except ApiException as e:
            if e.status == 409:
                raise AlreadyExistsError(resource.KIND, resource.namespace, resource.name) from e
            raise StoreError(
                f"Failed to create {resource.KIND} {resource.namespace}/{resource.name}: {e.status} {e.reason}",
                e.status,
            ) from e
        logger.debug(f"Created {resource.KIND} {resource.namespace}/{resource.name} in cluster")

    def _route(self, kind: str) -> tuple[str, str, str]:
        if kind not in ROUTES:
            raise StoreError(f"Unsupported kind {kind}")
        return ROUTES[kind]
