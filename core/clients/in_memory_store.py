import logging
from typing_extensions import override

from core.clients.store import AlreadyExistsError, NotFoundError, R, Resource, ResourceStore

logger = logging.getLogger(__name__)


class InMemoryStore(ResourceStore):
    def __init__(self, *resources: Resource):
        self.objects: dict[tuple[str, str, str], Resource] = {}
        self.seed(*resources)

    def seed(self, *resources: Resource) -> None:
        for resource in resources:
            self.objects[(resource.KIND, resource.namespace, resource.name)] = resource

    @override
    def get(self, kind: type[R], namespace: str, name: str) -> R:
        try:
            return self.objects[(kind.KIND, namespace, name)]
        except KeyError:
            raise NotFoundError(kind.KIND, namespace, name) from None

    @override
    def create(self, resource: Resource) -> None:
        key = (resource.KIND, resource.namespace, resource.name)
        if key in self.objects:
            raise AlreadyExistsError(*key)
        self.objects[key] = resource
        logger.debug(f"Stored {resource.KIND} {resource.namespace}/{resource.name}")

    def find_all(self, kind: type[R], namespace: str | None = None) -> list[R]:
        return [
            obj for (k, ns, _), obj in self.objects.items()
            if k == kind.KIND and (namespace is None or ns == namespace)
        ]
