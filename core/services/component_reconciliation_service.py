import logging
from typing_extensions import override

from core.clients.store import AlreadyExistsError, NotFoundError, Resource, ResourceStore
from core.models import (
    Component,
    DEFAULT_RUNTIME_IMAGES,
    ImageStream,
    NamespacedName,
    ReconcileResult,
    RuntimeImages,
)
from core.services.resource_templates import (
    build_builder_image,
    build_deployment,
    build_output_image,
    build_pipeline,
)
from core.services.service import Service
from core.utils.logging import setup_logger
from core.utils.naming import describe

SHARED_IMAGES_NAMESPACE = "openshift"


class BuilderImageNotResolvedError(Exception):
    def __init__(self, component: Component):
        super().__init__(
            f"No builder image for component {component.namespace}/{component.name}: "
            f"build type '{component.build_type}' has no image stream in the shared namespace "
            f"and no known docker image"
        )
        self.component: Component = component


class ComponentReconciliationService(Service):
    def __init__(
        self,
        store: ResourceStore,
        requests: list[NamespacedName] | None = None,
        runtime_images: RuntimeImages = DEFAULT_RUNTIME_IMAGES,
        shared_namespace: str = SHARED_IMAGES_NAMESPACE,
    ):
        self.store: ResourceStore = store
        self.requests: list[NamespacedName] = requests or []
        self.runtime_images: RuntimeImages = runtime_images
        self.shared_namespace: str = shared_namespace
        self.logger: logging.Logger = setup_logger("ComponentReconciliationService")

    @override
    def run(self) -> None:
        for request in self.requests:
            self.reconcile(request)

    def reconcile(self, request: NamespacedName) -> ReconcileResult:
        result = ReconcileResult(request=request)
        try:
            component = self.store.get(Component, request.namespace, request.name)
        except NotFoundError:
            self.logger.info(f"Component {request} not found, nothing to reconcile")
            return result

        self.logger.info(f"Reconciling component {request} with build type '{component.build_type}'")
        builder = self.resolve_builder_image(component, result)
        output = self.ensure(build_output_image(component), result)
        if builder is None:
            self.logger.warning(f"Builder image for component {request} could not be resolved")
            raise BuilderImageNotResolvedError(component)

        self.ensure(build_pipeline(component, builder), result)
        self.ensure(build_deployment(component, output), result)
        self.logger.info(
            f"Component {request} reconciled: {len(result.created)} created, {len(result.existing)} already present"
        )
        return result

    def resolve_builder_image(self, component: Component, result: ReconcileResult) -> ImageStream | None:
        shared = self.find_shared_image(component.build_type)
        if shared is not None:
            self.logger.info(f"Using cluster-local builder image {describe(shared)}")
            return shared

        declared = build_builder_image(component, self.runtime_images)
        if declared is None:
            return None
        return self.ensure(declared, result)

    def find_shared_image(self, build_type: str) -> ImageStream | None:
        if not build_type:
            return None
        try:
            return self.store.get(ImageStream, self.shared_namespace, build_type)
        except NotFoundError:
            return None

    def ensure(self, resource: Resource, result: ReconcileResult) -> Resource:
        try:
            self.store.create(resource)
        except AlreadyExistsError:
            self.logger.info(f"{describe(resource)} already exists")
            result.existing.append(describe(resource))
            return resource
        self.logger.info(f"Created {describe(resource)}")
        result.created.append(describe(resource))
        return resource
