from dataclasses import field
from pydantic.dataclasses import dataclass

JAVA_BUILDER_IMAGE = "registry.access.redhat.com/redhat-openjdk-18/openjdk18-openshift"


@dataclass(frozen=True)
class RuntimeImages:
    images: dict[str, str] = field(default_factory=dict)

    def resolve(self, build_type: str) -> str | None:
        if not build_type:
            return None
        return self.images.get(build_type)


DEFAULT_RUNTIME_IMAGES = RuntimeImages(images={
    "nodejs": "nodeshift/centos7-s2i-nodejs:10.x",
    "spring-boot": JAVA_BUILDER_IMAGE,
    "vertx": JAVA_BUILDER_IMAGE,
    "wildfly-swarm": JAVA_BUILDER_IMAGE,
    "thorntail": JAVA_BUILDER_IMAGE,
})
