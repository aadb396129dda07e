from dataclasses import field
from typing import ClassVar
from pydantic.dataclasses import dataclass

from .object_meta import ObjectMeta, ObjectReference


@dataclass(frozen=True)
class ContainerPort:
    container_port: int
    protocol: str = "TCP"

    def to_manifest(self) -> dict:
        return {"containerPort": self.container_port, "protocol": self.protocol}

    @classmethod
    def from_manifest(cls, data: dict) -> "ContainerPort":
        return cls(container_port=data["containerPort"], protocol=data.get("protocol", "TCP"))


@dataclass(frozen=True)
class Container:
    name: str
    image: str
    ports: list[ContainerPort] = field(default_factory=list)

    def to_manifest(self) -> dict:
        return {"name": self.name, "image": self.image, "ports": [p.to_manifest() for p in self.ports]}

    @classmethod
    def from_manifest(cls, data: dict) -> "Container":
        return cls(
            name=data["name"],
            image=data.get("image", ""),
            ports=[ContainerPort.from_manifest(p) for p in data.get("ports") or []],
        )


@dataclass(frozen=True)
class DeploymentTriggerImageChangeParams:
    automatic: bool
    container_names: list[str]
    from_: ObjectReference

    def to_manifest(self) -> dict:
        return {
            "automatic": self.automatic,
            "containerNames": list(self.container_names),
            "from": self.from_.to_manifest(),
        }

    @classmethod
    def from_manifest(cls, data: dict) -> "DeploymentTriggerImageChangeParams":
        return cls(
            automatic=data.get("automatic", False),
            container_names=data.get("containerNames") or [],
            from_=ObjectReference.from_manifest(data["from"]),
        )


@dataclass(frozen=True)
class DeploymentTriggerPolicy:
    type: str
    image_change_params: DeploymentTriggerImageChangeParams | None = None

    def to_manifest(self) -> dict:
        data: dict = {"type": self.type}
        if self.image_change_params is not None:
            data["imageChangeParams"] = self.image_change_params.to_manifest()
        return data

    @classmethod
    def from_manifest(cls, data: dict) -> "DeploymentTriggerPolicy":
        params = data.get("imageChangeParams")
        return cls(
            type=data["type"],
            image_change_params=DeploymentTriggerImageChangeParams.from_manifest(params) if params else None,
        )


@dataclass(frozen=True)
class PodTemplate:
    metadata: ObjectMeta
    containers: list[Container] = field(default_factory=list)

    def to_manifest(self) -> dict:
        return {
            "metadata": self.metadata.to_manifest(),
            "spec": {"containers": [c.to_manifest() for c in self.containers]},
        }

    @classmethod
    def from_manifest(cls, data: dict) -> "PodTemplate":
        spec = data.get("spec") or {}
        return cls(
            metadata=ObjectMeta.from_manifest(data.get("metadata", {})),
            containers=[Container.from_manifest(c) for c in spec.get("containers") or []],
        )


@dataclass(frozen=True)
class DeploymentConfig:
    KIND: ClassVar[str] = "DeploymentConfig"
    API_VERSION: ClassVar[str] = "apps.openshift.io/v1"

    metadata: ObjectMeta
    template: PodTemplate
    replicas: int = 1
    strategy_type: str = "Recreate"
    selector: dict[str, str] = field(default_factory=dict)
    triggers: list[DeploymentTriggerPolicy] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def namespace(self) -> str:
        return self.metadata.namespace

    def to_manifest(self) -> dict:
        return {
            "apiVersion": self.API_VERSION,
            "kind": self.KIND,
            "metadata": self.metadata.to_manifest(),
            "spec": {
                "replicas": self.replicas,
                "strategy": {"type": self.strategy_type},
                "selector": dict(self.selector),
                "template": self.template.to_manifest(),
                "triggers": [t.to_manifest() for t in self.triggers],
            },
        }

    @classmethod
    def from_manifest(cls, data: dict) -> "DeploymentConfig":
        spec = data.get("spec") or {}
        return cls(
            metadata=ObjectMeta.from_manifest(data.get("metadata", {})),
            template=PodTemplate.from_manifest(spec.get("template") or {}),
            replicas=spec.get("replicas", 1),
            strategy_type=(spec.get("strategy") or {}).get("type", "Recreate"),
            selector=spec.get("selector") or {},
            triggers=[DeploymentTriggerPolicy.from_manifest(t) for t in spec.get("triggers") or []],
        )
