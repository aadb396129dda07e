from dataclasses import field
from pydantic.dataclasses import dataclass


@dataclass(frozen=True)
class NamespacedName:
    namespace: str
    name: str

    def __str__(self) -> str:
        return f"{self.namespace}/{self.name}"


@dataclass(frozen=True)
class ObjectMeta:
    name: str
    namespace: str
    labels: dict[str, str] = field(default_factory=dict)

    def to_manifest(self) -> dict:
        return {"name": self.name, "namespace": self.namespace, "labels": dict(self.labels)}

    @classmethod
    def from_manifest(cls, data: dict) -> "ObjectMeta":
        return cls(
            name=data.get("name", ""),
            namespace=data.get("namespace", ""),
            labels=data.get("labels") or {},
        )


@dataclass(frozen=True)
class ObjectReference:
    kind: str
    name: str
    namespace: str | None = None

    def to_manifest(self) -> dict:
        data = {"kind": self.kind, "name": self.name}
        if self.namespace:
            data["namespace"] = self.namespace
        return data

    @classmethod
    def from_manifest(cls, data: dict) -> "ObjectReference":
        return cls(kind=data["kind"], name=data["name"], namespace=data.get("namespace"))
