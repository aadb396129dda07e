from dataclasses import field
from typing import ClassVar
from pydantic.dataclasses import dataclass

from .object_meta import ObjectMeta, ObjectReference


@dataclass(frozen=True)
class TagReference:
    name: str
    from_: ObjectReference

    def to_manifest(self) -> dict:
        return {"name": self.name, "from": self.from_.to_manifest()}

    @classmethod
    def from_manifest(cls, data: dict) -> "TagReference":
        return cls(name=data["name"], from_=ObjectReference.from_manifest(data["from"]))


@dataclass(frozen=True)
class ImageStream:
    KIND: ClassVar[str] = "ImageStream"
    API_VERSION: ClassVar[str] = "image.openshift.io/v1"

    metadata: ObjectMeta
    tags: list[TagReference] = field(default_factory=list)
    lookup_local: bool = False

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def namespace(self) -> str:
        return self.metadata.namespace

    def to_manifest(self) -> dict:
        spec: dict = {"lookupPolicy": {"local": self.lookup_local}}
        if self.tags:
            spec["tags"] = [t.to_manifest() for t in self.tags]
        return {
            "apiVersion": self.API_VERSION,
            "kind": self.KIND,
            "metadata": self.metadata.to_manifest(),
            "spec": spec,
        }

    @classmethod
    def from_manifest(cls, data: dict) -> "ImageStream":
        spec = data.get("spec") or {}
        # tags without a "from" are populated by builds, not declared
        tags = [TagReference.from_manifest(t) for t in spec.get("tags") or [] if t.get("from")]
        return cls(
            metadata=ObjectMeta.from_manifest(data.get("metadata", {})),
            tags=tags,
            lookup_local=(spec.get("lookupPolicy") or {}).get("local", False),
        )
