from dataclasses import field
from typing import ClassVar
from pydantic.dataclasses import dataclass

from .object_meta import ObjectMeta, ObjectReference


@dataclass(frozen=True)
class GitBuildSource:
    uri: str
    ref: str

    def to_manifest(self) -> dict:
        return {"type": "Git", "git": {"uri": self.uri, "ref": self.ref}}

    @classmethod
    def from_manifest(cls, data: dict) -> "GitBuildSource":
        git = data.get("git") or {}
        return cls(uri=git.get("uri", ""), ref=git.get("ref", ""))


@dataclass(frozen=True)
class BuildTriggerPolicy:
    type: str
    image_change: dict | None = None

    def to_manifest(self) -> dict:
        data: dict = {"type": self.type}
        if self.image_change is not None:
            data["imageChange"] = dict(self.image_change)
        return data

    @classmethod
    def from_manifest(cls, data: dict) -> "BuildTriggerPolicy":
        return cls(type=data["type"], image_change=data.get("imageChange"))


@dataclass(frozen=True)
class BuildConfig:
    KIND: ClassVar[str] = "BuildConfig"
    API_VERSION: ClassVar[str] = "build.openshift.io/v1"

    metadata: ObjectMeta
    source: GitBuildSource
    output_to: ObjectReference
    strategy_from: ObjectReference
    incremental: bool = True
    triggers: list[BuildTriggerPolicy] = field(default_factory=list)

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
                "output": {"to": self.output_to.to_manifest()},
                "source": self.source.to_manifest(),
                "strategy": {
                    "type": "Source",
                    "sourceStrategy": {
                        "from": self.strategy_from.to_manifest(),
                        "incremental": self.incremental,
                    },
                },
                "triggers": [t.to_manifest() for t in self.triggers],
            },
        }

    @classmethod
    def from_manifest(cls, data: dict) -> "BuildConfig":
        spec = data.get("spec") or {}
        source_strategy = spec["strategy"]["sourceStrategy"]
        return cls(
            metadata=ObjectMeta.from_manifest(data.get("metadata", {})),
            source=GitBuildSource.from_manifest(spec.get("source") or {}),
            output_to=ObjectReference.from_manifest(spec["output"]["to"]),
            strategy_from=ObjectReference.from_manifest(source_strategy["from"]),
            incremental=source_strategy.get("incremental", False),
            triggers=[BuildTriggerPolicy.from_manifest(t) for t in spec.get("triggers") or []],
        )
