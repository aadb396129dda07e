from typing import ClassVar
from pydantic.dataclasses import dataclass


@dataclass(frozen=True)
class Component:
    KIND: ClassVar[str] = "Component"
    API_VERSION: ClassVar[str] = "devconsole.openshift.io/v1alpha1"

    name: str
    namespace: str
    build_type: str = ""
    codebase: str = ""

    def to_manifest(self) -> dict:
        return {
            "apiVersion": self.API_VERSION,
            "kind": self.KIND,
            "metadata": {"name": self.name, "namespace": self.namespace},
            "spec": {"buildType": self.build_type, "codebase": self.codebase},
        }

    @classmethod
    def from_manifest(cls, data: dict) -> "Component":
        metadata = data.get("metadata", {})
        spec = data.get("spec") or {}
        return cls(
            name=metadata["name"],
            namespace=metadata["namespace"],
            build_type=spec.get("buildType") or "",
            codebase=spec.get("codebase") or "",
        )
