from dataclasses import dataclass, field

from .object_meta import NamespacedName


@dataclass
class ReconcileResult:
    request: NamespacedName
    created: list[str] = field(default_factory=list)
    existing: list[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.created)
