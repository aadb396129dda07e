from abc import ABC, abstractmethod
from typing import Protocol, TypeVar


class Resource(Protocol):
    KIND: str
    API_VERSION: str

    @property
    def name(self) -> str: ...

    @property
    def namespace(self) -> str: ...

    def to_manifest(self) -> dict: ...


R = TypeVar("R")


class StoreError(Exception):
    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status: int | None = status


class NotFoundError(StoreError):
    def __init__(self, kind: str, namespace: str, name: str):
        super().__init__(f"{kind} {namespace}/{name} not found", status=404)
        self.kind: str = kind
        self.namespace: str = namespace
        self.name: str = name


class AlreadyExistsError(StoreError):
    def __init__(self, kind: str, namespace: str, name: str):
        super().__init__(f"{kind} {namespace}/{name} already exists", status=409)
        self.kind: str = kind
        self.namespace: str = namespace
        self.name: str = name


class ResourceStore(ABC):
    @abstractmethod
    def get(self, kind: type[R], namespace: str, name: str) -> R:
        """Return the stored object or raise NotFoundError."""

    @abstractmethod
    def create(self, resource: Resource) -> None:
        """Persist a new object or raise AlreadyExistsError."""
