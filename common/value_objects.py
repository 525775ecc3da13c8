"""Value objects shared across apps."""

from dataclasses import dataclass
from typing import ClassVar, Self
from uuid import UUID


@dataclass(frozen=True)
class EntityId:
    """UUID identifier; subclasses name the entity they identify."""

    entity: ClassVar[str] = "entity"

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(str(value)))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class UserId(EntityId):
    """Unique identifier for a User."""

    entity: ClassVar[str] = "user"


@dataclass(frozen=True)
class Actor:
    """The authenticated user performing an operation."""

    id: UserId
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"
