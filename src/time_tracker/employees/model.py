from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Employee:
    """Domain entity: a row of the employee directory."""

    id: int
    name: str
    email: str
    department: str = ""

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Employee":
        return cls(
            id=int(data["id"]),
            name=data["name"],
            email=data["email"],
            department=data.get("department") or "",
        )
