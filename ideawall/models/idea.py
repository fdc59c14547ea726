from __future__ import annotations
from dataclasses import dataclass

@dataclass(frozen=True)
class Idea:
    id: int
    text: str
    created_at: str

    def to_dict(self) -> dict:
        return {"id": self.id, "text": self.text, "createdAt": self.created_at}
