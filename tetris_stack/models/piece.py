from dataclasses import dataclass


@dataclass(frozen=True)
class Piece:
    kind: str
    id: int

    def label(self) -> str:
        return f"{self.kind} {self.id}"

    def __str__(self) -> str:
        return f"[{self.label()}]"
