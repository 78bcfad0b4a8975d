from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: int
    y: int
    z: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"


@dataclass
class StarSystem:
    name: str

    @staticmethod
    def from_dict(d: dict) -> "StarSystem":
        # Only the name is kept; coordinates, ids and distance are ignored.
        return StarSystem(name=d["name"])
