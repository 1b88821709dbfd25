"""Wall value type: six labeled cells bound by three sums."""

from dataclasses import dataclass, asdict

FIELDS: tuple[str, ...] = ("a", "b", "c", "d", "e", "f")

# (left, right, total): left + right == total
RELATIONS: tuple[tuple[str, str, str], ...] = (
    ("a", "b", "d"),
    ("b", "c", "e"),
    ("d", "e", "f"),
)


def relations_hold(values: dict) -> bool:
    return all(values[x] + values[y] == values[z] for x, y, z in RELATIONS)


@dataclass(frozen=True)
class Wall:
    a: int
    b: int
    c: int
    d: int
    e: int
    f: int

    @classmethod
    def from_base(cls, a: int, b: int, c: int) -> "Wall":
        d = a + b
        e = b + c
        return cls(a=a, b=b, c=c, d=d, e=e, f=d + e)

    @classmethod
    def from_dict(cls, values: dict) -> "Wall":
        return cls(**{k: int(values[k]) for k in FIELDS})

    def as_dict(self) -> dict[str, int]:
        return asdict(self)

    def is_consistent(self) -> bool:
        return relations_hold(self.as_dict())

    def max_value(self) -> int:
        return max(self.as_dict().values())

    def visible(self, hidden) -> dict[str, int | None]:
        """Values as shown to the player, hidden cells as None."""
        return {k: (None if k in hidden else v) for k, v in self.as_dict().items()}


def in_field_order(fields) -> list[str]:
    """``fields`` sorted in wall order (a..f)."""
    selected = set(fields)
    return [f for f in FIELDS if f in selected]
