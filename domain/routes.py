from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True)
class Route:
    method: str
    path: str
    body: str
    status: int = 200


@dataclass(frozen=True)
class RouteTable:
    routes: Tuple[Route, ...] = ()

    def __post_init__(self) -> None:
        seen = set()
        for route in self.routes:
            key = (route.method.upper(), route.path)
            if key in seen:
                raise ValueError(f"Duplicate route: {route.method} {route.path}")
            seen.add(key)

    @classmethod
    def default(cls) -> "RouteTable":
        return cls(
            routes=(
                Route(method="GET", path="/", body="Hello World"),
                Route(method="GET", path="/about", body="This is about page"),
            )
        )

    def __iter__(self) -> Iterator[Route]:
        return iter(self.routes)

    def __len__(self) -> int:
        return len(self.routes)
