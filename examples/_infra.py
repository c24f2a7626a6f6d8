from __future__ import annotations

import asyncio
import sys
from collections.abc import AsyncIterator, Callable, Coroutine
from dataclasses import dataclass, field
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


class Unavailable(Exception):
    pass


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    is_active: bool = True


def _empty_users() -> dict[int, User]:
    return {}


@dataclass(slots=True)
class FakeUserStore:
    users: dict[int, User] = field(default_factory=_empty_users)
    delay_seconds: float = 0.0
    broken_ids: frozenset[int] = frozenset()

    async def fetch(self, user_id: int) -> User:
        await asyncio.sleep(self.delay_seconds)
        if user_id in self.broken_ids:
            raise Unavailable(f"store: user {user_id} unavailable")
        return self.users.get(user_id) or User(id=user_id, name=f"user:{user_id}", is_active=user_id % 2 == 1)


async def log_lines(lines: list[str], delay_seconds: float = 0.0) -> AsyncIterator[str]:
    for line in lines:
        await asyncio.sleep(delay_seconds)
        yield line


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
