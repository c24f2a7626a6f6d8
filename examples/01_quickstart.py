from __future__ import annotations

from _infra import FakeUserStore, User, banner, run

import eitherway as ew


def greeting(user: User) -> str:
    return f"hello, {user.name}"


async def main() -> None:
    banner("01_quickstart: one pipeline, sync and async inputs")

    store = FakeUserStore(delay_seconds=0.01)
    greet_active = ew.compose(
        ew.filter(lambda user: user.is_active),
        ew.map(greeting),
    )

    # plain values in, plain value out
    local = [User(1, "ann"), User(2, "bob", is_active=False)]
    print(greet_active(local))

    # coroutines in, one awaitable out
    fetched = ew.map(store.fetch, [1, 2, 3])
    print(await greet_active(fetched))

    total = ew.reduce(lambda acc, user: acc + user.id, 0)
    print(total(local), await total(fetched))


if __name__ == "__main__":
    run(main)
