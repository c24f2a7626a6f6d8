from __future__ import annotations

from _infra import FakeUserStore, Unavailable, banner, run

import eitherway as ew
from kungfu import Error, Ok


async def main() -> None:
    banner("04_catching: catch steps and kungfu results")

    store = FakeUserStore(broken_ids=frozenset({13}))
    display_name = ew.compose(
        store.fetch,
        "name",
        str.title,
        ew.catch(lambda exc: "<unavailable>" if isinstance(exc, Unavailable) else "<error>"),
    )
    print(await display_name(7), await display_name(13))

    strict_name = ew.compose(store.fetch, "name")
    for user_id in (7, 13):
        match await ew.to_result(strict_name(user_id)):
            case Ok(name):
                print(f"ok: {name}")
            case Error(exc):
                print(f"error: {exc}")


if __name__ == "__main__":
    run(main)
