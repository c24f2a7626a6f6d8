from __future__ import annotations

import re

from _infra import banner, log_lines, run

import eitherway as ew

LINES = [
    "INFO  boot ok",
    "ERROR disk full",
    "INFO  request /users 12ms",
    "ERROR timeout upstream",
    "INFO  request /orders 40ms",
]


async def main() -> None:
    banner("02_streams: derived streams and stream folds")

    errors = ew.filter(re.compile("^ERROR"), ew.Stream(log_lines(LINES, 0.005)))
    messages = ew.map(lambda line: line.removeprefix("ERROR").strip(), errors)
    print(await ew.reduce(lambda acc, message: [*acc, message], [], messages))

    slow = await ew.find(lambda line: int(re.search(r"(\d+)ms", line)[1]) > 30, ew.Stream.of(LINES[2::2]))
    print(f"first slow request: {slow!r}")

    seen: list[str] = []
    ew.for_each(seen.append, ew.Stream.of(LINES))
    print(await ew.every(ew.match([re.compile("^INFO"), re.compile("^ERROR")]), ew.Stream.of(LINES)))
    print(f"for_each saw {len(seen)} lines so far")


if __name__ == "__main__":
    run(main)
