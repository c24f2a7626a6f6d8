from __future__ import annotations

import asyncio
import re

from _infra import banner, run

import eitherway as ew

ORDERS = [
    {"id": 1, "status": "paid", "email": "ann@example.com", "coupon": None},
    {"id": 2, "status": "draft", "email": "bob@example", "coupon": "SPRING"},
    {"id": 3, "status": "paid", "email": "eve@example.com", "coupon": "SPRING", "note": "gift"},
]

EMAIL = re.compile(r"^[^@]+@[^@]+\.[a-z]+$")


async def coupon_is_valid(code: str | None) -> bool:
    await asyncio.sleep(0.01)
    return code in (None, "SPRING")


async def main() -> None:
    banner("03_matching: specs as predicates")

    order = {"id": int, "status": ["paid", "draft"], "email": EMAIL, "coupon": [str, None]}
    print([o["id"] for o in ew.filter(ew.match(order), ORDERS)])
    print([o["id"] for o in ew.filter(ew.match_loose(order), ORDERS)])

    checked = {**order, "coupon": coupon_is_valid}
    print(await ew.every(ew.match_loose(checked), ORDERS))

    status = ew.if_else(ew.match_loose({"status": "paid"}), "ship it", ew.match_loose({"status": "draft"}), "wait", "unknown")
    print(ew.map(status, ORDERS))

    print(ew.match_keys(re.compile("^[a-z]+$"))(ORDERS[0]))


if __name__ == "__main__":
    run(main)
