from __future__ import annotations

import asyncio

from _infra import Order, banner, run

from kungfu import Error, Ok
from pullseq import from_iterable


ORDERS = [
    Order(1, 10.0),
    Order(2, 250.0, paid=False),
    Order(3, 42.5),
    Order(4, 99.9),
    Order(5, 7.0),
]


async def convert(order: Order) -> float:
    # Pretend this hits an exchange-rate service.
    await asyncio.sleep(0.01)
    return round(order.amount * 0.92, 2)


async def main() -> None:
    banner("01_quickstart: drop + filter + map + take + reduce")

    total = await (
        from_iterable(ORDERS)
        .drop(1)
        .filter(lambda o: o.paid)
        .map(convert)
        .take(2)
        .reduce(lambda acc, eur, i: acc + eur, initial=0.0)
    )
    print(f"first two paid orders after the header row: {total} EUR")

    banner("01_quickstart: find returns a Result")

    match await from_iterable(ORDERS).find(lambda o: o.amount > 1000):
        case Ok(order):
            print(f"big order: {order}")
        case Error(err):
            print(f"no big order: {err}")


if __name__ == "__main__":
    run(main)
