from __future__ import annotations

from _infra import banner, run, sample_orders

from kungfu import Error, Ok
from zipkit import CoupleStream, collection as C
from zipkit.collection import entries
from zipkit.text import strings as S


def main() -> None:
    banner("03_helpers: None-safe collections and strings")

    orders = sample_orders()
    by_customer = C.map_of(orders, lambda order: order.customer)
    print(sorted(by_customer))

    match C.find_element_at(5, orders):
        case Ok(order):
            print(order)
        case Error(err):
            print(f"lookup failed: {err}")

    print(C.merge([1, 2, 3], [3, 4, None]))
    print(list(filter(entries.predicate(lambda name, order: order.items), by_customer.items())))

    print(S.between("[", "]", "level=[warn] msg"))
    print(S.hidden_text_of("4111111111111111", 8, 4))
    print(CoupleStream.from_mapping({"a": 1, "b": 2}).swapped().to_dict())


if __name__ == "__main__":
    run(main)
