from __future__ import annotations

from _infra import Order, banner, run, sample_orders

from zipkit import flat_zip


def main() -> None:
    banner("02_flat_zip: orders x line items")

    def items_of(order: Order):
        print(f"  (generating items for order {order.id})")
        return order.items

    # Order 2 has no items: it contributes nothing and does not stop the stream.
    # Run with verbose=True to see the skip logged at DEBUG.
    stream = flat_zip(sample_orders(), items_of)
    stream.filter_bi(lambda order, item: item.quantity > 1).for_each_bi(
        lambda order, item: print(f"{order.customer}: {item.quantity} x {item.sku}")
    )


if __name__ == "__main__":
    run(main, verbose=True)
