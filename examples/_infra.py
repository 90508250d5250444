from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class LineItem:
    sku: str
    quantity: int


def _no_items() -> tuple[LineItem, ...]:
    return ()


@dataclass(frozen=True, slots=True)
class Order:
    id: int
    customer: str
    items: tuple[LineItem, ...] = field(default_factory=_no_items)


def sample_orders() -> list[Order]:
    return [
        Order(1, "ann", (LineItem("apple", 3), LineItem("pear", 1))),
        Order(2, "bob"),
        Order(3, "cid", (LineItem("plum", 12),)),
    ]


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], None], *, verbose: bool = False) -> None:  # pragma: no cover (examples only)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    main()
