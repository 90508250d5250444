from __future__ import annotations

from _infra import banner, run

from kungfu import Error, Ok
from zipkit import zip_broadcast, zip_mapped, zip_pairs, zip_with


def main() -> None:
    banner("01_quickstart: zip_pairs / zip_mapped / zip_broadcast")

    # Shorter side wins: "D" is never paired
    for pair in zip_pairs([1, 2, 3], ["A", "B", "C", "D"]):
        print(pair)

    squares = zip_mapped(range(1, 5), lambda n: n * n)
    print(squares.map_bi(lambda n, sq: f"{n}^2={sq}").join(", "))

    # One key against many values; None key -> nothing
    print(zip_broadcast("admin", ["read", "write"]).to_dict())
    print(zip_broadcast(None, ["read", "write"]).count())

    totals = zip_with([10, 20, 30], [1, 2, 3], zipper=lambda a, b: a + b)
    match totals.max():
        case Ok(best):
            print(f"max total: {best}")
        case Error(err):
            print(f"error: {err!r}")


if __name__ == "__main__":
    run(main)
