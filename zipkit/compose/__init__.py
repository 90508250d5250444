from .flat_zip import FlatZipCursor, FlatZipState, flat_zip, flat_zip_with
from .zip import zip_broadcast, zip_cursor, zip_mapped, zip_pairs, zip_with

__all__ = (
    # CoupleStream
    "flat_zip",
    "zip_broadcast",
    "zip_mapped",
    "zip_pairs",
    # Generic
    "flat_zip_with",
    "zip_cursor",
    "zip_with",
    # State machine
    "FlatZipCursor",
    "FlatZipState",
)
