from .adapter import cursor_of, stream_of
from .cursor import Cursor
from .lazy import Lazy
from .traits import LOST_ON_COMBINE, Trait, combine, traits_of

__all__ = (
    "Cursor",
    "Lazy",
    "LOST_ON_COMBINE",
    "Trait",
    "combine",
    "cursor_of",
    "stream_of",
    "traits_of",
)
