from .couple import Couple
from .stream import CoupleStream

__all__ = ("Couple", "CoupleStream")
