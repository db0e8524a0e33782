"""Combinators that aggregate child metrics over containers and records."""

from .elementwise import ElementwiseMean, PNorm
from .named import NamedPNorm, NamedSum

__all__ = ["ElementwiseMean", "NamedPNorm", "NamedSum", "PNorm"]
