"""shot-card: Render a social preview card of recently brewed coffees."""

from shot_card.cache import ResolutionCache
from shot_card.core import accent_color, load_recent_coffees, select_recent_coffees
from shot_card.schema import BagInfo, ResolvedCoffee

__version__ = "0.1.0"

__all__ = [
    "accent_color",
    "load_recent_coffees",
    "select_recent_coffees",
    "BagInfo",
    "ResolutionCache",
    "ResolvedCoffee",
    "__version__",
]
