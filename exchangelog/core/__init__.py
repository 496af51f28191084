from .formatter import Formatter
from .placeholders import PLACEHOLDERS
from .presets import PRESETS
from .summarizer import Summarizer

__all__ = [
    "Formatter",
    "PLACEHOLDERS",
    "PRESETS",
    "Summarizer",
]
