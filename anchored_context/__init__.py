"""anchored-context: token-budgeted document excerpts anchored on a tag."""

from .config import load_config
from .core.excerpt_builder import BudgetedExcerptBuilder, build_excerpt
from .core.tag_locator import TagLocator
from .core.window import select_window
from .types import (
    AnchoredContextConfig,
    AnchoredContextError,
    Document,
    Excerpt,
    InvalidInputError,
    TagMatch,
    TagNotFoundError,
    TokenBudgetExceededError,
    Window,
)

__version__ = "0.1.0"

__all__ = [
    "BudgetedExcerptBuilder",
    "TagLocator",
    "build_excerpt",
    "load_config",
    "select_window",
    "AnchoredContextConfig",
    "AnchoredContextError",
    "Document",
    "Excerpt",
    "InvalidInputError",
    "TagMatch",
    "TagNotFoundError",
    "TokenBudgetExceededError",
    "Window",
]
