"""Token counting utilities."""

from __future__ import annotations

import importlib
from typing import Callable

TOKEN_COUNTER_MODES = ("estimate", "tiktoken")


def estimate_tokens(text: str) -> int:
    """Rough estimate: ~4 chars per token."""
    return max(1, len(text) // 4)


def create_token_counter(mode: str = "estimate") -> Callable[[str], int]:
    """Factory for token counters.

    Modes:
        "estimate" - len(text) // 4 (zero deps)
        "tiktoken" - requires the tiktoken extra
        "callable:module.path:func" - custom callable
    """
    if mode == "estimate":
        return estimate_tokens

    if mode == "tiktoken":
        try:
            import tiktoken
        except ImportError:
            raise ImportError(
                "tiktoken not installed. Install with: pip install anchored-context[tiktoken]"
            )
        enc = tiktoken.encoding_for_model("gpt-4")
        return lambda text: len(enc.encode(text))

    if mode.startswith("callable:"):
        # Format: callable:module.path:func_name
        parts = mode[len("callable:"):].rsplit(":", 1)
        if len(parts) != 2 or not all(parts):
            raise ValueError(f"Invalid callable spec: {mode}. Expected callable:module:func")
        module_path, func_name = parts
        mod = importlib.import_module(module_path)
        return getattr(mod, func_name)

    raise ValueError(f"Unknown token counter mode: {mode}")


def is_valid_mode(mode: str) -> bool:
    return mode in TOKEN_COUNTER_MODES or mode.startswith("callable:")
