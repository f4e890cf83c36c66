"""Configuration classes for graphwalk components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class EngineConfig:
    """Configuration for result serialization and CLI execution."""

    # Wire tag used in place of an infinite (unbounded) capacity
    unbounded_label: str = "unbounded"

    # Suffix of the default results file written by the CLI
    results_suffix: str = ".results.json"

    # Indentation of JSON result documents
    json_indent: int = 2

    # Per-call time budget in seconds; None disables the deadline
    default_timeout: Optional[float] = None

    def effective_timeout(self, override: Optional[float] = None) -> Optional[float]:
        """Return the time budget for one call.

        Args:
            override: Explicit budget in seconds; takes precedence when given.

        Returns:
            Budget in seconds, or None when no deadline applies.

        Raises:
            ValueError: If the resulting budget is not positive.
        """
        timeout = override if override is not None else self.default_timeout
        if timeout is not None and timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {timeout}")
        return timeout


# Global configuration instance
ENGINE_CONFIG = EngineConfig()
