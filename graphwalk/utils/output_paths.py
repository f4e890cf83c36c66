"""Results file path policy for the graphwalk CLI.

Paths are built from an optional output directory, a prefix derived from the
graph document name, and the configured results suffix.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from graphwalk.config import ENGINE_CONFIG


def ensure_parent_dir(path: Path) -> None:
    """Ensure the parent directory exists for a file path."""
    path.parent.mkdir(parents=True, exist_ok=True)


def resolve_override_path(
    override: Optional[Path], output_dir: Optional[Path]
) -> Optional[Path]:
    """Resolve an override path with respect to an optional output directory.

    - Absolute override paths are returned as-is.
    - Relative override paths are interpreted as relative to ``output_dir``
      when provided; otherwise relative to the current working directory.

    Args:
        override: Path provided by the user to override the default.
        output_dir: Optional base directory for relative overrides.

    Returns:
        The resolved path or None if no override was provided.
    """
    if override is None:
        return None
    if override.is_absolute() or output_dir is None:
        return override
    return (output_dir / override).resolve()


def results_path_for_run(
    graph_path: Path,
    output_dir: Optional[Path],
    results_override: Optional[Path],
) -> Path:
    """Determine where an algorithm run writes its result document.

    - An explicit ``results_override`` wins (relative to ``output_dir`` when given).
    - Otherwise ``<graph_stem><suffix>`` under ``output_dir``, or in the current
      working directory when no output directory is given.

    Args:
        graph_path: The graph document path.
        output_dir: Optional base output directory.
        results_override: Optional explicit results file path.

    Returns:
        The path where results should be written.
    """
    resolved_override = resolve_override_path(results_override, output_dir)
    if resolved_override is not None:
        return resolved_override

    name = f"{graph_path.stem}{ENGINE_CONFIG.results_suffix}"
    if output_dir is not None:
        return output_dir / name
    return Path(name)
