"""Loading of ``config.toml`` for the puzzle generator and its printers.

The file lives at the repository root next to ``pyproject.toml``.  Sections
are read with dotted paths (``get_section("pdf.page")``); the generator
defaults used by the command line are exposed as :class:`GeneratorSettings`.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover - fallback for older Python
    import tomli as tomllib  # type: ignore[import-untyped]


_CONFIG_FILENAME = "config.toml"
_MISSING = object()


@dataclass(frozen=True)
class GeneratorSettings:
    """Defaults from the ``[generator]`` section."""

    min_digit: int = 2
    max_digit: int = 12
    decoder: str = "random"
    decoder_swaps: int = 100


def _config_path() -> Path:
    return Path(__file__).resolve().parents[1] / _CONFIG_FILENAME


@lru_cache(maxsize=1)
def get_config() -> Dict[str, Any]:
    """Load and cache ``config.toml`` as a dictionary."""
    path = _config_path()
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except FileNotFoundError as exc:
        raise RuntimeError(
            f"Configuration file '{_CONFIG_FILENAME}' was not found next to the project root"
        ) from exc


def get_section(path: str, default: Any = _MISSING) -> Any:
    """Retrieve a nested value such as ``"printer.text.blank"``.

    ``default`` is returned when any part of ``path`` is missing; without it a
    :class:`KeyError` is raised.
    """

    data: Any = get_config()
    for part in path.split("."):
        if isinstance(data, dict) and part in data:
            data = data[part]
        else:
            if default is not _MISSING:
                return default
            raise KeyError(f"Configuration path '{path}' not found")
    return data


def generator_settings() -> GeneratorSettings:
    """Return the ``[generator]`` section with missing keys defaulted."""

    section = get_section("generator", {})
    fallback = GeneratorSettings()
    return GeneratorSettings(
        min_digit=int(section.get("min_digit", fallback.min_digit)),
        max_digit=int(section.get("max_digit", fallback.max_digit)),
        decoder=str(section.get("decoder", fallback.decoder)),
        decoder_swaps=int(section.get("decoder_swaps", fallback.decoder_swaps)),
    )


def log_level(default: str = "WARNING") -> str:
    """Return ``[logging] level`` as an upper-case :mod:`logging` level name."""

    return str(get_section("logging.level", default)).strip().upper()


def reload() -> None:
    """Clear the cached configuration."""

    get_config.cache_clear()


__all__ = [
    "GeneratorSettings",
    "generator_settings",
    "get_config",
    "get_section",
    "log_level",
    "reload",
]
