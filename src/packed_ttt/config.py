"""Game configuration, environment-first.

Every setting can come from a TTT_* environment variable; explicit keyword
overrides (the CLI flags) win over the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from .render import MARKER_THEMES

MODES = ("hvc", "hvh", "cvc")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class GameConfig:
    mode: str = "hvc"
    markers: str = "classic"
    computer_first: bool = False
    clear_screen: bool = True
    epsilon: float = 0.0
    seed: int | None = None

    @property
    def marker_table(self) -> dict:
        return MARKER_THEMES[self.markers]


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    val = raw.strip().lower()
    if val in _TRUE:
        return True
    if val in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _env_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def _env_int(env: Mapping[str, str], name: str) -> int | None:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_config(env: Mapping[str, str] | None = None, **overrides: Any) -> GameConfig:
    """Build a GameConfig from the environment plus non-None overrides.

    Order: overrides -> TTT_* env vars -> defaults.
    """
    if env is None:
        env = os.environ
    values = {
        "mode": env.get("TTT_MODE", "hvc").strip() or "hvc",
        "markers": env.get("TTT_MARKERS", "classic").strip() or "classic",
        "computer_first": _env_bool(env, "TTT_COMPUTER_FIRST", False),
        "clear_screen": _env_bool(env, "TTT_CLEAR_SCREEN", True),
        "epsilon": _env_float(env, "TTT_EPSILON", 0.0),
        "seed": _env_int(env, "TTT_SEED"),
    }
    values.update({k: v for k, v in overrides.items() if v is not None})

    if values["mode"] not in MODES:
        raise ValueError(f"TTT_MODE must be one of {', '.join(MODES)}, got {values['mode']!r}")
    if values["markers"] not in MARKER_THEMES:
        raise ValueError(
            f"TTT_MARKERS must be one of {', '.join(sorted(MARKER_THEMES))}, got {values['markers']!r}"
        )
    if not 0.0 <= values["epsilon"] <= 1.0:
        raise ValueError(f"TTT_EPSILON out of range [0,1]: {values['epsilon']}")
    return GameConfig(**values)
