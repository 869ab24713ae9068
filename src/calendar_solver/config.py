from dataclasses import dataclass, fields, replace
from pathlib import Path

import yaml


@dataclass(frozen=True)
class SolverConfig:
    # Seconds the animated search pauses after each place/remove.
    step_delay: float = 0.05
    # Pause on a found solution, in multiples of step_delay.
    solution_pause_factor: float = 10.0
    # Frames between two suspension points of the live search.
    live_checkpoint_every: int = 250
    # Solution limit when none is given.
    default_limit: int = 10000

    def __post_init__(self) -> None:
        if self.step_delay < 0:
            raise ValueError("step_delay must be >= 0")
        if self.solution_pause_factor < 0:
            raise ValueError("solution_pause_factor must be >= 0")
        if self.live_checkpoint_every < 1:
            raise ValueError("live_checkpoint_every must be >= 1")
        if self.default_limit < 1:
            raise ValueError("default_limit must be >= 1")

    @property
    def solution_pause(self) -> float:
        return self.step_delay * self.solution_pause_factor


def _float_ge_0(v: object, fallback: float) -> float:
    try:
        if isinstance(v, bool) or v is None:
            n = fallback
        elif isinstance(v, (int, float)):
            n = float(v)
        elif isinstance(v, str):
            n = float(v)
        else:
            n = fallback
    except (TypeError, ValueError):
        n = fallback
    return n if n >= 0 else fallback


def _int_ge_1(v: object, fallback: int) -> int:
    try:
        if isinstance(v, bool) or v is None:
            n = fallback
        elif isinstance(v, int):
            n = v
        elif isinstance(v, float):
            n = int(v)
        elif isinstance(v, str):
            n = int(float(v))
        else:
            n = fallback
    except (TypeError, ValueError):
        n = fallback
    return max(1, n)


def load_config(path: str | Path | None = None) -> SolverConfig:
    """Load solver settings from a YAML mapping.

    Missing files, unknown keys and malformed values fall back to the
    defaults of `SolverConfig`.
    """
    defaults = SolverConfig()
    if path is None:
        return defaults

    p = Path(path)
    if not p.exists():
        return defaults

    raw = yaml.safe_load(p.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        return defaults

    out: dict[str, object] = {}
    if "step_delay" in raw:
        out["step_delay"] = _float_ge_0(raw.get("step_delay"), defaults.step_delay)
    if "solution_pause_factor" in raw:
        out["solution_pause_factor"] = _float_ge_0(
            raw.get("solution_pause_factor"), defaults.solution_pause_factor
        )
    if "live_checkpoint_every" in raw:
        out["live_checkpoint_every"] = _int_ge_1(
            raw.get("live_checkpoint_every"), defaults.live_checkpoint_every
        )
    if "default_limit" in raw:
        out["default_limit"] = _int_ge_1(
            raw.get("default_limit"), defaults.default_limit
        )
    return replace(defaults, **out)


def dump_config(config: SolverConfig, path: str | Path) -> None:
    doc = {f.name: getattr(config, f.name) for f in fields(config)}
    Path(path).write_text(
        yaml.safe_dump(doc, sort_keys=False, default_flow_style=False),
        encoding="utf-8",
    )
