import json
from copy import deepcopy
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Tuple

from .motion import WorldMetrics

SETTINGS_FILE = "settings.json"

DEFAULT_SETTINGS: Dict[str, Any] = {
    "maze": {"width": 16, "height": 9, "growth": 2},
    "world": {"wall_size": 1.5, "wall_thickness": 0.2, "clearance": 0.2},
    "controls": {"speed": 2.5, "run_multiplier": 2.0, "sensitivity": 0.1},
    "display": {"width": 1280, "height": 720, "fov": 60},
}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep-merge dictionaries, with override winning on conflicts."""
    merged: Dict[str, Any] = deepcopy(base)
    for key, val in override.items():
        if isinstance(val, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], val)
        else:
            merged[key] = val
    return merged


def load_settings(path: Path | None = None) -> Tuple[Dict[str, Any], Path]:
    """Load settings from disk, falling back to defaults on errors."""
    settings_path = path or Path(SETTINGS_FILE)
    settings: Dict[str, Any] = deepcopy(DEFAULT_SETTINGS)
    try:
        if settings_path.exists():
            loaded = json.loads(settings_path.read_text(encoding="utf-8"))
            if isinstance(loaded, dict):
                settings = _deep_merge(settings, loaded)
                print("Settings loaded.")
    except (OSError, ValueError) as exc:
        print(f"Failed to load settings ({settings_path}): {exc}")
    return settings, settings_path


def save_settings(settings: Dict[str, Any], path: Path | None = None) -> None:
    settings_path = path or Path(SETTINGS_FILE)
    try:
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        settings_path.write_text(json.dumps(settings, indent=2), encoding="utf-8")
        print("Settings saved.")
    except OSError as exc:
        print(f"Failed to save settings ({settings_path}): {exc}")


@dataclass(frozen=True)
class MazeConfig:
    """Validated values the session and the game loop run with."""

    width: int = 16
    height: int = 9
    growth: int = 2
    metrics: WorldMetrics = WorldMetrics()
    speed: float = 2.5
    run_multiplier: float = 2.0
    sensitivity: float = 0.1
    screen_width: int = 1280
    screen_height: int = 720
    fov: float = 60.0

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Maze size must be positive, got {self.width}x{self.height}")
        if self.growth < 0:
            raise ValueError("Maze growth cannot be negative")
        if self.speed <= 0 or self.run_multiplier <= 0:
            raise ValueError("Movement speed must be positive")

    @classmethod
    def from_settings(cls, settings: Dict[str, Any]) -> "MazeConfig":
        maze = settings["maze"]
        world = settings["world"]
        controls = settings["controls"]
        display = settings["display"]
        return cls(
            width=int(maze["width"]),
            height=int(maze["height"]),
            growth=int(maze["growth"]),
            metrics=WorldMetrics(
                wall_size=float(world["wall_size"]),
                wall_thickness=float(world["wall_thickness"]),
                clearance=float(world["clearance"]),
            ),
            speed=float(controls["speed"]),
            run_multiplier=float(controls["run_multiplier"]),
            sensitivity=float(controls["sensitivity"]),
            screen_width=int(display["width"]),
            screen_height=int(display["height"]),
            fov=float(display["fov"]),
        )


def with_overrides(settings: Dict[str, Any], section: str, **values: Any) -> Dict[str, Any]:
    """Return a copy of ``settings`` with the non-None ``values`` set in ``section``."""
    overrides = {key: val for key, val in values.items() if val is not None}
    if not overrides:
        return deepcopy(settings)
    return _deep_merge(settings, {section: overrides})
