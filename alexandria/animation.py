"""Tweens - values that move over time along an easing curve."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Tuple, Union

from .easing import Easing, EasingFunc, get_easing

EasingSpec = Union[Easing, str, EasingFunc]


class Tween:
    """A float driven from 0 to `scale` by an easing curve over `end_time`.

    Usage:
        tween = Tween(Easing.OUT_QUAD, end_time=0.5, scale=200.0)
        tween.advance(dt)   # each frame
        x = float(tween)    # or tween(), or tween.value
    """

    def __init__(self, easing: EasingSpec = Easing.LINEAR, end_time: float = 1.0,
                 scale: float = 1.0):
        self.reset(easing, end_time, scale)

    def reset(self, easing: EasingSpec = Easing.LINEAR, end_time: float = 1.0,
              scale: float = 1.0) -> None:
        """Restart at time 0 with a new curve, duration and scale."""
        if end_time <= 0.0:
            raise ValueError(f"end_time must be positive, got {end_time}")
        self._easing = get_easing(easing)
        self.end_time = float(end_time)
        self.scale = float(scale)
        self._current_time = 0.0
        self._progress = 0.0

    @property
    def current_time(self) -> float:
        return self._current_time

    @property
    def is_complete(self) -> bool:
        """Check if the tween has reached its end time."""
        return self._current_time >= self.end_time

    def advance(self, delta_time: float) -> None:
        """Move time forward (or backward, for negative delta)."""
        self._current_time += delta_time
        self._update()

    def set_time(self, new_time: float) -> None:
        self._current_time = new_time
        self._update()

    def _update(self) -> None:
        if self._current_time > self.end_time:
            self._progress = 1.0
        elif self._current_time < 0.0:
            self._progress = 0.0
        else:
            self._progress = self._easing(self._current_time / self.end_time)

    @property
    def value(self) -> float:
        """Eased progress multiplied by scale."""
        return self._progress * self.scale

    def __float__(self) -> float:
        return self.value

    def __int__(self) -> int:
        return int(self.value)

    def __call__(self) -> float:
        return self.value

    def copy(self) -> Tween:
        """Create an independent copy at the same time position."""
        twin = Tween(self._easing, self.end_time, self.scale)
        twin.set_time(self._current_time)
        return twin

    def __repr__(self) -> str:
        return (f"Tween(t={self._current_time:g}/{self.end_time:g}, "
                f"value={self.value:g})")


@dataclass
class Rect:
    """An (x, y, w, h) rectangle whose components are Tweens.

    Each component tweens linearly from 0 to its default over one time unit;
    replace the tweens (or use from_tweens) for other curves.
    """
    scale_x: float = 0.0
    scale_y: float = 0.0
    scale_w: float = 0.0
    scale_h: float = 0.0
    x: Tween = field(init=False)
    y: Tween = field(init=False)
    w: Tween = field(init=False)
    h: Tween = field(init=False)

    def __post_init__(self) -> None:
        self.x = Tween(Easing.LINEAR, 1.0, self.scale_x)
        self.y = Tween(Easing.LINEAR, 1.0, self.scale_y)
        self.w = Tween(Easing.LINEAR, 1.0, self.scale_w)
        self.h = Tween(Easing.LINEAR, 1.0, self.scale_h)

    @classmethod
    def from_tweens(cls, x: Tween, y: Tween, w: Tween, h: Tween) -> Rect:
        """Build a Rect from existing tweens (copied)."""
        rect = cls(x.scale, y.scale, w.scale, h.scale)
        rect.x, rect.y, rect.w, rect.h = x.copy(), y.copy(), w.copy(), h.copy()
        return rect

    def _tweens(self) -> Tuple[Tween, Tween, Tween, Tween]:
        return (self.x, self.y, self.w, self.h)

    def advance(self, delta_time: float) -> None:
        """Advance every component by delta_time."""
        for tween in self._tweens():
            tween.advance(delta_time)

    def set_time(self, new_time: float) -> None:
        for tween in self._tweens():
            tween.set_time(new_time)

    def to_sdl(self) -> Tuple[int, int, int, int]:
        """Current value as an integer (x, y, w, h) tuple, SDL_Rect style."""
        return (int(self.x), int(self.y), int(self.w), int(self.h))

    def to_raylib(self) -> Any:
        """Current value as a raylib Rectangle (needs the raylib extra)."""
        from .rl_compat import make_rect
        return make_rect(float(self.x), float(self.y), float(self.w), float(self.h))
