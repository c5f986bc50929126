"""Unit-test micro-framework with an explicit session object.

Usage:
    session = TestSession()
    session.check_eq(add(2, 2), 4)
    session.check_named("parser accepts empty input", parse("") == [])
    session.summary()
"""

from __future__ import annotations
import sys
from dataclasses import dataclass, field
from typing import Any, List, Optional, TextIO

from .debugging import location
from .terminal import fg, reset as reset_color


@dataclass
class TestSession:
    """Counts checks and records the locations of failures.

    Nothing is global: create one session per suite and pass it around.
    """
    __test__ = False  # not a pytest test class

    silent: bool = False
    out: Optional[TextIO] = None
    total: int = 0
    passed: int = 0
    failures: List[str] = field(default_factory=list)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def all_passed(self) -> bool:
        return self.passed == self.total

    def _write(self, text: str) -> None:
        if not self.silent:
            (self.out or sys.stdout).write(text + "\n")

    def _record(self, ok: bool, where: str, name: Optional[str], detail: str) -> bool:
        self.total += 1
        label = f'"{name}" ' if name is not None else ""
        if ok:
            self.passed += 1
            self._write(f"{fg('green')}test {label}passed @ {where}{reset_color()}")
        else:
            self.failures.append(f"{where} ({name})" if name is not None else where)
            self._write(f"{fg('red')}TEST {label}FAILED @ {where}{reset_color()}\n\t{detail}")
        return ok

    # ═══════════════════════════════════════════════════════════════════════
    # Checks
    # ═══════════════════════════════════════════════════════════════════════

    def check(self, value: Any, expr: str = "value") -> bool:
        """Pass if value is truthy."""
        return self._record(bool(value), location(2), None,
                            f"where {expr} ({value!r}) was FALSE")

    def check_named(self, name: str, value: Any, expr: str = "value") -> bool:
        return self._record(bool(value), location(2), name,
                            f"where {expr} ({value!r}) was FALSE")

    def check_eq(self, x: Any, y: Any) -> bool:
        """Pass if x == y."""
        return self._record(x == y, location(2), None, f"comparing {x!r} to {y!r}")

    def check_named_eq(self, name: str, x: Any, y: Any) -> bool:
        return self._record(x == y, location(2), name, f"comparing {x!r} to {y!r}")

    def check_epsilon_eq(self, x: float, y: float, epsilon: float) -> bool:
        """Pass if abs(x - y) <= epsilon."""
        return self._record(abs(x - y) <= epsilon, location(2), None,
                            f"comparing {x!r} to {y!r} with epsilon {epsilon!r}")

    # ═══════════════════════════════════════════════════════════════════════
    # Reporting
    # ═══════════════════════════════════════════════════════════════════════

    def summary_text(self) -> str:
        """Summary banner, pass rate and failed check locations."""
        percent = (self.passed / self.total) * 100.0 if self.total else 0.0
        lines = [
            f"{fg('cyan')}+--------------+",
            "| TEST SUMMARY |",
            "+--------------+",
            f"{fg('green')}Passed {self.passed}/{self.total} tests ({percent:g}%){reset_color()}",
        ]
        if self.failures:
            lines.append(f"{fg('red')}Failed tests:{reset_color()}")
            lines.extend(f"    {where}" for where in self.failures)
        return "\n".join(lines)

    def summary(self) -> str:
        """Print the summary (even when silent) and return it."""
        text = self.summary_text()
        (self.out or sys.stdout).write(text + "\n")
        return text

    def reset(self) -> None:
        """Clear counters and failures."""
        self.total = 0
        self.passed = 0
        self.failures.clear()
