"""
animator.py: Sort Animation State Machine
=====================================
SortAnimator drives a sort strategy against a BarModel and turns every
step into renderable Snapshots.

State machine:
    COMPARING       →  pair highlighted, inter-step pause
    COMPARING       →  (left > right)  →  SWAP_ANIMATING
    SWAP_ANIMATING  →  (progress == 1, swap committed)  →  ADVANCING
    COMPARING       →  (no swap)  →  ADVANCING
    ADVANCING       →  next pair / finalize last slot of the pass
    ADVANCING       →  (every slot finalized)  →  DONE

The whole run is a cooperative task: frames() is a generator that yields
one Snapshot per suspension point, including once per interpolation tick
of a swap. The host polls for cancellation between snapshots; closing the
generator mid-swap leaves the model untouched.
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple

from bubble_bars.config import DEFAULT_CONFIG, VisualizerConfig
from bubble_bars.model import BarModel
from bubble_bars.strategies import SortStep, StepKind, Strategy, bubble_sort

logger = logging.getLogger(__name__)


class Phase(Enum):
    COMPARING = "comparing"
    SWAP_ANIMATING = "swap_animating"
    ADVANCING = "advancing"
    DONE = "done"


@dataclass(frozen=True)
class Snapshot:
    """
    Attributes:
        values        : bar values at this frame.
        finalized     : per-position finalized flags.
        phase         : animator phase when the frame was taken.
        compare_a/b   : indices under comparison, or None.
        x_a/x_b       : interpolated slot-centre of compare_a / compare_b in
                        slot units (slot k is centred on k + 0.5). None
                        outside a swap: use the default layout position.
        swap_progress : 0..1 while swapping, else None.
    """

    values: Tuple[int, ...]
    finalized: Tuple[bool, ...]
    phase: Phase
    compare_a: Optional[int] = None
    compare_b: Optional[int] = None
    x_a: Optional[float] = None
    x_b: Optional[float] = None
    swap_progress: Optional[float] = None

    @property
    def swapping(self) -> bool:
        return self.x_a is not None and self.x_b is not None

    def is_active(self, index: int) -> bool:
        return index == self.compare_a or index == self.compare_b


class SystemClock:
    """Wall-clock timing backed by time.monotonic()."""

    def now(self) -> float:
        return time.monotonic()

    def sleep(self, seconds: float) -> None:
        if seconds > 0:
            time.sleep(seconds)


# ============================================================================
# Sort Animator
# ============================================================================
class SortAnimator:
    def __init__(self, model: BarModel, config: VisualizerConfig = DEFAULT_CONFIG,
                 strategy: Strategy = bubble_sort, clock=None):
        self.model = model
        self.config = config
        self.clock = clock or SystemClock()

        self.phase = Phase.COMPARING
        self.outer_index = 0
        self.inner_index = 0
        self.swap_progress: Optional[float] = None

        self.comparisons = 0
        self.swaps = 0
        self.finalizations = 0

        self._active: Optional[Tuple[int, int]] = None
        self._slot_x: Optional[Tuple[float, float]] = None
        # compare/swap step in flight, kept here so a dropped tick can resume it
        self._pending: Optional[SortStep] = None
        self._paused = False
        self._pause_owed = False
        self._swap_started: Optional[float] = None
        self._steps = strategy(model)

        # nothing to compare
        if len(model) <= 1:
            self._steps.close()
            self._finish()

    @property
    def done(self) -> bool:
        return self.phase is Phase.DONE

    def snapshot(self) -> Snapshot:
        a, b = self._active if self._active else (None, None)
        x_a, x_b = self._slot_x if self._slot_x else (None, None)
        return Snapshot(
            values=self.model.values,
            finalized=self.model.finalized,
            phase=self.phase,
            compare_a=a,
            compare_b=b,
            x_a=x_a,
            x_b=x_b,
            swap_progress=self.swap_progress,
        )

    # ------------------------------------------------------------------
    # Cooperative task
    # ------------------------------------------------------------------
    def frames(self) -> Iterator[Snapshot]:
        """Run the sort to completion, one Snapshot per suspension point."""
        if self.done:
            yield self.snapshot()
            return
        while not self.done:
            yield from self.tick()

    def tick(self) -> Iterator[Snapshot]:
        """
        One outer step: a comparison (plus its swap animation, if any),
        a finalization, or the transition to DONE. A tick in DONE yields
        the final snapshot and changes nothing.

        Every tick yields at least one snapshot. A comparison or swap that
        was still in flight when the previous tick generator was dropped is
        kept on the animator and picked up by the next tick.
        """
        if self.done:
            yield self.snapshot()
            return

        self._take_owed_pause()
        shown = False
        while not shown:
            if self._pending is None:
                step = next(self._steps, None)
                if step is None or step.kind is StepKind.DONE:
                    self._finish()
                    yield self.snapshot()
                    return

                self.outer_index, self.inner_index = step.outer, step.inner

                if step.kind is StepKind.ADVANCE:
                    self.phase = Phase.ADVANCING
                    self._active = None
                    continue

                if step.kind is StepKind.FINALIZE:
                    self.phase = Phase.ADVANCING
                    self._active = None
                    self._finalize(step.index)
                    self._pause_owed = True
                    yield self.snapshot()
                    self._take_owed_pause()
                    return

                # COMPARE / SWAP
                self._pending = step
                self._paused = False
                self.phase = Phase.COMPARING
                self._active = (step.a, step.b)
                self.comparisons += 1
                yield self.snapshot()
                shown = True

            for snapshot in self._continue_pending():
                shown = True
                yield snapshot

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _continue_pending(self) -> Iterator[Snapshot]:
        """Pause after the highlighted pair, then animate and commit a swap."""
        step = self._pending
        if not self._paused:
            self._paused = True
            self.clock.sleep(self.config.step_delay)
        if step.kind is StepKind.SWAP:
            yield from self._animate_swap(step.a, step.b)
        self._pending = None
        self.phase = Phase.ADVANCING

    def _animate_swap(self, a: int, b: int) -> Iterator[Snapshot]:
        """Slide bar a into b's slot and b into a's, then commit the swap.

        swap_progress always holds the progress of the last snapshot handed
        out, so a resumed animation continues from there and a swap whose
        final frame was already shown commits straight away.
        """
        start_a, start_b = a + 0.5, b + 0.5
        if self._swap_started is None:
            self.phase = Phase.SWAP_ANIMATING
            self._swap_started = self.clock.now()
            progress = 0.0
        elif self.swap_progress < 1.0:
            progress = self._next_progress(self.swap_progress)
        else:
            progress = None

        while progress is not None:
            self.swap_progress = progress
            self._slot_x = (
                start_a + (start_b - start_a) * progress,
                start_b + (start_a - start_b) * progress,
            )
            yield self.snapshot()
            if progress >= 1.0:
                break
            progress = self._next_progress(progress)

        self.model.swap_adjacent(a)
        self.swaps += 1
        self.swap_progress = None
        self._swap_started = None
        self._slot_x = None
        logger.debug("swapped positions %d and %d: %s", a, b, list(self.model.values))

    def _take_owed_pause(self) -> None:
        """Sleep off the pause after a finalization, once."""
        if self._pause_owed:
            self._pause_owed = False
            self.clock.sleep(self.config.step_delay)

    def _next_progress(self, previous: float) -> float:
        duration = self.config.swap_duration
        if duration <= 0:
            return 1.0
        elapsed = self.clock.now() - self._swap_started
        return min(1.0, max(previous, elapsed / duration))

    def _finalize(self, index: int) -> None:
        self.model.mark_finalized(index)
        self.finalizations += 1
        logger.debug("position %d finalized", index)

    def _finish(self) -> None:
        self._pending = None
        self._swap_started = None
        self._active = None
        self._slot_x = None
        self.swap_progress = None
        missed = [k for k, flag in enumerate(self.model.finalized) if not flag]
        if missed and len(self.model) > 1:
            logger.warning("strategy finished without finalizing positions %s", missed)
        for k in missed:
            self._finalize(k)
        self.phase = Phase.DONE
        logger.info("sorted %d bars: %d comparisons, %d swaps",
                    len(self.model), self.comparisons, self.swaps)
