"""Gravity timers: arm(interval_ms, callback) / disarm()"""
from typing import Callable, Optional
import pygame

GRAVITY_EVENT = pygame.USEREVENT + 1


class PygameTimer:
    """
    Schedules the gravity callback through pygame.time.set_timer.

    Every arm/disarm starts a new generation. The posted event carries the
    generation it was armed with, and dispatch() drops anything older, so a
    tick that was already sitting in the event queue when the game paused,
    ended or reset never reaches the session.
    """
    def __init__(self, event_type: int = GRAVITY_EVENT):
        self.event_type = event_type
        self.generation = 0
        self.interval_ms = 0
        self.callback: Optional[Callable[[], None]] = None

    def arm(self, interval_ms: int, callback: Callable[[], None]):
        self.disarm()
        self.interval_ms = interval_ms
        self.callback = callback
        ev = pygame.event.Event(self.event_type, gen=self.generation)
        pygame.time.set_timer(ev, interval_ms)

    def disarm(self):
        pygame.time.set_timer(self.event_type, 0)
        self.generation += 1
        self.interval_ms = 0
        self.callback = None

    @property
    def armed(self) -> bool:
        return self.callback is not None

    def dispatch(self, event: pygame.event.Event) -> bool:
        """Run the callback for a gravity event; returns False if it was stale."""
        if event.type != self.event_type or self.callback is None:
            return False
        if getattr(event, "gen", None) != self.generation:
            return False
        self.callback()
        return True


class ManualTimer:
    """Headless timer: nothing fires until fire() is called."""
    def __init__(self):
        self.interval_ms = 0
        self.callback: Optional[Callable[[], None]] = None
        self.arm_count = 0

    def arm(self, interval_ms: int, callback: Callable[[], None]):
        self.interval_ms = interval_ms
        self.callback = callback
        self.arm_count += 1

    def disarm(self):
        self.interval_ms = 0
        self.callback = None

    @property
    def armed(self) -> bool:
        return self.callback is not None

    def fire(self, times: int = 1) -> int:
        """Run the armed callback up to `times` times; returns how many ran."""
        ran = 0
        for _ in range(times):
            if self.callback is None: break
            self.callback(); ran += 1
        return ran
