"""
Keyboard Input Source - Arrow keys, SPACE, ENTER and ESC via pygame.

Held state comes from KEYDOWN/KEYUP pairs so the source works from the
event queue alone.
"""
from typing import Optional, Set

import pygame

from models import Resolution
from breakout.input.input_event import FrameInput
from breakout.input.sources.base import InputSource
from breakout.logging import get_logger

log = get_logger('input')


class KeyboardInputSource(InputSource):
    """Keyboard input for the desktop front end.

    Arrows are sampled as held state. SPACE (launch), ENTER (confirm) and
    ESC (quit) fire once per key press, so holding ENTER on the game-over
    screen does not immediately start a new game from the menu.
    """

    LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
    RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)
    LAUNCH_KEYS = (pygame.K_SPACE,)
    CONFIRM_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)
    QUIT_KEYS = (pygame.K_ESCAPE,)

    def __init__(self):
        """Initialize the keyboard input source."""
        self._held: Set[int] = set()
        self._launch = False
        self._confirm = False
        self._quit = False
        self._resize: Optional[Resolution] = None

    def handle_event(self, event: pygame.event.Event) -> None:
        """Fold one pygame event into the pending frame state."""
        if event.type == pygame.QUIT:
            self._quit = True
        elif event.type == pygame.KEYDOWN:
            self._held.add(event.key)
            if event.key in self.LAUNCH_KEYS:
                self._launch = True
            elif event.key in self.CONFIRM_KEYS:
                self._confirm = True
            elif event.key in self.QUIT_KEYS:
                self._quit = True
        elif event.type == pygame.KEYUP:
            self._held.discard(event.key)
        elif event.type == pygame.VIDEORESIZE:
            self._resize = Resolution(width=max(1, event.w), height=max(1, event.h))
            log.debug("Window resized to %s", self._resize)

    def update(self, dt: float) -> None:
        """Drain the pygame event queue."""
        for event in pygame.event.get():
            self.handle_event(event)

    def poll(self) -> FrameInput:
        """Return this frame's input and clear the one-shot signals."""
        frame = FrameInput(
            move_left=any(key in self._held for key in self.LEFT_KEYS),
            move_right=any(key in self._held for key in self.RIGHT_KEYS),
            launch=self._launch,
            confirm=self._confirm,
            quit=self._quit,
        )
        self._launch = False
        self._confirm = False
        self._quit = False
        return frame

    def poll_resize(self) -> Optional[Resolution]:
        """Return the pending window size, if any, and clear it."""
        resize, self._resize = self._resize, None
        return resize
