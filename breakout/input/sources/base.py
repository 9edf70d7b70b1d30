"""
Base Input Source - Abstract interface for input backends.
"""
from abc import ABC, abstractmethod
from typing import Optional

from models import Resolution
from breakout.input.input_event import FrameInput


class InputSource(ABC):
    """Abstract base class for input sources.

    A source collects platform events between frames and hands the
    simulation one FrameInput per frame.
    """

    @abstractmethod
    def update(self, dt: float) -> None:
        """Collect platform events since the last frame.

        Args:
            dt: Delta time in seconds since last update.
        """
        pass

    @abstractmethod
    def poll(self) -> FrameInput:
        """Return this frame's input and reset edge-triggered signals."""
        pass

    def poll_resize(self) -> Optional[Resolution]:
        """Return the latest window size if it changed since the last poll."""
        return None
