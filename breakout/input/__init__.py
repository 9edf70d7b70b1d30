"""Breakout input: per-frame signals and the sources that produce them."""

from .input_event import FrameInput, NO_INPUT
from .sources import InputSource, KeyboardInputSource

__all__ = ['FrameInput', 'NO_INPUT', 'InputSource', 'KeyboardInputSource']
