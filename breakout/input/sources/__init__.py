"""Breakout input sources."""

from .base import InputSource
from .keyboard import KeyboardInputSource

__all__ = ['InputSource', 'KeyboardInputSource']
