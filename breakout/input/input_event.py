"""
Frame Input - The discrete signals sampled once per frame.

Uses dataclass for immutability; the simulation never mutates it.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class FrameInput:
    """Immutable snapshot of the player's intent for one frame.

    Attributes:
        move_left: Move-left key is held
        move_right: Move-right key is held
        launch: Launch was pressed this frame
        confirm: Confirm (start / return to menu) was pressed this frame
        quit: Quit was requested this frame
    """
    move_left: bool = False
    move_right: bool = False
    launch: bool = False
    confirm: bool = False
    quit: bool = False

    @property
    def horizontal(self) -> int:
        """Net horizontal intent: -1 left, 0 none, +1 right."""
        return int(self.move_right) - int(self.move_left)

    def __str__(self) -> str:
        """String representation for debugging."""
        flags = [name for name in ('move_left', 'move_right', 'launch', 'confirm', 'quit')
                 if getattr(self, name)]
        return f"FrameInput({', '.join(flags) or 'idle'})"


NO_INPUT = FrameInput()
