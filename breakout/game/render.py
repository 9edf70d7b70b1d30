"""Read-only drawable snapshot handed to the presentation layer."""

from dataclasses import dataclass
from enum import Enum
from typing import List

from models import Color, Rectangle

from .physics.geometry import Box
from .state import SimulationState
from ..game_state import GameState


class DrawKind(str, Enum):
    """What a drawable rectangle represents."""
    BRICK = "brick"
    BONUS = "bonus"
    PADDLE = "paddle"
    BALL = "ball"


@dataclass(frozen=True)
class DrawRect:
    """One world-space rectangle to paint.

    Attributes:
        rect: Bottom-left anchored rectangle in world units
        color: RGBA fill color
        kind: Entity the rectangle belongs to
    """
    rect: Rectangle
    color: Color
    kind: DrawKind


@dataclass(frozen=True)
class HudValues:
    """Scalar values for the textual overlay."""
    score: int
    lives: int
    level: int
    state: GameState


def box_to_rectangle(box: Box) -> Rectangle:
    return Rectangle(x=box.x, y=box.y, width=box.width, height=box.height)


def build_draw_list(sim: SimulationState) -> List[DrawRect]:
    """Build the paint-ordered snapshot: bricks, bonuses, paddle, ball.

    Nothing is drawn in the menu. The ball is drawn only while playing.
    """
    if sim.state == GameState.MENU:
        return []

    draws = [
        DrawRect(box_to_rectangle(block.box), block.color, DrawKind.BRICK)
        for block in sim.blocks
        if block.active
    ]
    draws.extend(
        DrawRect(box_to_rectangle(bonus.box), bonus.color, DrawKind.BONUS)
        for bonus in sim.bonuses
        if bonus.active
    )
    draws.append(DrawRect(box_to_rectangle(sim.paddle.box), sim.paddle.color, DrawKind.PADDLE))

    if sim.state == GameState.PLAYING:
        draws.append(DrawRect(box_to_rectangle(sim.ball.box), sim.ball.color, DrawKind.BALL))
    return draws


def hud_values(sim: SimulationState) -> HudValues:
    return HudValues(score=sim.score, lives=sim.lives, level=sim.level, state=sim.state)
