"""The player character: movement, jumping, gravity and attacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from tunnelgame.geometry import Rect


@dataclass(frozen=True)
class InputState:
    """The controls held down during one frame."""

    left: bool = False
    right: bool = False
    jump: bool = False
    up: bool = False
    down: bool = False
    attack: bool = False


class Player:
    """The player's hitbox, physics state and attack state."""

    SIZE: ClassVar[float] = 20.0
    GRAVITY_FORCE: ClassVar[float] = 0.2
    MOVEMENT_SPEED: ClassVar[float] = 2.0
    JUMP_FORCE: ClassVar[float] = -9.0
    DAMAGE_JUMP_FORCE: ClassVar[float] = -1.0
    DAMAGE_KNOCKBACK: ClassVar[float] = 40.0
    ATTACK_DURATION: ClassVar[int] = 10
    START_HEALTH: ClassVar[int] = 100
    COLOR: ClassVar[tuple[int, int, int]] = (0, 0, 255)
    ATTACK_COLOR: ClassVar[tuple[int, int, int]] = (255, 255, 0)
    TEXTURE: ClassVar[str] = "assets/textures/player.png"

    def __init__(self, x: float = 50.0, y: float = 50.0) -> None:
        self.shape = Rect(x, y, self.SIZE, self.SIZE)
        self.last_position: tuple[float, float] = self.shape.position
        self.touching_ground = False
        self.falling_speed = 0.0
        self.attack_shape = Rect()
        self.attacking = False
        self.last_attack_input = False
        self.attack_timer = 0
        self.last_direction = 1
        self.attack_id = 0
        self.health = self.START_HEALTH

    def save_last_position(self) -> None:
        """Remember the position before this frame's movement."""
        self.last_position = self.shape.position

    def gravity(self) -> None:
        """Accelerate downwards while airborne, then apply the vertical speed."""
        if self.touching_ground:
            self.falling_speed = 0.0
        else:
            self.falling_speed += self.GRAVITY_FORCE
        self.shape.move(0.0, self.falling_speed)

    def collides(self, on_ground: bool) -> None:
        """Record whether the player is standing on something."""
        self.touching_ground = bool(on_ground)

    def movement(self, inputs: InputState) -> None:
        """Walk left and right."""
        if inputs.left:
            self.shape.move(-self.MOVEMENT_SPEED, 0.0)
            self.last_direction = -1
        if inputs.right:
            self.shape.move(self.MOVEMENT_SPEED, 0.0)
            self.last_direction = 1

    def jump(self, inputs: InputState) -> None:
        """Start a jump if standing on the ground."""
        if self.touching_ground and inputs.jump:
            self.touching_ground = False
            self.falling_speed = self.JUMP_FORCE

    def update_attack_position(self, inputs: InputState) -> None:
        """Place the attack hitbox above, below or beside the player."""
        x, y = self.shape.position
        if inputs.up:
            self.attack_shape = Rect(x + 5.0, y - 30.0, 10.0, 30.0)
        elif not self.touching_ground and inputs.down:
            self.attack_shape = Rect(x + 5.0, y + 20.0, 10.0, 30.0)
        elif self.last_direction == -1:
            self.attack_shape = Rect(x - 30.0, y + 5.0, 30.0, 10.0)
        else:
            self.attack_shape = Rect(x + 20.0, y + 5.0, 30.0, 10.0)

    def attack(self, inputs: InputState) -> None:
        """Start an attack on a fresh press and run the active attack's timer."""
        pressed = inputs.attack
        if pressed and not self.last_attack_input and not self.attacking:
            self.attacking = True
            self.attack_timer = self.ATTACK_DURATION
            self.attack_id += 1
            self.update_attack_position(inputs)

        if self.attacking:
            self.update_attack_position(inputs)
            self.attack_timer -= 1
            if self.attack_timer <= 0:
                self.attacking = False

        self.last_attack_input = pressed