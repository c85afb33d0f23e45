"""Moves game objects according to the speeds of their physical components."""

from __future__ import annotations

from typing import Any

from rigidsim.physical import PhysicalComponent, Rigidbody


class PhysicHandler:
    """Integrates positions and orientations of game objects."""

    def update(self, game_object: Any, delta_time: float) -> None:
        """Advance the object's position, and its rotation if it is a rigid body."""
        physical = game_object.component_of_type(PhysicalComponent)
        if physical is None:
            return
        self._move(game_object, physical, delta_time)
        rigidbody = next(
            (c for c in game_object.components if isinstance(c, Rigidbody)), None
        )
        if rigidbody is not None:
            self._angular_move(game_object, rigidbody, delta_time)

    @staticmethod
    def _move(game_object: Any, physical: PhysicalComponent, delta_time: float) -> None:
        transform = game_object.transform
        transform.position = transform.position + physical.linear_speed * delta_time

    @staticmethod
    def _angular_move(game_object: Any, rigidbody: Rigidbody, delta_time: float) -> None:
        rotation = game_object.transform.rotation.copy()
        rotation.update_by_angular_speed(rigidbody.angular_speed, delta_time)
        game_object.transform.rotation = rotation