#!/usr/bin/env python3

"""Filled shape primitives drawn onto a surface."""

import math

OCTAGON_RADIUS_RATIO = math.sqrt(2) / (1 + math.sqrt(2))


def _vertices(x, y, radius, angles):
    return [(x + radius * math.cos(angle), y + radius * math.sin(angle))
            for angle in angles]


class ShapeRenderer:
    """Draws identicon shapes, each centered on (x, y)."""

    def __init__(self, surface):
        self.surface = surface

    def draw(self, instruction):
        """Dispatches a DrawInstruction to the matching draw_* method."""
        draw_shape = getattr(self, 'draw_{}'.format(instruction.kind.value))
        draw_shape(instruction.x, instruction.y, instruction.size,
            instruction.color, instruction.rotation)

    def draw_square(self, x, y, size, color, rotation=0):
        self.surface.fill_rect(x - size / 2, y - size / 2, size, size, color)

    def draw_circle(self, x, y, size, color, rotation=0):
        self.surface.fill_arc(x, y, size / 2, 0, math.pi * 2, color)

    def draw_diamond(self, x, y, size, color, rotation=0):
        half = size / 2
        self.surface.fill_polygon(
            [(x, y - half), (x + half, y), (x, y + half), (x - half, y)], color)

    def draw_octagon(self, x, y, size, color, rotation=0):
        radius = size / 2 * OCTAGON_RADIUS_RATIO
        angles = [math.pi / 4 * i for i in range(8)]
        self.surface.fill_polygon(_vertices(x, y, radius, angles), color)

    def draw_boundary_triangle(self, x, y, size, color, rotation=0):
        """Equilateral triangle pointing away from the direction of rotation."""
        angles = [rotation + math.pi,
                  rotation + math.pi * 5 / 3,
                  rotation - math.pi * 5 / 3]
        self.surface.fill_polygon(_vertices(x, y, size / 2, angles), color)

    def draw_effect_triangle(self, x, y, size, color, rotation=0):
        """Equilateral triangle pointing along the direction of rotation."""
        angles = [rotation,
                  rotation + math.pi * 2 / 3,
                  rotation - math.pi * 2 / 3]
        self.surface.fill_polygon(_vertices(x, y, size / 2, angles), color)
