#!/usr/bin/env python3

"""Turn strings into deterministic grids of shapes."""

import collections
import enum
import hashlib
import logging
import math

import shapes

DIGEST_HEX_LENGTH = 64
DEFAULT_GRID_SIZE = 5
OBJECT_THRESHOLD = 150
CENTER_COLOR_OFFSET = 0
BOUNDARY_COLOR_OFFSET = 6
EFFECT_COLOR_OFFSET = 12


class IdenticonError(Exception):
    """Base class for everything this package raises."""


class ConfigError(IdenticonError, ValueError):
    """The grid or surface can't produce an identicon."""


class HashError(IdenticonError):
    """The input couldn't be turned into a digest."""


class DigestRangeError(IdenticonError, IndexError):
    """A read past the end (or before the start) of a digest."""


class ShapeKind(enum.Enum):
    SQUARE = "square"
    CIRCLE = "circle"
    DIAMOND = "diamond"
    OCTAGON = "octagon"
    BOUNDARY_TRIANGLE = "boundary_triangle"
    EFFECT_TRIANGLE = "effect_triangle"


class CenterShape(enum.IntEnum):
    """Shape variants for the center cell, keyed by the decoded object key.

    bit() only ever yields 0 or 1, so DIAMOND and OCTAGON are reachable only
    once a wider extractor feeds this switch.
    """
    SQUARE = 0
    CIRCLE = 1
    DIAMOND = 2
    OCTAGON = 3

    def shape_kind(self):
        return ShapeKind[self.name]


Palette = collections.namedtuple("Palette", ["center", "boundary", "effect"])

CellFeatures = collections.namedtuple(
    "CellFeatures",
    ["row", "col", "object_key", "color_key", "color", "x", "y", "rotation"])

DrawInstruction = collections.namedtuple(
    "DrawInstruction", ["kind", "x", "y", "size", "color", "rotation"])


def hash_string(raw_string, salt=None):
    """Returns the lowercase SHA-256 hex digest of a string.

    Args:
        raw_string (str): Any text, including the empty string.
        salt (str): Optional text prepended to raw_string before hashing.

    Returns:
        str: 64 hex characters.
    """
    if not isinstance(raw_string, str):
        raise HashError(f"Can only hash text, got {type(raw_string).__name__}")
    if salt:
        raw_string = salt + raw_string
    try:
        encoded = bytes(raw_string, encoding='utf-8')
    except UnicodeEncodeError as e:
        raise HashError(f"Input can't be encoded as UTF-8: {e}") from e
    return hashlib.sha256(encoded).hexdigest()


def _check_range(digest, index, width):
    if index < 0 or index + width > len(digest):
        raise DigestRangeError(
            f"Can't read {width} chars at offset {index} of a "
            f"{len(digest)}-char digest")


def bit(digest, index):
    """Reads the byte at a hex offset and returns 1 if it's below 150."""
    _check_range(digest, index, 2)
    value = int(digest[index:index + 2], 16)
    return 1 if value < OBJECT_THRESHOLD else 0


def color_at(digest, index):
    """Reads six hex chars at an offset as a #RRGGBB color."""
    _check_range(digest, index, 6)
    return '#{}'.format(digest[index:index + 6])


def palette_from_digest(digest):
    return Palette(
        center=color_at(digest, CENTER_COLOR_OFFSET),
        boundary=color_at(digest, BOUNDARY_COLOR_OFFSET),
        effect=color_at(digest, EFFECT_COLOR_OFFSET))


def max_grid_size(digest_length=DIGEST_HEX_LENGTH):
    """Largest grid whose every cell's features fit inside the digest."""
    grid_size = 0
    while (grid_size + 1) ** 2 * 2 + 2 <= digest_length:
        grid_size += 1
    return grid_size


class GridLayout:
    """Maps an N x N grid of cells onto a square canvas."""

    def __init__(self, width, height, grid_size=DEFAULT_GRID_SIZE,
            boundary_cells=None):
        if width <= 0 or height <= 0:
            raise ConfigError(f"Surface must have a positive size, got {width}x{height}")
        if width != height:
            raise ConfigError(f"Surface must be square, got {width}x{height}")
        if isinstance(grid_size, bool) or not isinstance(grid_size, int) or grid_size < 1:
            raise ConfigError(f"Grid size must be a positive integer, got {grid_size!r}")
        if grid_size > max_grid_size():
            raise ConfigError(
                f"A {grid_size}x{grid_size} grid needs more than the "
                f"{DIGEST_HEX_LENGTH} hex chars a digest provides "
                f"(max grid size is {max_grid_size()})")
        self.width = width
        self.height = height
        self.grid_size = grid_size
        self.cell_size = width / grid_size
        self.canvas_center = (width / 2, height / 2)
        middle = grid_size // 2
        self.center_cell = (middle, middle)
        if boundary_cells is None:
            boundary_cells = self.default_boundary_cells()
        self.boundary_cells = frozenset(tuple(cell) for cell in boundary_cells)
        for row, col in self.boundary_cells:
            if not (0 <= row < grid_size and 0 <= col < grid_size):
                raise ConfigError(f"Boundary cell {(row, col)} is off the grid")
        if self.center_cell in self.boundary_cells:
            raise ConfigError("The center cell can't also be a boundary cell")

    def default_boundary_cells(self):
        """Every non-center cell sharing a row or column with the center."""
        middle, _ = self.center_cell
        cells = set()
        for i in range(self.grid_size):
            cells.add((middle, i))
            cells.add((i, middle))
        cells.discard(self.center_cell)
        return cells

    def cells(self):
        for row in range(self.grid_size):
            for col in range(self.grid_size):
                yield row, col

    def feature_offset(self, row, col):
        return (row * self.grid_size + col) * 2

    def cell_center(self, row, col):
        half = self.cell_size / 2
        return (col * self.cell_size + half, row * self.cell_size + half)

    def rotation(self, row, col):
        """Angle from the cell's center to the canvas center, in radians."""
        x, y = self.cell_center(row, col)
        center_x, center_y = self.canvas_center
        return math.atan2(center_y - y, center_x - x)

    def is_center(self, row, col):
        return (row, col) == self.center_cell

    def is_boundary(self, row, col):
        return (row, col) in self.boundary_cells


def decode_cell(digest, layout, row, col):
    index = layout.feature_offset(row, col)
    object_key = bit(digest, index)
    color_key = bit(digest, index + 2)
    x, y = layout.cell_center(row, col)
    return CellFeatures(
        row=row, col=col,
        object_key=object_key,
        color_key=color_key,
        color=color_at(digest, color_key * 6),
        x=x, y=y,
        rotation=layout.rotation(row, col))


def select_cell(digest, layout, palette, row, col):
    """Decides what, if anything, to draw in one cell.

    Returns:
        DrawInstruction or None: None for an empty cell.
    """
    features = decode_cell(digest, layout, row, col)
    size = layout.cell_size
    if layout.is_center(row, col):
        shape = CenterShape(features.object_key)
        return DrawInstruction(shape.shape_kind(), features.x, features.y, size,
            palette.center, features.rotation)
    if features.object_key == 0:
        return None
    # features.color goes unused here; the fixed palette wins.
    if layout.is_boundary(row, col):
        return DrawInstruction(ShapeKind.BOUNDARY_TRIANGLE, features.x, features.y,
            size, palette.boundary, features.rotation)
    return DrawInstruction(ShapeKind.EFFECT_TRIANGLE, features.x, features.y,
        size, palette.effect, features.rotation)


def plan_from_digest(digest, layout):
    """Builds the row-major list of draw instructions for a digest."""
    palette = palette_from_digest(digest)
    instructions = []
    for row, col in layout.cells():
        instruction = select_cell(digest, layout, palette, row, col)
        if instruction is not None:
            instructions.append(instruction)
    return instructions


class IdenticonGenerator:
    """Draws identicons onto one surface."""

    def __init__(self, surface, grid_size=DEFAULT_GRID_SIZE, boundary_cells=None,
            salt=None):
        self.surface = surface
        self.salt = salt
        self.layout = GridLayout(surface.width, surface.height, grid_size=grid_size,
            boundary_cells=boundary_cells)
        self.renderer = shapes.ShapeRenderer(surface)

    def plan(self, raw_string):
        digest = hash_string(raw_string, salt=self.salt)
        logging.debug("Digest for %r starts with %s", raw_string, digest[:12])
        return plan_from_digest(digest, self.layout)

    def generate(self, raw_string):
        """Clears the surface and draws the identicon for raw_string.

        Nothing is drawn if hashing fails.
        """
        instructions = self.plan(raw_string)
        self.surface.clear()
        for instruction in instructions:
            self.renderer.draw(instruction)
        logging.info("Drew %s shapes on a %sx%s grid.", len(instructions),
            self.layout.grid_size, self.layout.grid_size)
        return instructions
