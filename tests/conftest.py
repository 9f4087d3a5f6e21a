import pytest

import surfaces


class RecordingSurface(surfaces.Surface):
    """Remembers every call instead of drawing."""

    def __init__(self, width=250, height=250):
        super().__init__(width, height)
        self.calls = []

    def clear(self):
        self.calls.append(("clear",))

    def fill_rect(self, x, y, width, height, color):
        self.calls.append(("rect", x, y, width, height, color))

    def fill_polygon(self, points, color):
        self.calls.append(("polygon", list(points), color))

    def fill_arc(self, x, y, radius, start_angle, end_angle, color):
        self.calls.append(("arc", x, y, radius, start_angle, end_angle, color))


def make_digest(prefix="", **chunks):
    """A 64-char digest of 'ff' bytes, with prefix and offset chunks patched in.

    Chunks are passed as at_<offset>="hex".
    """
    digest = list(prefix + "f" * (64 - len(prefix)))
    for key, value in chunks.items():
        offset = int(key.split("_")[1])
        digest[offset:offset + len(value)] = value
    return "".join(digest)


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def surface_factory():
    return RecordingSurface


@pytest.fixture
def digest_maker():
    return make_digest
