#!/usr/bin/env python3

"""Drawing surfaces that identicons can be rendered onto."""

import io
import logging
import math
from xml.etree import ElementTree as ET

from PIL import Image, ImageDraw

TRANSPARENT = (0, 0, 0, 0)


def _fmt(value):
    """Short, stable text for a coordinate."""
    return '{:.3f}'.format(value).rstrip('0').rstrip('.')


class Surface:
    """An abstract drawing target of fixed pixel size.

    Subclasses fill shapes in a solid color given as a '#RRGGBB' string.
    """

    def __init__(self, width, height):
        self.width = width
        self.height = height

    def clear(self):
        raise NotImplementedError

    def fill_rect(self, x, y, width, height, color):
        raise NotImplementedError

    def fill_polygon(self, points, color):
        raise NotImplementedError

    def fill_arc(self, x, y, radius, start_angle, end_angle, color):
        raise NotImplementedError


class PillowSurface(Surface):
    """A raster surface backed by an RGBA Pillow image."""

    def __init__(self, width, height):
        super().__init__(width, height)
        self.image = Image.new('RGBA', (width, height), TRANSPARENT)
        self.draw = ImageDraw.Draw(self.image)

    def clear(self):
        self.image.paste(TRANSPARENT, (0, 0, self.width, self.height))

    def fill_rect(self, x, y, width, height, color):
        # Pillow boxes include their far edge.
        x1 = max(x, x + width - 1)
        y1 = max(y, y + height - 1)
        self.draw.rectangle([x, y, x1, y1], fill=color)

    def fill_polygon(self, points, color):
        self.draw.polygon([tuple(point) for point in points], fill=color)

    def fill_arc(self, x, y, radius, start_angle, end_angle, color):
        bbox = [x - radius, y - radius,
                max(x - radius, x + radius - 1), max(y - radius, y + radius - 1)]
        if end_angle - start_angle >= math.pi * 2:
            self.draw.ellipse(bbox, fill=color)
        else:
            self.draw.pieslice(bbox, math.degrees(start_angle),
                math.degrees(end_angle), fill=color)

    def to_png_bytes(self):
        buffer = io.BytesIO()
        self.image.save(buffer, format='PNG')
        return buffer.getvalue()

    def save(self, path):
        self.image.save(path, format='PNG')
        logging.info('Wrote %sx%s png to %s', self.width, self.height, path)


class SvgSurface(Surface):
    """A vector surface that accumulates SVG elements."""

    def __init__(self, width, height):
        super().__init__(width, height)
        self.root = ET.Element('svg', attrib={
            'width': str(width), 'height': str(height),
            'viewBox': f'0 0 {width} {height}',
            'version': '1.1', 'xmlns': 'http://www.w3.org/2000/svg'})

    def clear(self):
        for child in list(self.root):
            self.root.remove(child)

    def fill_rect(self, x, y, width, height, color):
        ET.SubElement(self.root, 'rect', attrib={
            'x': _fmt(x), 'y': _fmt(y),
            'width': _fmt(width), 'height': _fmt(height),
            'fill': color})

    def fill_polygon(self, points, color):
        ET.SubElement(self.root, 'polygon', attrib={
            'points': ' '.join(f'{_fmt(px)},{_fmt(py)}' for px, py in points),
            'fill': color})

    def fill_arc(self, x, y, radius, start_angle, end_angle, color):
        if end_angle - start_angle >= math.pi * 2:
            ET.SubElement(self.root, 'circle', attrib={
                'cx': _fmt(x), 'cy': _fmt(y), 'r': _fmt(radius), 'fill': color})
            return
        x1 = x + radius * math.cos(start_angle)
        y1 = y + radius * math.sin(start_angle)
        x2 = x + radius * math.cos(end_angle)
        y2 = y + radius * math.sin(end_angle)
        large_arc = 1 if end_angle - start_angle > math.pi else 0
        ET.SubElement(self.root, 'path', attrib={
            'd': (f'M{_fmt(x)},{_fmt(y)} L{_fmt(x1)},{_fmt(y1)} '
                  f'A {_fmt(radius)},{_fmt(radius)} 0 {large_arc} 1 {_fmt(x2)},{_fmt(y2)} Z'),
            'fill': color})

    def to_string(self):
        return '<?xml version="1.0" standalone="no"?>{}'.format(
            ET.tostring(self.root, encoding='unicode'))

    def save(self, path):
        svg_string = self.to_string()
        with open(path, "w") as output_file:
            output_file.write(svg_string)
        logging.info('Wrote svg to %s', path)
        logging.debug('svg dump: %s', svg_string)
