#!/usr/bin/env python3

"""Create an identicon image from hashing a string."""

import argparse
import logging
import sys

import identicon
import surfaces


def init_argparse():
    parser = argparse.ArgumentParser(
        description='Render a deterministic identicon for a string.')
    parser.add_argument('--raw_string', type=str, default='Testing',
        help='The string to convert to an identicon.')
    parser.add_argument('--salt', type=str, default=None,
        help='Optional string to prepend before hashing.')
    parser.add_argument('--output_path', type=str, default='./identicon.png',
        help='Where to write the image. Paths ending in .svg get an svg, anything else a png.')
    parser.add_argument('--size', type=int, default=250,
        help='Width and height of the image, in pixels.')
    parser.add_argument('--grid_size', type=int, default=identicon.DEFAULT_GRID_SIZE,
        help='Number of cells along each side of the grid.')
    return parser


class IdenticonWriter:
    """Renders one identicon and writes it to disk."""

    def __init__(self, raw_string, output_path, size=250,
            grid_size=identicon.DEFAULT_GRID_SIZE, salt=None):
        self.raw_string = raw_string
        self.output_path = output_path
        if output_path.lower().endswith('.svg'):
            self.surface = surfaces.SvgSurface(size, size)
        else:
            self.surface = surfaces.PillowSurface(size, size)
        self.generator = identicon.IdenticonGenerator(self.surface,
            grid_size=grid_size, salt=salt)

    def run(self):
        self.generator.generate(self.raw_string)
        self.surface.save(self.output_path)


def main(argv=None):
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s:%(levelname)s:%(message)s',
        stream=sys.stderr)

    parser = init_argparse()
    args = parser.parse_args(argv)
    if args.size <= 0:
        parser.error("--size must be positive")

    try:
        tool = IdenticonWriter(args.raw_string, args.output_path, size=args.size,
            grid_size=args.grid_size, salt=args.salt)
        tool.run()
    except identicon.IdenticonError as e:
        logging.error("Couldn't create identicon: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
