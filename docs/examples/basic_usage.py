#!/usr/bin/env python3
"""Basic usage examples for lut-studio."""

import numpy as np

import lut_studio
from lut_studio.lut import LutGenerator, format_cube


def example_decode():
    """Example: Generate .cube text and decode it."""
    print("=== Decoding Examples ===")

    # Bake a gamma curve into a 17x17x17 LUT and serialize it
    grid = LutGenerator(17).apply_gamma(2.2)
    text = format_cube(grid)
    print(f"Generated .cube text: {len(text.splitlines())} lines")

    decoded = lut_studio.decode(text)
    info = decoded.describe()
    print(f"Size: {info['size']}³")
    print(f"Title: {info['title']}")
    print(f"Entries: {info['entries']}")
    print(f"Axis order: {info['axis_order']}")

    return decoded


def example_transform(grid):
    """Example: Apply a LUT to an RGBA buffer in place."""
    print("\n=== Transform Examples ===")

    # Horizontal gray ramp with a constant alpha
    ramp = np.linspace(0, 255, 256).astype(np.uint8)
    pixels = np.zeros((8, 256, 4), dtype=np.uint8)
    pixels[..., :3] = ramp[np.newaxis, :, np.newaxis]
    pixels[..., 3] = 128

    lut_studio.transform(grid, pixels, 4)
    print(f"Mid gray 128 -> {pixels[0, 128, 0]}")
    print(f"Alpha unchanged: {bool(np.all(pixels[..., 3] == 128))}")

    # Same result, split across threads
    threaded = pixels.copy()
    threaded[..., :3] = ramp[np.newaxis, :, np.newaxis]
    lut_studio.apply_grid(grid, threaded, workers=4)
    print(f"Threaded result matches: {bool(np.array_equal(pixels, threaded))}")


def example_cli():
    """Example: Command line usage."""
    print("\n=== Command Line Example ===")
    print("Show LUT information:   lut-studio look.cube --info")
    print("Apply LUT to an image:  lut-studio look.cube photo.jpg -o graded.png")
    print("Force sample ordering:  lut-studio look.cube photo.jpg -o out.png \\")
    print("                        --axis-order r-slowest")


def main():
    """Run all examples."""
    print("LUT Studio - Basic Usage Examples")
    print("=" * 50)

    grid = example_decode()
    example_transform(grid)
    example_cli()

    print("\n=== All Examples Complete ===")


if __name__ == "__main__":
    main()
