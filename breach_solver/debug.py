"""
Debug Utilities

Functions for rendering a solved path over the grid and saving it as an image.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from PIL import Image, ImageDraw, ImageFont

from breach_solver.solver import Grid, Solution

logger = logging.getLogger(__name__)


# Debug settings
DEBUG_DIR = Path("./debug")
MAX_DEBUG_IMAGES = 10

# Layout
CELL_SIZE = 48
MARGIN = 16
HEADER_HEIGHT = 40

# Colors
BACKGROUND = "#1b1e23"
TOKEN_COLOR = "#c8e64c"
PATH_COLOR = "#4fc3f7"
START_COLOR = "#ffc107"
INFO_COLOR = "#e0e0e0"


def _load_fonts():
    """Load a TrueType font if available, fall back to the default bitmap font."""
    try:
        font = ImageFont.truetype("arial.ttf", 16)
        small_font = ImageFont.truetype("arial.ttf", 10)
    except OSError:
        font = ImageFont.load_default()
        small_font = font
    return font, small_font


def _cell_origin(column: int, row: int):
    """Top-left pixel of a cell."""
    return MARGIN + column * CELL_SIZE, HEADER_HEIGHT + MARGIN + row * CELL_SIZE


def _cell_center(column: int, row: int):
    """Center pixel of a cell."""
    x, y = _cell_origin(column, row)
    return x + CELL_SIZE // 2, y + CELL_SIZE // 2


def render_solution_image(grid: Grid, solution: Optional[Solution]) -> Image.Image:
    """
    Draw the grid with a solution path on top.

    Annotations include:
    - Every token in its cell
    - Path cells outlined, start cell in a distinct color
    - Connecting lines between consecutive path cells
    - Step numbers in the corner of each path cell
    - Matched targets and the move description in the header

    Args:
        grid: Puzzle grid
        solution: Solution to draw (grid only if None)

    Returns:
        Rendered RGB image
    """
    width = 2 * MARGIN + grid.size * CELL_SIZE
    height = HEADER_HEIGHT + 2 * MARGIN + grid.size * CELL_SIZE
    image = Image.new("RGB", (max(width, 320), height), BACKGROUND)
    draw = ImageDraw.Draw(image)
    font, small_font = _load_fonts()

    for r in range(grid.size):
        for c in range(grid.size):
            cx, cy = _cell_center(c, r)
            draw.text((cx - 10, cy - 8), grid.cells[r][c], fill=TOKEN_COLOR, font=font)

    if solution is None:
        draw.text((MARGIN, 10), f"Grid: {grid.size}x{grid.size}, no solution", fill=INFO_COLOR, font=small_font)
        return image

    centers = [_cell_center(p.column, p.row) for p in solution.path]
    if len(centers) > 1:
        draw.line(centers, fill=PATH_COLOR, width=2)

    for step, position in enumerate(solution.path):
        x, y = _cell_origin(position.column, position.row)
        color = START_COLOR if step == 0 else PATH_COLOR
        draw.rectangle([x + 2, y + 2, x + CELL_SIZE - 2, y + CELL_SIZE - 2], outline=color, width=2)
        draw.text((x + 4, y + 3), str(step + 1), fill=color, font=small_font)

    matched = ", ".join(str(i) for i in sorted(solution.targets))
    draw.text((MARGIN, 6), f"Targets: {matched} of {grid.target_count}", fill=INFO_COLOR, font=small_font)
    draw.text((MARGIN, 22), solution.describe(), fill=INFO_COLOR, font=small_font)

    return image


def save_debug_image(grid: Grid, solution: Optional[Solution], path: Optional[str] = None) -> Path:
    """
    Save an annotated image of a solution path.

    Args:
        grid: Puzzle grid
        solution: Solution to draw
        path: Output file path (default: timestamped file in DEBUG_DIR)

    Returns:
        Path of the saved image
    """
    if path is None:
        DEBUG_DIR.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")[:-3]
        output = DEBUG_DIR / f"debug_{timestamp}.png"
    else:
        output = Path(path)
        output.parent.mkdir(parents=True, exist_ok=True)

    image = render_solution_image(grid, solution)
    image.save(output, "PNG")
    logger.debug(f"Debug image saved: {output}")

    # Cleanup old debug images
    _cleanup_debug_images()
    return output


def _cleanup_debug_images() -> None:
    """Remove old debug images, keeping only the most recent MAX_DEBUG_IMAGES."""
    if not DEBUG_DIR.exists():
        return

    # Get all debug images sorted by modification time
    debug_files = sorted(
        DEBUG_DIR.glob("debug_*.png"),
        key=lambda p: p.stat().st_mtime,
        reverse=True
    )

    # Remove old files
    for old_file in debug_files[MAX_DEBUG_IMAGES:]:
        try:
            old_file.unlink()
        except OSError as e:
            logger.debug(f"Could not remove old debug image {old_file}: {e}")
