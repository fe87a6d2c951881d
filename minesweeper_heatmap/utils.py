"""Grid helpers shared by the board, solver and renderers."""

from typing import Dict, Iterator, List, Tuple

Coord = Tuple[int, int]
Neighborhoods = Dict[Coord, Tuple[Coord, ...]]

# Module-level cache: (width, height) -> {(x, y): ((nx, ny), ...), ...}
# Entries are never mutated once stored, so concurrent engine calls can share it.
_NEIGHBORHOODS_CACHE: Dict[Tuple[int, int], Neighborhoods] = {}


def get_neighborhoods(width: int, height: int) -> Neighborhoods:
    """
    Precompute and cache the 8-connected neighbourhood of every cell in a grid.

    Neighbours are listed in row-major order over the surrounding 3x3 block
    (top-left first, bottom-right last, centre skipped). Downstream search
    order depends on this ordering, so it must stay fixed.

    Args:
        width: Grid width (number of columns). Must be positive.
        height: Grid height (number of rows). Must be positive.

    Returns:
        Mapping from each cell (x, y) to a tuple of its in-bounds neighbours.

    Raises:
        ValueError: If width or height is non-positive.
    """
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be positive.")

    key = (width, height)
    cached = _NEIGHBORHOODS_CACHE.get(key)
    if cached is not None:
        return cached

    neighborhoods: Neighborhoods = {}
    for x, y in iter_coords(width, height):
        nbrs: List[Coord] = []
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                nx, ny = x + dx, y + dy
                if in_bounds(nx, ny, width, height):
                    nbrs.append((nx, ny))
        neighborhoods[(x, y)] = tuple(nbrs)

    _NEIGHBORHOODS_CACHE[key] = neighborhoods
    return neighborhoods


def in_bounds(x: int, y: int, width: int, height: int) -> bool:
    """Return True if (x, y) lies on a width x height grid."""
    return 0 <= x < width and 0 <= y < height


def iter_coords(width: int, height: int) -> Iterator[Coord]:
    """Yield every (x, y) of a grid in row-major order."""
    for y in range(height):
        for x in range(width):
            yield x, y
