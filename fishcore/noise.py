"""Two dimensional Perlin noise."""

from __future__ import annotations

import math

# Ken Perlin's reference permutation, sixteen entries per row.
_PERMUTATION = (
    151, 160, 137, 91, 90, 15, 131, 13, 201, 95, 96, 53, 194, 233, 7, 225,
    140, 36, 103, 30, 69, 142, 8, 99, 37, 240, 21, 10, 23, 190, 6, 148,
    247, 120, 234, 75, 0, 26, 197, 62, 94, 252, 219, 203, 117, 35, 11, 32,
    57, 177, 33, 88, 237, 149, 56, 87, 174, 20, 125, 136, 171, 168, 68, 175,
    74, 165, 71, 134, 139, 48, 27, 166, 77, 146, 158, 231, 83, 111, 229, 122,
    60, 211, 133, 230, 220, 105, 92, 41, 55, 46, 245, 40, 244, 102, 143, 54,
    65, 25, 63, 161, 1, 216, 80, 73, 209, 76, 132, 187, 208, 89, 18, 169,
    200, 196, 135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173, 186, 3, 64,
    52, 217, 226, 250, 124, 123, 5, 202, 38, 147, 118, 126, 255, 82, 85, 212,
    207, 206, 59, 227, 47, 16, 58, 17, 182, 189, 28, 42, 223, 183, 170, 213,
    119, 248, 152, 2, 44, 154, 163, 70, 221, 153, 101, 155, 167, 43, 172, 9,
    129, 22, 39, 253, 19, 98, 108, 110, 79, 113, 224, 232, 178, 185, 112, 104,
    218, 246, 97, 228, 251, 34, 242, 193, 238, 210, 144, 12, 191, 179, 162, 241,
    81, 51, 145, 235, 249, 14, 239, 107, 49, 192, 214, 31, 181, 199, 106, 157,
    184, 84, 204, 176, 115, 121, 50, 45, 127, 4, 150, 254, 138, 236, 205, 93,
    222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66, 215, 61, 156, 180,
)

# The twelve cube-edge gradient directions.
_GRADIENTS = (
    (1, 1, 0), (-1, 1, 0), (1, -1, 0), (-1, -1, 0),
    (1, 0, 1), (-1, 0, 1), (1, 0, -1), (-1, 0, -1),
    (0, 1, 1), (0, -1, 1), (0, 1, -1), (0, -1, -1),
)

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _floor_i32(value: float) -> int:
    """Floor to an integer, saturating to the 32-bit signed range."""
    if math.isnan(value):
        return 0
    return max(_I32_MIN, min(_I32_MAX, math.floor(value)))


def _smoothstep(t: float) -> float:
    return ((6.0 * t - 15.0) * t + 10.0) * t ** 3


def _mix(a: float, b: float, t: float) -> float:
    return a + (b - a) * t if False else (1.0 - t) * a + t * b


class NoiseGenerator:
    """Seeded Perlin noise generator."""

    def __init__(self, seed: int = 0):
        self._perm: list[int] = [0] * 512
        self._grad: list[tuple[int, int, int]] = [(0, 0, 0)] * 512
        self.seed(seed)

    def seed(self, seed: int) -> None:
        """Rebuild the permutation tables from ``seed``."""
        if seed < 256:
            seed |= seed << 8
        odd_mask = seed & 0xFF
        even_mask = (seed >> 8) & 0xFF
        for i, entry in enumerate(_PERMUTATION):
            value = entry ^ (odd_mask if i % 2 else even_mask)
            gradient = _GRADIENTS[value % len(_GRADIENTS)]
            for slot in (i, i + 256):
                self._perm[slot] = value
                self._grad[slot] = gradient

    def _corner(self, cx: int, cy: int, dx: float, dy: float) -> float:
        gx, gy, _ = self._grad[cx + self._perm[cy]]
        return gx * dx + gy * dy

    def perlin_2d(self, x: float, y: float) -> float:
        """Return the noise value at ``(x, y)``."""
        cell_x = _floor_i32(x)
        cell_y = _floor_i32(y)
        fx = x - cell_x
        fy = y - cell_y
        cell_x &= 0xFF
        cell_y &= 0xFF

        bottom_left = self._corner(cell_x, cell_y, fx, fy)
        top_left = self._corner(cell_x, cell_y + 1, fx, fy - 1.0)
        bottom_right = self._corner(cell_x + 1, cell_y, fx - 1.0, fy)
        top_right = self._corner(cell_x + 1, cell_y + 1, fx - 1.0, fy - 1.0)

        weight_x = _smoothstep(fx)
        lower = _mix(bottom_left, bottom_right, weight_x)
        upper = _mix(top_left, top_right, weight_x)
        return _mix(lower, upper, _smoothstep(fy))