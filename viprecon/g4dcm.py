"""Reading and transforming voxelised g4dcm phantom files."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

PER_CM_TO_PER_MM = 0.1
_CT_HEADER_LINES = 5
_CT_VALUES_PER_LINE = 8


class _Tokens:
    """Whitespace separated tokens read in order, with typed access."""

    def __init__(self, text: str) -> None:
        self._tokens: Iterator[str] = iter(text.split())

    def word(self, what: str) -> str:
        token = next(self._tokens, None)
        if token is None:
            raise ValueError(f"unexpected end of data while reading {what}")
        return token

    def integer(self, what: str) -> int:
        token = self.word(what)
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer for {what}, got {token!r}") from None

    def number(self, what: str) -> float:
        token = self.word(what)
        try:
            return float(token)
        except ValueError:
            raise ValueError(f"expected a number for {what}, got {token!r}") from None


def _read_grid_header(tokens: _Tokens) -> tuple[tuple[int, int, int], list[tuple[float, float]]]:
    shape = tuple(tokens.integer(f"number of bins {axis}") for axis in "XYZ")
    if any(n < 0 for n in shape):
        raise ValueError(f"negative number of bins: {shape}")
    ranges = [(tokens.number(f"min{axis}"), tokens.number(f"max{axis}")) for axis in "XYZ"]
    return shape, ranges  # type: ignore[return-value]


def flip_g4dcm(text: str, is_ct: bool) -> str:
    """Return the g4dcm file with every slice turned upside down along y.

    A CT file keeps its five header lines verbatim and holds a material-id
    block before the density block; its densities are written eight per
    line. A PET file holds one activity block written one row per line.
    """
    pieces: list[str] = []
    if is_ct:
        lines = text.splitlines()
        if len(lines) < _CT_HEADER_LINES:
            raise ValueError("a CT file needs its five header lines")
        pieces.extend(f"{line}\n" for line in lines[:_CT_HEADER_LINES])
        body = "\n".join(lines[_CT_HEADER_LINES:])
    else:
        body = text

    tokens = _Tokens(body)
    (nx, ny, nz), ranges = _read_grid_header(tokens)
    pieces.append(f"{nx} {ny} {nz}\n")
    pieces.extend(f"{low:g} {high:g}\n" for low, high in ranges)

    if is_ct:
        for _ in range(nz):
            grid = [[tokens.integer("material id") for _ in range(nx)] for _ in range(ny)]
            for row in reversed(grid):
                pieces.append("".join(f"{value} " for value in row))
                pieces.append("\n")

    for _ in range(nz):
        grid = [[tokens.number("voxel value") for _ in range(nx)] for _ in range(ny)]
        for row in reversed(grid):
            for ix, value in enumerate(row):
                pieces.append(f"{value:g} ")
                if is_ct and (ix + 1) % _CT_VALUES_PER_LINE == 0:
                    pieces.append("\n")
            if not is_ct:
                pieces.append("\n")
    return "".join(pieces)


def is_even(value: int) -> bool:
    """True for even integers."""
    return value % 2 == 0


def parse_attenuation_conf(text: str) -> list[float]:
    """Attenuation coefficients per gram from ``index name coefficient`` records."""
    tokens = text.split()
    if len(tokens) % 3:
        raise ValueError("attenuation records need an index, a name and a coefficient")
    coefficients = []
    for start in range(0, len(tokens), 3):
        index, name, value = tokens[start : start + 3]
        try:
            int(index)
            coefficients.append(float(value))
        except ValueError:
            raise ValueError(f"bad attenuation record: {index} {name} {value}") from None
    return coefficients


@dataclass
class G4dcmAttenuation:
    """An attenuation map in mm^-1 built from a CT g4dcm file.

    ``values`` is flat with x varying fastest, then y, then z.
    """

    materials: tuple[str, ...]
    shape: tuple[int, int, int]
    x_range: tuple[float, float]
    y_range: tuple[float, float]
    z_range: tuple[float, float]
    values: list[float]


def attenuation_from_g4dcm(
    text: str,
    attcoeff_pergram: Sequence[float],
    z_slices: int = 0,
    z_size: float = 0.0,
) -> G4dcmAttenuation:
    """Convert material ids and densities of a CT g4dcm file to attenuation.

    Each voxel gets ``density * coefficient[material] * 0.1``. When
    ``z_slices`` exceeds the file's slices and has the same parity, the
    image is padded with empty slices on both sides, centred on the
    original z range; ``z_size`` then sets the slice thickness if positive.
    """
    tokens = _Tokens(text)
    n_materials = tokens.integer("number of materials")
    if n_materials > len(attcoeff_pergram):
        raise ValueError(
            f"{n_materials} materials but only {len(attcoeff_pergram)} coefficients"
        )
    materials = []
    for idx in range(n_materials):
        index = tokens.integer("material index")
        name = tokens.word("material name")
        if index != idx:
            raise ValueError(f"material index {index} where {idx} was expected")
        materials.append(name)

    (nx, ny, nz), ranges = _read_grid_header(tokens)
    zmin, zmax = ranges[2]

    n_slices = z_slices
    half_padding = 0
    if nz > z_slices:
        n_slices = nz
    elif nz < z_slices:
        if is_even(nz) != is_even(z_slices):
            n_slices = nz
        else:
            bin_size = (zmax - zmin) / nz
            if z_size > 0.0:
                bin_size = z_size
            middle = zmin + (zmax - zmin) / 2.0
            zmin = middle - 0.5 * z_slices * bin_size
            zmax = middle + 0.5 * z_slices * bin_size
            half_padding = (z_slices - nz) // 2

    count = nx * ny * nz
    material_ids = [tokens.integer("material id") for _ in range(count)]
    values = [0.0] * (nx * ny * n_slices)
    offset = half_padding * nx * ny
    for position, material in enumerate(material_ids):
        density = tokens.number("density")
        if not 0 <= material < len(attcoeff_pergram):
            raise ValueError(f"unknown material id {material}")
        values[offset + position] = density * attcoeff_pergram[material] * PER_CM_TO_PER_MM

    return G4dcmAttenuation(
        materials=tuple(materials),
        shape=(nx, ny, n_slices),
        x_range=ranges[0],
        y_range=ranges[1],
        z_range=(zmin, zmax),
        values=values,
    )