"""Interactive calculators for vector angles and Compton scattering angles."""

from __future__ import annotations

import argparse
import math
import sys
from typing import Iterable, Iterator, Sequence, TextIO

from viprecon.compton import MASS_ELECTRON_KEV, compton_angle_degrees


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_number(tokens: Iterator[str]) -> float | None:
    token = next(tokens, None)
    if token is None:
        return None
    try:
        return float(token)
    except ValueError:
        raise ValueError(f"not a number: {token!r}") from None


def _read_vector(tokens: Iterator[str]) -> tuple[float, float, float]:
    values = []
    for _ in range(3):
        value = _next_number(tokens)
        if value is None:
            raise ValueError("input ended before three coordinates were read")
        values.append(value)
    return values[0], values[1], values[2]


def _format_vector(vector: Sequence[float]) -> str:
    return "({:g}, {:g}, {:g})".format(*vector)


def _run_dot(tokens: Iterator[str], out: TextIO, debug: bool) -> int:
    print("Give 1st vector coordinates: ", file=out)
    v1 = _read_vector(tokens)
    print(f"1st vector: {_format_vector(v1)}", file=out)
    print("Give 2nd vector coordinates: ", file=out)
    v2 = _read_vector(tokens)
    print(f"2nd vector: {_format_vector(v2)}", file=out)

    dot = sum(a * b for a, b in zip(v1, v2))
    len1 = math.sqrt(sum(a * a for a in v1))
    len2 = math.sqrt(sum(b * b for b in v2))
    if len1 == 0 or len2 == 0:
        raise ValueError("the angle of a zero-length vector is undefined")
    cosine = dot / (len1 * len2)
    angle = math.acos(max(-1.0, min(1.0, cosine)))
    degrees = math.degrees(angle)
    print(
        f"v1*v2: {dot:g} angle: {angle:g} radians = {angle / math.pi:g}pi = "
        f"{degrees:g} degrees = {180.0 - degrees:g} degrees",
        file=out,
    )
    if debug:
        print(
            f" |v1|: {len1:g} |v2|: {len2:g} |v1|*|v2|: {len1 * len2:g}"
            f" v1*v2/(|v1|*|v2|): {cosine:g} acos...: {angle:g}",
            file=out,
        )
    return 0


def _run_compton(tokens: Iterator[str], out: TextIO) -> int:
    print("Total energy of gamma (< 0 = 511)", file=out)
    total = _next_number(tokens)
    source = total if total is not None and total > 0 else MASS_ELECTRON_KEV
    while True:
        print("Give Energy E1 (< 0 = stop)", file=out)
        e1 = _next_number(tokens)
        if e1 is None or e1 <= 0:
            return 0
        angle = compton_angle_degrees(e1, source)
        if angle is None:
            print(f"ERROR: invalid E1: {e1:g}", file=out)
            continue
        print(f"Angle: {math.radians(angle):g} rad = {angle:g} degrees", file=out)


def main(argv: Sequence[str] | None = None) -> int:
    """Run a calculator reading its numbers from standard input."""
    parser = argparse.ArgumentParser(prog="viprecon")
    commands = parser.add_subparsers(dest="command", required=True)
    dot = commands.add_parser("dot", help="dot product and angle of two 3-vectors")
    dot.add_argument("-debug", "--debug", action="store_true", help="print intermediate values")
    commands.add_parser("compton", help="Compton angle for deposited energies in keV")
    args = parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    try:
        if args.command == "dot":
            return _run_dot(tokens, sys.stdout, args.debug)
        return _run_compton(tokens, sys.stdout)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())