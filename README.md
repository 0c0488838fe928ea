# viprecon

Small numerical helpers for PET and Compton camera studies: ray/box and
line/sphere geometry, Compton kinematics, the conic cut of a Compton
cone by a z slice, simple attenuating shapes, conversion of CT g4dcm
phantoms to attenuation maps, and synthetic Poisson event times.

Pure Python, no runtime dependencies, Python 3.10 or later.

## Installation

```
pip install .
```

Tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `viprecon.raytrace` | `ray_box_intersection` (enter/exit factors of a segment through a box, or `None`), `next_ray_intersection`, `is_inside_bounds`, `intersection_distance` (length of a line inside a sphere, or `None`), `gauss`, `random_solid_angle`, `random_position_on_solid_angle`, `pseudo_solid_angle_probability`, `distance` |
| `viprecon.compton` | `compton_angle_degrees`, `compton_energy_from_angle_rad`, `geom_angle_degrees`, `position_angle_2d`, `min_abs_difference_two_angles_rad`; `MASS_ELECTRON_KEV` |
| `viprecon.ellipse` | `EllipsParameters` and `calculate_ellips_factors` for the conic where a cone crosses `z = slice_z`; `additional_parameters` fills in centre and semi-axes |
| `viprecon.shapes` | `AttenuationGeometry` (sphere, box, disk, nested and half shapes, chosen with `GeometryType` and `Orientation`) with `mu_at(x, y, z)`; `is_in_sphere`, `is_in_disk`, `is_in_box`; `threshold_attenuation`; `MU_WATER` |
| `viprecon.g4dcm` | `flip_g4dcm` (turn every slice upside down along y), `parse_attenuation_conf`, `attenuation_from_g4dcm` returning a `G4dcmAttenuation`, `is_even` |
| `viprecon.poisson` | `next_time` (exponential waiting time) and `generate_events`, which yields `(trial, chip, timestamp)` records for two interleaved chips |
| `viprecon.cli` | The `viprecon` command |

Energies in `viprecon.compton` are in keV. Points and vectors are any
sequences of three floats. Functions that draw random numbers take an
optional `random.Random` so results can be reproduced.

## Examples

```python
import random

from viprecon.compton import compton_angle_degrees
from viprecon.raytrace import ray_box_intersection
from viprecon.shapes import AttenuationGeometry, GeometryType
from viprecon.poisson import generate_events

angle = compton_angle_degrees(100.0, 511.0)          # degrees, or None

# segment from (-2, .5, .5) to (2, .5, .5) through the unit cube
enter, leave = ray_box_intersection((-2, 0.5, 0.5), (4, 0, 0), (0, 0, 0), (1, 1, 1))
# (0.5, 0.75)

sphere = AttenuationGeometry(GeometryType.SPHERE, radius=50.0)
mu = sphere.mu_at(0.0, 0.0, 10.0)                    # 0.00968 (water)

events = list(generate_events(2341.0, ntrials=1000, rng=random.Random(1)))
```

`flip_g4dcm(text, is_ct)` and `attenuation_from_g4dcm(text, coefficients,
z_slices, z_size)` work on the file contents as a string; reading and
writing the files is left to the caller.

## Command line

```
viprecon dot [--debug]
viprecon compton
```

Both read whitespace-separated numbers from standard input.

- `viprecon dot` reads two 3-vectors and prints their dot product and the
  angle between them in radians, multiples of pi and degrees, plus the
  supplementary angle. `--debug` (or `-debug`) also prints the lengths
  and the cosine.
- `viprecon compton` reads the total gamma energy in keV (zero or
  negative means 511), then deposited energies E1 until input ends or a
  value of zero or less is given, printing the Compton angle for each or
  an error line when E1 gives no physical angle.

Invalid input is reported on standard error with exit status 1.

## What it does not do

The package has no general vector or matrix classes, no quadratic-solver
or cone-edge intersection routines for marching a Compton cone through a
voxel grid, and no field-of-view or voxel-image type: it does not read or
write binary reconstruction images. `generate_events` yields records
rather than writing a list-mode file, and there is no tool for
processing coincidence lists into attenuation-corrected output.