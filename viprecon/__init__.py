"""Ray geometry, Compton kinematics, cone slicing, attenuation shapes, g4dcm conversion and Poisson event times."""

__version__ = "0.1.0"

__all__ = [
    "raytrace",
    "compton",
    "ellipse",
    "shapes",
    "poisson",
    "g4dcm",
    "cli",
]