"""Point algebra, cube rotations, frames and scanner fingerprints."""
