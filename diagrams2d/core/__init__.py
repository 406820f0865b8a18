"""Angles, vectors, directions, points and affine transformations."""
