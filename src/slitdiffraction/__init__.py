"""Fraunhofer single/double-slit diffraction explorer."""
