"""
Configuration & Global Constants
================================
This module serves as the central registry for the numeric constants shared
by the model and the view.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (sample count, domain extent,
   unit factors) from being scattered throughout the code.
2. Consistency: The model and the GUI agree on the same sample domain and the
   same wavelength unit contract.

Exports:
    SAMPLE_COUNT (int): Number of screen positions sampled by the model.
    DOMAIN_HALF_WIDTH (float): Half width of the sampled screen domain.
    NM_PER_MODEL_UNIT (float): Factor between nanometres and model units (mm).
"""
# Sample domain (model length units, i.e. millimetres)
SAMPLE_COUNT: int = 1501
SAMPLE_SCALE: float = 1000.0
DOMAIN_HALF_WIDTH: float = SAMPLE_COUNT / SAMPLE_SCALE

# |beta| below this is treated as the removable singularity of sin(beta)/beta
BETA_EPSILON: float = 1e-12

# The GUI takes the wavelength in nm, the model stores it in mm
NM_PER_MODEL_UNIT: float = 1e6

# 8-bit colour channel
COLOR_CHANNEL_MAX: float = 255.0

# Application
VISIBLE_APP_NAME: str = "Slit Diffraction"
DEFAULT_WINDOW_SIZE: tuple[int, int] = (1200, 800)
PEAK_DISTANCE_FORMAT: str = "Diffraction Peak Distance: {:.6f}"
