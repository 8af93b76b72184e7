# renderer/tone_mapping.py
import math

import numpy as np
from numba import njit


@njit
def quantize(linear_image):
    """
    Convert a (height, width, 3) float image to 8 bits per channel:
    each channel is scaled by 255, floored and clamped to [0, 255].
    """
    height, width, channels = linear_image.shape
    output = np.empty((height, width, channels), dtype=np.uint8)
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                v = math.floor(linear_image[y, x, c] * 255.0)
                output[y, x, c] = min(255, max(0, v))
    return output
