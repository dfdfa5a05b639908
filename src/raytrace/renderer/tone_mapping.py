# renderer/tone_mapping.py
import numpy as np
from numba import njit


@njit(cache=True)
def quantize_kernel(sums, samples, inv_gamma, output):
    """
    Average, gamma-correct, clamp to [0, 0.999] and truncate to 8 bits.
    Negative and NaN channels map to 0.
    """
    for i in range(sums.shape[0]):
        for c in range(3):
            value = sums[i, c] / samples
            if value > 0.0:
                if inv_gamma != 1.0:
                    value = value ** inv_gamma
                if value > 0.999:
                    value = 0.999
            else:
                value = 0.0
            output[i * 3 + c] = int(255.0 * value)


def to_rgb8(sums, samples: int, gamma: float = 1.0) -> np.ndarray:
    """
    Convert a buffer of per-pixel color sums, shape (n, 3), into a flat
    uint8 array of n*3 interleaved RGB bytes.
    """
    sums = np.ascontiguousarray(sums, dtype=np.float64).reshape(-1, 3)
    output = np.empty(sums.shape[0] * 3, dtype=np.uint8)
    quantize_kernel(sums, float(samples), 1.0 / gamma, output)
    return output
