# renderer/tone_mapping.py
import numpy as np

TONE_MAP_METHODS = ("none", "reinhard", "auto")


def to_uint8(image: np.ndarray) -> np.ndarray:
    """
    Scales display-space values in [0, 1] to 8-bit, mapping 1.0 to 255.
    """
    return np.clip(np.nan_to_num(image) * 255.99, 0, 255).astype("uint8")


def gamma_correct(linear_image: np.ndarray, gamma: float = 2.0) -> np.ndarray:
    """
    Applies the display transfer function to a linear image, returning 8-bit values.
    """
    clipped = np.clip(np.nan_to_num(linear_image), 0.0, 1.0)
    return to_uint8(clipped ** (1.0 / gamma))


def reinhard_tone_mapping(accumulated, exposure=1.0, white_point=1.0, gamma=2.2):
    """
    Apply Reinhard tone mapping to a linear radiance image.
    """
    scaled = np.clip(np.nan_to_num(accumulated), 0.0, None) * exposure
    mapped = scaled / (1.0 + scaled / white_point)
    mapped = mapped ** (1.0 / gamma)
    return to_uint8(mapped)


def auto_exposure_tone_mapping(accumulated, gamma=2.2, target_midgray=0.18):
    """
    Compute an exposure value based on the average scene luminance and then
    apply Reinhard tone mapping.
    """
    # Compute per-pixel luminance using standard coefficients.
    luminance = 0.2126 * accumulated[:, :, 0] + 0.7152 * accumulated[:, :, 1] + 0.0722 * accumulated[:, :, 2]
    avg_lum = luminance.mean() + 1e-5  # avoid division by zero
    exposure = target_midgray / avg_lum
    return reinhard_tone_mapping(accumulated, exposure=exposure, white_point=1.0, gamma=gamma)


def process_image(linear_image: np.ndarray, tone_map: str = "none", gamma: float = 2.0) -> np.ndarray:
    """
    Converts a linear render to 8-bit display values with the given method.
    """
    if tone_map == "none":
        return gamma_correct(linear_image, gamma)
    if tone_map == "reinhard":
        return reinhard_tone_mapping(linear_image, gamma=gamma)
    if tone_map == "auto":
        return auto_exposure_tone_mapping(linear_image, gamma=gamma)
    raise ValueError(f"Unknown tone mapping {tone_map!r}, expected one of {TONE_MAP_METHODS}")
