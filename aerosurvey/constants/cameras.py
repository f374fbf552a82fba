# aerosurvey/constants/cameras.py
"""
Camera presets for common survey drones. Sensor and focal dimensions in mm,
image dimensions in pixels. Focal lengths are the actual (not 35mm-equivalent)
values.
"""
from typing import Dict, List


class CameraPresets:
    """Known drone camera specifications, keyed by display name."""

    DEFAULT = "DJI Mini 4 Pro"

    PRESETS: Dict[str, Dict[str, float]] = {
        # 1/1.3-inch CMOS, 24mm equivalent, 4:3 12MP mode
        "DJI Mini 4 Pro": {
            "sensor_width": 9.83, "sensor_height": 7.37, "focal_length": 6.72,
            "image_width": 4000, "image_height": 3000,
        },
        # 4/3 CMOS, 24mm equivalent, 4:3 20MP mode
        "DJI Mavic 3 / 3E": {
            "sensor_width": 17.3, "sensor_height": 13.0, "focal_length": 12.29,
            "image_width": 5280, "image_height": 3956,
        },
        # 1-inch CMOS, 24mm equivalent, 3:2 20MP mode
        "DJI Phantom 4 RTK": {
            "sensor_width": 13.2, "sensor_height": 8.8, "focal_length": 8.8,
            "image_width": 5472, "image_height": 3648,
        },
        # Full-frame with 35mm lens, 3:2 45MP mode
        "DJI M300 + P1 (35mm)": {
            "sensor_width": 35.9, "sensor_height": 24.0, "focal_length": 35.0,
            "image_width": 8192, "image_height": 5460,
        },
        # 1/1.8-inch CMOS, 4:3 64MP mode
        "Skydio X10 (Wide)": {
            "sensor_width": 7.06, "sensor_height": 5.3, "focal_length": 4.35,
            "image_width": 9248, "image_height": 6944,
        },
    }

    @classmethod
    def names(cls) -> List[str]:
        return list(cls.PRESETS)

    @classmethod
    def get(cls, name: str) -> Dict[str, float]:
        try:
            return dict(cls.PRESETS[name])
        except KeyError:
            raise KeyError(f"Unknown camera preset '{name}'. Known presets: {', '.join(cls.PRESETS)}") from None
