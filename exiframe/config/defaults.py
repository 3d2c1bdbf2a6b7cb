"""Default configuration values for ExiFrame."""

from pathlib import Path

# Default configuration dictionary
DEFAULT_CONFIG = {
    # Framed image layout
    "frame": {
        "show_focal_length_in_35mm_film": False,
        "margin": 16,
        "background_color": "white",
        "text_color": "black",
        "font_path": "",  # Empty uses Pillow's built-in font
        "font_size": 14,
        "line_spacing": 4,
        "max_image_width": 1080,
        "placeholder_size": 320,
        "placeholder_color": "black",
        "output_format": "PNG",
    },

    # Photo selection session
    "session": {
        "max_workers": 2,
    },

    # Web API server
    "web": {
        "host": "127.0.0.1",
        "port": 5050,
        "max_upload_mb": 50,
    },

    # Logging Configuration
    "logging": {
        "level": "INFO",
        "file": str(Path.home() / ".exiframe" / "exiframe.log"),
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    },
}

# Frame settings that must be non-negative / positive integers
NON_NEGATIVE_FIELDS = [
    "frame.margin",
    "frame.line_spacing",
]

POSITIVE_FIELDS = [
    "frame.font_size",
    "frame.max_image_width",
    "frame.placeholder_size",
    "session.max_workers",
    "web.port",
]
