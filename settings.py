import os

# --- WINDOW & ASSETS ---
WINDOW_TITLE = "Schack med gulliga svampar"
RESOURCE_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "res")
ICON_FILE = "icon.png"
FPS = 60

# Sprites are 32px pixel art, scaled up to the tile size
SPRITE_BASE_SIZE = 32

# --- CLICK MODES ---
# cancel: clicking a non-candidate square drops the selection
# reselect: clicking a non-candidate square tries to select it instead
CLICK_MODE_CANCEL = "cancel"
CLICK_MODE_RESELECT = "reselect"

# --- LAYOUT PROFILES ---
PROFILE_BORDERED = {
    "name": "bordered",
    "grid_size": 10,
    "tile_size": 128,
    "margin": 1,
    "flipped": False,  # rank 1 on the top row
    "shadow": True,
    "piece_lift": 14,
    "click_mode": CLICK_MODE_RESELECT,
    "status_bar": 0,  # status line sits in the top margin
    "bg_main": (69, 51, 61),
    "tile_dark": (188, 140, 76),
    "tile_light": (228, 196, 108),
    "highlight": (230, 200, 50, 128),
    "status_text": (255, 242, 217),
    "status_box": (69, 51, 61),
}

PROFILE_PLAIN = {
    "name": "plain",
    "grid_size": 8,
    "tile_size": 80,
    "margin": 0,
    "flipped": True,  # rank 1 on the bottom row
    "shadow": False,
    "piece_lift": 0,
    "click_mode": CLICK_MODE_CANCEL,
    "status_bar": 40,  # strip below the board for the status line
    "bg_main": (30, 30, 30),
    "tile_dark": (181, 136, 99),
    "tile_light": (240, 217, 181),
    "highlight": (106, 190, 48, 128),
    "status_text": (40, 40, 40),
    "status_box": (255, 255, 255),
}

PROFILES = {p["name"]: p for p in (PROFILE_BORDERED, PROFILE_PLAIN)}
DEFAULT_PROFILE = PROFILE_BORDERED["name"]


def get_profile(name):
    try:
        return PROFILES[name]
    except KeyError:
        raise KeyError(f"Unknown profile {name!r}, expected one of {sorted(PROFILES)}") from None


def screen_size(profile):
    side = profile["grid_size"] * profile["tile_size"]
    return side, side + profile["status_bar"]
