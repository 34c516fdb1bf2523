# data/style_stats.py

STYLE_STATS = {
    "wall": {
        "color": (255, 255, 255),
        "width": 1,
    },
    "drag": {
        "color": (255, 0, 0),
        "width": 1,
    },
    "emitter": {
        "color": (255, 255, 255),
        "radius": 2,
        "ray_color": (255, 255, 255),
        "ray_length": 10,
    },
    "light": {
        "color": (200, 200, 200),
        "width": 1,
    },
    "hud": {
        "text_color": (180, 180, 180),
        "font_size": 20,
        "bg_color": (0, 0, 0, 140),
    },
}
