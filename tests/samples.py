# Reference colors in default registry units: r, g, b in [0, 255],
# h in [0, 360), s and l in [0, 100].

samples_rgb_hsl = {
    (255, 0, 0): (0, 100, 50),
    (0, 255, 0): (120, 100, 50),
    (0, 0, 255): (240, 100, 50),
    (255, 255, 0): (60, 100, 50),
    (0, 255, 255): (180, 100, 50),
    (255, 0, 255): (300, 100, 50),
    (255, 255, 255): (0, 0, 100),
    (0, 0, 0): (0, 0, 0),
    (128, 128, 128): (0, 0, 50.196),
    (255, 128, 0): (30.118, 100, 50),
    (128, 0, 0): (0, 100, 25.098),
    (255, 127, 127): (0, 100, 74.902),
    (64, 191, 64): (120, 49.804, 50),
    (51, 102, 153): (210, 50, 40),
}

samples_rgb_hex = {
    (255, 0, 0): "#ff0000",
    (0, 255, 0): "#00ff00",
    (0, 0, 255): "#0000ff",
    (255, 255, 255): "#ffffff",
    (0, 0, 0): "#000000",
    (18, 52, 86): "#123456",
    (171, 205, 239): "#abcdef",
}

samples_short_hex = {
    "#f00": (255, 0, 0),
    "#0f0": (0, 255, 0),
    "#00f": (0, 0, 255),
    "#abc": (170, 187, 204),
    "#FFF": (255, 255, 255),
}
