from .num_utils import (
    is_number,
    is_close_to_int,
    constrain,
    euclidean_modulo,
    normalize,
    map_range,
    segment_map,
    cubic_bezier,
    parabola,
    round_half_up,
    round_float,
    precision_for_range,
)
