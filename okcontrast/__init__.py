__all__ = (
    # Hex colors
    'is_valid_hex',
    'normalize_hex',
    'parse_hex_input',
    'format_hex',
    # Contrast ratio and thresholds
    'contrast_ratio',
    'evaluate',
    'target_ratio',
    'build_result',
    # Nearest accessible color
    'find_nearest_accessible',
    'suggestions_for_color',
    # Contrast matrix
    'build_matrix',
    'lookup',
    'summarize',
    'failing_pairs',
    # Types
    'ColorEntry',
    'ContrastResult',
    'ContrastSummary',
    'Evaluation',
    'TargetLevel',
)

from .hexcolor import (
    is_valid_hex,
    normalize_hex,
    parse_hex_input,
    format_hex,
)

from .contrast import (
    contrast_ratio,
    evaluate,
    target_ratio,
    build_result,
)

from .suggestion import (
    find_nearest_accessible,
    suggestions_for_color,
)

from .matrix import (
    build_matrix,
    lookup,
    summarize,
    failing_pairs,
)

from .spec import (
    ColorEntry,
    ContrastResult,
    ContrastSummary,
    Evaluation,
    TargetLevel,
)
