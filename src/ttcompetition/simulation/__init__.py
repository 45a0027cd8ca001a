from .tournaments import (
    draw_sample_groups,
    generate_sample_competitors,
    simulate_match,
    simulate_set,
    simulate_tournament,
)

__all__ = [
    'draw_sample_groups',
    'generate_sample_competitors',
    'simulate_match',
    'simulate_set',
    'simulate_tournament',
]
