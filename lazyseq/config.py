from dataclasses import dataclass


@dataclass
class LazySeqConfig:
    """configuration for rendering lazy lists"""
    render_limit: int = 250  # elements shown before an infinite list is cut off
    ellipsis: str = '...'

    def __post_init__(self):
        if self.render_limit < 0:
            raise ValueError("render_limit must be non-negative")


config = LazySeqConfig()
