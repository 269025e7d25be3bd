from .ids import generate_local_id, sequential_ids

__all__ = [
    "generate_local_id",
    "sequential_ids",
]
