from ._indexing import (
    broadcast_shapes,
    compute_strides,
    flat_to_multi_index,
    split_at_axis,
    to_index_list,
    validate_axis,
    validate_multi_index,
)

__all__ = [
    broadcast_shapes.__name__,
    compute_strides.__name__,
    flat_to_multi_index.__name__,
    split_at_axis.__name__,
    to_index_list.__name__,
    validate_axis.__name__,
    validate_multi_index.__name__,
]
