from ._shape import Shape, as_shape

__all__ = [
    Shape.__name__,
    as_shape.__name__,
]
