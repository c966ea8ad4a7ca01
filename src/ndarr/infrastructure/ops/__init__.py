"""
NumPy CPU kernels.

Kernels operate on flat row-major buffers plus dimension tuples and always
return freshly allocated buffers. Argument validation is done by callers.
"""
