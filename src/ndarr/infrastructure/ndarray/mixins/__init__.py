"""
Operation-family mixins composed into `NdArray`.

Each subpackage contributes one family of methods (arithmetic, unary math,
comparison, structural transforms, row/column indexing, reductions, matrix
products). Mixins build results through ``type(self)._wrap`` and never
import the concrete array class.
"""
