"""
Kernel layer.

Deterministic, integer-only pricing kernels used by the engine in
`pumpcurve.core`. Kernels are pure functions over immutable state.
"""
