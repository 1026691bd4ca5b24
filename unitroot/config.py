import os

# Backend used when none is passed explicitly: "numba" or "jax"
DEFAULT_BACKEND = os.environ.get("UNITROOT_BACKEND", "numba")

# Working precision used when the input is not already float32/float64
DEFAULT_DTYPE = os.environ.get("UNITROOT_DTYPE", "float64")

# The jax backend computes in float32 unless x64 mode is switched on
JAX_ENABLE_X64 = os.environ.get("UNITROOT_JAX_X64", "1").lower() not in ("0", "false", "no")

# A design column counts as collinear with the others when the unexplained part
# of its sum of squares is below this many machine epsilons per column
COLLINEARITY_ULPS = float(os.environ.get("UNITROOT_COLLINEARITY_ULPS", "64"))
