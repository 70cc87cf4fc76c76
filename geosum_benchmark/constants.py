from __future__ import annotations

# Number of harness runs per method in one comparison. The per-run averages are
# averaged again to produce the single number reported for each method.
NUM_RUNS = 5

# Calls made before timing starts in each run; their durations are discarded.
WARM_UP_RUNS = 1000

# Timed calls per run. The run result is the mean duration of these calls.
ITERATIONS = 100000

# A ratio closer to 1.0 than this takes the `a * n` branch of the closed form,
# so the formula never divides by a value near zero.
EPSILON = 1e-10

# Relative tolerance used when checking that the three sums agree.
TOLERANCE = 1e-6

# Largest accepted term count. The recursive sum needs one stack frame per term.
MAX_TERMS = 10000
