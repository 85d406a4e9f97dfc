"""Constants shared across the bigdecimal package."""

# Largest scale accepted from callers (explicit scales, natural scale of
# parsed text, round/set_scale targets). Padding to it builds a power of ten
# with a million digits, which still completes promptly. Arithmetic results
# are not limited: multiply/divide/pow may grow the scale past it.
MAX_SCALE = 1_000_000

# Largest decimal point shift to the right accepted from text such as
# "1E1000000". Larger shifts would build a power of ten that never completes.
MAX_EXPONENT = 1_000_000

# Defaults for BigDecimal.round() (integer rounding)
DEFAULT_ROUND_SCALE = 0
