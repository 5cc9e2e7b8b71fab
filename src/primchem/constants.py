"""Physical constants used by the rate fits."""

# Boltzmann constant expressed as kelvin per electronvolt.
K_PER_EV = 11608.696

# Reference temperature for the T4 = T / 10^4 K scaling (K).
T4_SCALE = 1.0e4
