"""Shared numeric constants used across the cpifix package."""

g_small = 1e-12       #: Small epsilon value for numerical checks
g_fixing_tol = 1e-10  #: Relative tolerance for two fixings to be the same
