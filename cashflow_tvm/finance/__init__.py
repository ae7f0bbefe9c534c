"""Time-value-of-money numerics: periods, discounting, IRR, NPV/FV, payback."""
