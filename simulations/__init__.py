# simulations/__init__.py
"""
Monte Carlo simulations for the 100 prisoners riddle.

Run a comparison via:
    python -m simulations.compare --prisoners 100 --trials 1000000 --parallel
"""
