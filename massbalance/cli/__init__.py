# CLI package for the Mass Balance Puzzle
"""
Interactive command line for playing the puzzle locally.

Commands:
    massbalance play       — Interactive menu with restart loop
    massbalance manual     — Solve by hand in three weighings
    massbalance auto       — Let the decision tree solve it
    massbalance iterative  — Narrow down by confirming groups
"""
