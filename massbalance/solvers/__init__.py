# Solvers package for the Mass Balance Puzzle
"""
Solving procedures for the twelve masses puzzle.

Manual loop, fixed decision tree, and the iterative deduction variant.
Each solver owns the registry it is handed for one session.
"""
