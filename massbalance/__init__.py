# Mass Balance Puzzle
# Twelve masses, one odd, three weighings

"""
Core invariant: exactly one of the twelve masses is odd, and a mass
confirmed normal never reverts to unknown.

This package implements the weighing-and-deduction engine behind the
puzzle: the mass registry, the balance rule, and the manual, automatic
and iterative solving procedures.
"""
