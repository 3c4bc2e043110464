"""
Error types raised by the math primitives.
"""

from decimal import Decimal


class FixedPointMathError(Exception):
    """Base class for all fixed point math errors"""
    pass


class InvalidArgument(FixedPointMathError, ValueError):
    """An argument violated a documented bound or precondition"""
    pass


class RootConvergenceError(FixedPointMathError, ArithmeticError):
    """Newton-Raphson iteration did not converge within the iteration cap"""

    def __init__(self, n: int, a: Decimal, last_guess: Decimal, iterations: int):
        self.n = n
        self.a = a
        self.last_guess = last_guess
        self.iterations = iterations
        super().__init__(
            f"nth root (n={n}) of {a} did not converge after {iterations} iterations, "
            f"last guess {last_guess}"
        )
