"""Dense vectors, matrices and linear system solvers in pure Python."""

__version__ = "0.1.0"
__all__ = ["vector", "matrix", "linear_system"]