from .dot import to_dot, write_dot

__all__ = ["to_dot", "write_dot"]
