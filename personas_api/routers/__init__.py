from . import personas

__all__ = ["personas"]
