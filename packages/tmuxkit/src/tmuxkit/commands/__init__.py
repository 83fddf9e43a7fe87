"""tmuxkit commands."""

from .buffers import buffers
from .show import show
from .edit import set_buffer, save, delete
from .paste import paste

__all__ = ["buffers", "show", "set_buffer", "save", "delete", "paste"]
