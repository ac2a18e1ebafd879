# materials/material.py
from typing import Optional

class Material:
    """
    Base material. The intersection code only passes materials through by
    reference; shading lives elsewhere and subclasses this.
    """
    def __init__(self, name: Optional[str] = None):
        self.name = name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


# Shared by every primitive built without an explicit material.
DEFAULT_MATERIAL = Material("default")
