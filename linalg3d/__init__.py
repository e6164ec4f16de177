"""Points, directions and dense matrices for engine math, plus a colour-fading demo window."""

__version__ = "1.0.0"
__all__ = ["point", "direction", "matrix", "square", "fader"]