"""
connectfour.interfaces - Front ends for Connect Four

Front ends own a GameEngine and render its state; the engine never
calls back into them.
"""

# Don't import anything here to keep the engine importable on its own
__all__ = []
