import sys, os

# Headless pygame and project root on path for test imports
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from tests.helpers import ScriptedRandom, fill_row

__all__ = [
    "ScriptedRandom",
    "fill_row",
]
