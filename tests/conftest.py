# tests/conftest.py
import os
import sys

# Ensure project root is importable (so core.* / viz.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pytest

@pytest.fixture
def cfg():
    from config import AppConfig
    return AppConfig(seed=1234)

@pytest.fixture
def snake_factory():
    from core.snake_rules import Snake
    from core.geometry import UP
    def make(body=((1, 10), (1, 11), (1, 12)), direction=UP, **kwargs):
        return Snake(body, direction, **kwargs)
    return make

@pytest.fixture
def surface(cfg):
    from viz.renderer_headless import HeadlessSurface
    return HeadlessSurface(cfg.grid_w, cfg.grid_h)
