from .hit_test_mixin import HitTestMixin

__all__ = ["HitTestMixin"]
