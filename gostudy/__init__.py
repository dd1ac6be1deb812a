"""Algorithm exercises: base conversion, number basics, Big O examples, simple sorts and a GCD command."""

__version__ = "0.1.0"
__all__ = ["basics", "conversion", "gcd_demo", "bigo", "sorting"]