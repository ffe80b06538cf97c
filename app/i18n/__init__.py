from .core import load_lang, t

__all__ = ["load_lang", "t"]
