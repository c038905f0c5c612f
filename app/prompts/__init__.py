from .builder import build_prompt, first_name

__all__ = ["build_prompt", "first_name"]
