from .user import Principal

__all__ = ["Principal"]
