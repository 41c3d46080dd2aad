from .notifications import IPasswordResetNotifier

__all__ = ["IPasswordResetNotifier"]
