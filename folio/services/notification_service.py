from ..core.logger import logger


class LoggingPasswordResetNotifier:
    """Default notifier: no email transport is wired, so the request is only logged."""

    async def send_password_reset(self, email: str, reset_token: str) -> None:
        logger.info(f"Password reset requested for {email}; no email transport configured")
