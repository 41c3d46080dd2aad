from typing import Protocol


class IPasswordResetNotifier(Protocol):
    async def send_password_reset(self, email: str, reset_token: str) -> None: ...
