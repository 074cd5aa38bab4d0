class AccessDeniedError(PermissionError):
    """Действие запрещено политикой доступа к документу"""

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message
