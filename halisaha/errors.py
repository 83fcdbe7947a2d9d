"""Custom exception classes for the application."""


class AppError(Exception):
    """Base application error class."""

    def __init__(self, message, status_code=400):
        """Initialize the error."""
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class ValidationError(AppError):
    """Raised when user input fails validation."""

    def __init__(self, message="Geçersiz form verisi"):
        """Initialize the error."""
        super().__init__(message, 400)


class UnauthorizedError(AppError):
    """Raised when a route needs a session and there is none."""

    def __init__(self, message="Oturum açmanız gerekiyor"):
        """Initialize the error."""
        super().__init__(message, 401)


class NotFoundError(AppError):
    """Raised when a resource is not found."""

    def __init__(self, message="Kayıt bulunamadı"):
        """Initialize the error."""
        super().__init__(message, 404)


class DuplicateResourceError(AppError):
    """Raised when trying to create a resource that already exists."""

    def __init__(self, message="Kayıt zaten mevcut"):
        """Initialize the error."""
        super().__init__(message, 409)


class DuplicateUsernameError(DuplicateResourceError):
    """Raised when a username is already registered."""

    def __init__(self, message="Bu kullanıcı adı zaten kullanılıyor"):
        """Initialize the error."""
        super().__init__(message)


class PersistenceError(AppError):
    """Raised when a collection cannot be written to disk."""

    def __init__(self, message="Kayıt işlemi başarısız oldu"):
        """Initialize the error."""
        super().__init__(message, 500)
