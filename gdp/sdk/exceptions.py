class GDPError(Exception):
    """Base class for all GDP exceptions."""
    pass

class ValidationError(GDPError):
    """Base class for validation errors."""
    pass

class LocalPathError(ValidationError):
    """Raised when an input appears to be a local file path instead of a Drive ID."""
    pass

class InvalidItemIdError(ValidationError):
    """Raised when a Drive file or folder ID is malformed."""
    pass

class RegistryError(GDPError):
    """Raised when the tracked projects registry file cannot be read."""
    pass
