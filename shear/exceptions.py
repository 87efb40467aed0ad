"""Custom exceptions for shear"""

class ShearError(Exception):
    """Base exception for all shear errors"""
    def __init__(self, message: str, module: str = None):
        self.message = message
        self.module = module or "unknown"
        super().__init__(f"[{self.module}] {self.message}")

class InvalidInputError(ShearError):
    """Boundary list, frame count or scene limit violates its preconditions"""
    def __init__(self, message: str, module: str = None):
        super().__init__(f"Invalid input: {message}", module)

class WriteError(ShearError):
    """Scene file could not be written"""
    def __init__(self, message: str, path=None, module: str = None):
        self.path = path
        super().__init__(f"Write error: {message}", module)

class DetectionError(ShearError):
    """Scene detection could not open or decode the input"""
    def __init__(self, message: str, module: str = None):
        super().__init__(f"Detection error: {message}", module)

class ConfigurationError(ShearError):
    """Error in configuration/setup"""
