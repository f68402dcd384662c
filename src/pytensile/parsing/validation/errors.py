from typing import List


class ConfigurationError(ValueError):
    """Base exception for specimen configuration errors."""
    pass


class UnknownFieldError(ConfigurationError):
    """Exception for unrecognised configuration fields."""

    def __init__(self, section: str, fields: List[str], suggestions: dict = None):
        self.section = section
        self.fields = fields
        self.suggestions = suggestions or {}
        message = f"Unknown field(s) in '{section}':"
        for field in fields:
            matches = self.suggestions.get(field)
            suggestion = f" (did you mean '{matches[0]}'?)" if matches else ""
            message += f"\n -> '{field}'{suggestion}"
        super().__init__(message)
