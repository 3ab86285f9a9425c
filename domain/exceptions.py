from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when settings loaded from the environment are invalid."""
