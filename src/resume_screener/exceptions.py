"""Custom exceptions for the resume screener.

Configuration and input errors fail fast before any candidate is scored.
The scoring engine itself does not raise for valid profiles and records.
"""

from __future__ import annotations


class ScreenerError(Exception):
    """Base exception for all screener errors."""

    pass


class ScoringProfileValidationError(ScreenerError):
    """Raised when a scoring profile breaks a structural invariant.

    This is a configuration error: it is raised when the profile is built or
    loaded, never while a candidate is being scored.
    """

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid scoring profile ({source}): {reason}")


class ScoringProfileFileNotFoundError(ScreenerError):
    """Raised when a scoring profile catalogue file does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Scoring profile catalogue not found: {path}")


class ScoringProfileSelectionError(ScreenerError):
    """Raised when a requested profile is not in the catalogue."""

    def __init__(self, name: str, available: tuple[str, ...]) -> None:
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown scoring profile '{name}'. Available profiles: {', '.join(available)}"
        )


class CandidateFileNotFoundError(ScreenerError):
    """Raised when a candidate records file does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Candidate records file not found: {path}")


class CandidateValidationError(ScreenerError):
    """Raised when candidate records fail validation at the input boundary."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid candidate records ({source}): {reason}")


class ConfigFileNotFoundError(ScreenerError):
    """Raised when a screener config file does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Config file not found: {path}")


class ConfigFileParseError(ScreenerError):
    """Raised when a screener config file is not valid TOML."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"Config file could not be parsed ({path}): {detail}")


class ConfigFileValidationError(ScreenerError):
    """Raised when a screener config file has invalid values."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"Config file is invalid ({path}): {detail}")


class ScreenerConfigMissingError(ScreenerError):
    """Raised when a use case is invoked without a loaded config."""

    def __init__(self) -> None:
        super().__init__(
            "ScreenerConfig is required. Load it once at the entry point with "
            "ScreenerConfig.from_env() and pass it through."
        )
