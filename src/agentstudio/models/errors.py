"""Error hierarchy and error response models."""

from pydantic import BaseModel, Field


class StudioError(Exception):
    """Base error for all Agentic Studio errors."""

    def __init__(self, message: str, component: str = "", details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.component = component
        self.details = details or {}


class ConfigurationError(StudioError):
    """Required configuration (API credentials) is missing."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, component="configuration", details=details)


class ValidationError(StudioError):
    """Malformed pipeline request."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, component="validation", details=details)


class ScriptGenerationError(StudioError):
    """The text service produced no narration draft."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, component="script", details=details)


class ScriptEnhancementError(StudioError):
    """The text service produced no enhanced narration."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, component="enhance", details=details)


class AssetGenerationError(StudioError):
    """Speech or image synthesis failed or returned an empty payload."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, component="video", details=details)


class VideoRenderError(StudioError):
    """Muxing the still image and narration into a video failed."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, component="video", details=details)


class PublishError(StudioError):
    """Uploading to the publishing service failed or returned no identifier."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, component="upload", details=details)


class ErrorResponse(BaseModel):
    """Standardized error response for API."""

    error_type: str = Field(..., description="Error category")
    component: str = Field(default="", description="Component that raised the error")
    message: str = Field(..., description="Human-readable error message")
    details: dict = Field(default_factory=dict)
    actionable_guidance: str = Field(default="", description="Suggested user action")

    @classmethod
    def from_exception(cls, exc: StudioError, guidance: str = "") -> "ErrorResponse":
        return cls(
            error_type=type(exc).__name__,
            component=exc.component,
            message=exc.message,
            details=exc.details,
            actionable_guidance=guidance,
        )
