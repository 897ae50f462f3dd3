"""Application services exposed to interface adapters."""

from .feedback_design import FeedbackDesignService, ValidationFailedError
from .template_renderer import TemplateRenderer

__all__ = [
    "FeedbackDesignService",
    "TemplateRenderer",
    "ValidationFailedError",
]
