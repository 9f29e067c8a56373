"""Form loading and submission exports."""

from .form_contracts import LoadOutcome, SubmissionOutcome
from .load_orchestration import FormLoader
from .loader_factory import build_form_loader
from .submission import nest_values, submit_form

__all__ = [
    "LoadOutcome",
    "SubmissionOutcome",
    "FormLoader",
    "build_form_loader",
    "nest_values",
    "submit_form",
]
