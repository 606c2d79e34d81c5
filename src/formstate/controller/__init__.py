"""Controller layer: mediates between UI events and the form state model.

This package contains:
- submission: SubmissionController for the submit lifecycle
- binding: BindingFactory producing per-field FieldBinding descriptors
- form: FormController composing everything into one facade
"""

from formstate.controller.binding import BindingFactory, FieldBinding
from formstate.controller.form import Controllers, FieldHandlers, FieldStates, FormController
from formstate.controller.submission import SubmissionController, SubmitCallback

__all__ = [
    # Facade
    "FormController",
    "Controllers",
    "FieldHandlers",
    "FieldStates",
    # Parts
    "BindingFactory",
    "FieldBinding",
    "SubmissionController",
    "SubmitCallback",
]
