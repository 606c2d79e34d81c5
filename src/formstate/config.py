"""Configuration options for form controllers."""

from dataclasses import dataclass
from enum import Enum


class SubmitPolicy(Enum):
    """What to do with a submit started while another one is in flight."""

    IGNORE = "ignore"  # Drop the new submit, the running one decides the status
    RACE = "race"  # Run both, whichever settles last decides the status


@dataclass
class FormConfig:
    """Behavioral options for a FormController."""

    submit_policy: SubmitPolicy = SubmitPolicy.IGNORE
    # Flags survive reset unless this is enabled
    reset_clears_flags: bool = False
