"""StepType value object - bucket used for recipe time totals."""

from enum import Enum


class StepType(str, Enum):
    """Classification of a recipe step.

    Used to bucket step durations for recipe time totals:
    - PREP: Chopping, measuring, mixing
    - COOK: Active heat (bake, fry, simmer)
    - WAIT: Resting, proofing, chilling
    - OTHER: Everything else (default)
    """

    PREP = "Prep"
    COOK = "Cook"
    WAIT = "Wait"
    OTHER = "Other"

    @classmethod
    def default(cls) -> "StepType":
        """Type given to steps that do not declare one."""
        return cls.OTHER

    def __str__(self) -> str:
        return self.value
