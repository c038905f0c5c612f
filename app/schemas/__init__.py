from .generation import (
    FailureKind,
    GenerationFailure,
    GenerationRequest,
    GenerationResult,
    GenerationStyle,
    GenerationSuccess,
    SenderProfile,
)

__all__ = [
    "FailureKind",
    "GenerationFailure",
    "GenerationRequest",
    "GenerationResult",
    "GenerationStyle",
    "GenerationSuccess",
    "SenderProfile",
]
