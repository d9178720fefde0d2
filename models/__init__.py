from .profile_record import ProfileRecord
from .generation_result import GenerationResult

__all__ = [
    "ProfileRecord",
    "GenerationResult",
]
