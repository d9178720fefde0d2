from .document import DocumentPort
from .llm import LLMClientPort

__all__ = [
    "DocumentPort",
    "LLMClientPort",
]
