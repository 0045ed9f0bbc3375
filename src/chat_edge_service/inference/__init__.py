from .workers_ai import InferenceError, WorkersAIClient

__all__ = ["InferenceError", "WorkersAIClient"]
