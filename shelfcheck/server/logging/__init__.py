from .draft_payloads import draft_to_loggable

__all__ = ["draft_to_loggable"]
