import logging
from typing import List, NamedTuple


class Toast(NamedTuple):
    message: str
    is_success: bool


class ToastManager:
    """Collects user-visible notifications for the presentation layer to render."""

    def __init__(self):
        self.history: List[Toast] = []

    def show(self, message: str, is_success: bool):
        self.history.append(Toast(message, is_success))
        if is_success:
            logging.info(f"Toast: {message}")
        else:
            logging.warning(f"Toast: {message}")

    @property
    def last(self):
        return self.history[-1] if self.history else None
