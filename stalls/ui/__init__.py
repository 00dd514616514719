"""UI components for stall registration."""

from .registration_form import (
    ADMIN_STATE_KEY,
    PUBLIC_STATE_KEY,
    chosen_type,
    clear_submission,
    registration_form,
    reset_form,
    store_submission,
)
from .success_screen import success_screen

__all__ = [
    "ADMIN_STATE_KEY",
    "PUBLIC_STATE_KEY",
    "chosen_type",
    "clear_submission",
    "registration_form",
    "reset_form",
    "store_submission",
    "success_screen",
]
