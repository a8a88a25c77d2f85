"""Output utilities."""

from gitnav.output.output import machine_output, user_output

__all__ = [
    "machine_output",
    "user_output",
]
