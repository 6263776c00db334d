"""Web adapters - Navigation for the HTTP layer."""

from .navigator import RecordingNavigator

__all__ = ["RecordingNavigator"]
