"""Notification region refresh handler."""

from ..models import UIState


def refresh_notifications(state: UIState) -> str:
    """Re-render the notification region, dismissing expired notices.

    Called periodically by the page timer.
    """
    if state is None:
        return ""
    return state.notifications.render()
