# forms.py
import logging
import time

logger = logging.getLogger(__name__)

CONTACT_FIELDS = ("name", "email", "message")


def missing_fields(form, required):
    """Names of required fields that are absent or blank."""
    return [f for f in required if not str((form or {}).get(f) or "").strip()]


def blank_form(fields):
    return {f: "" for f in fields}


class DelayedReset:
    """A single pending reset that can be cancelled or replaced.

    Nothing runs in the background: the owning view calls ``poll()`` on each
    run and the callback fires there once ``delay`` seconds have passed.
    ``timer`` returns the current time in seconds (``time.monotonic``).
    """

    def __init__(self, delay, callback, timer=None):
        self.delay = delay
        self.callback = callback
        self.timer = timer or time.monotonic
        self.deadline = None

    @property
    def pending(self):
        return self.deadline is not None

    @property
    def due(self):
        return self.pending and self.timer() >= self.deadline

    def start(self):
        self.deadline = self.timer() + self.delay

    def cancel(self):
        if self.deadline is not None:
            logger.debug("Cancelled pending form reset")
        self.deadline = None

    def poll(self):
        if not self.due:
            return False
        self.deadline = None
        self.callback()
        return True
