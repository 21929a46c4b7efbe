import threading


class QuiescenceSignal:
    """
    System-wide "shutting down" flag. While set, no new capacity is requested.
    """

    def __init__(self, quieting_down: bool = False):
        self._event = threading.Event()
        if quieting_down:
            self._event.set()

    def quiet_down(self) -> None:
        self._event.set()

    def cancel_quiet_down(self) -> None:
        self._event.clear()

    def is_quieting_down(self) -> bool:
        return self._event.is_set()
