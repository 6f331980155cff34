"""Network connectivity signal reported by the client; gates image fetching only."""
_connected: bool = True


def set_connected(connected: bool) -> None:
    """Call when the client reports a connectivity change."""
    global _connected
    _connected = bool(connected)


def is_connected() -> bool:
    """True unless the client reported it is offline (images should not be fetched)."""
    return _connected
