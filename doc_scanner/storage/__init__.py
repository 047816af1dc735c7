import time


# ----------------------------------------------------------------------------------------------------------------------
def now_millis() -> int:
    """
    Returns the current time in milliseconds since the epoch, used for naming captured and cropped images and default
    document names.
    """
    return int(time.time() * 1000)

# ----------------------------------------------------------------------------------------------------------------------
