"""Argument formatters shared by ssh and scp invocations."""


def compression_argument() -> str:
    """Return the flag that enables compression for ssh or scp.

    SSHv2 negotiates DEFLATE at level 6, so no explicit level is passed.
    """
    return "-C"


def timeout_argument(timeout: int) -> str:
    """Return an option limiting connection time to ``timeout`` seconds.

    This bounds connection setup only, not transfer time or process lifetime.
    A timeout below 1 is a bug in the caller and raises AssertionError.
    """
    if isinstance(timeout, bool) or not isinstance(timeout, int) or timeout < 1:
        raise AssertionError(f"invalid timeout value: {timeout!r}")
    return f"-oConnectTimeout={timeout:d}"
