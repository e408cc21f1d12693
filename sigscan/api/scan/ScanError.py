"""Base error for fatal scan and remediation failures."""


class ScanError(Exception):
    """A failure that ends a scan or a removal.

    The message is shown to the user verbatim.
    """
