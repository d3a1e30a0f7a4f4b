class SnipcopyError(Exception):
    """Base class for errors raised by snipcopy."""


class DecodeError(SnipcopyError, ValueError):
    """A snippet payload is missing or is not valid base64 text."""


class ClipboardError(SnipcopyError):
    pass


class ClipboardUnavailable(ClipboardError):
    """The host platform declined or could not run the copy command."""


class StoreFormatError(SnipcopyError, ValueError):
    """A search store file could not be parsed or validated."""
