"""ICS (iCalendar) codec."""

from calendar_clone.ics.decoder import ICSDecoder, decode_events
from calendar_clone.ics.encoder import ICSEncoder, encode_events
from calendar_clone.ics.formatting import escape_text, unescape_text

__all__ = [
    "ICSDecoder",
    "ICSEncoder",
    "decode_events",
    "encode_events",
    "escape_text",
    "unescape_text",
]
