"""Parser for the OCR service's response envelope.

The service answers with a string shaped exactly like
``{"natural_text": "<text>"}``. This is not a JSON parser: the text is
taken verbatim between the fixed prefix and the last closing ``"}``, with
escape sequences left untouched.
"""

ENVELOPE_PREFIX = '{"natural_text": "'
ENVELOPE_SUFFIX = '"}'


def extract_natural_text(raw: str) -> str | None:
    """Return the text wrapped by the envelope, or None if `raw` is not one.

    Args:
        raw: Response body as received from the OCR endpoint.

    Returns:
        The substring between the prefix and the last suffix occurrence,
        or None when the prefix is missing or no suffix follows it.
    """
    if not raw.startswith(ENVELOPE_PREFIX):
        return None
    end = raw.rfind(ENVELOPE_SUFFIX)
    if end < len(ENVELOPE_PREFIX):
        return None
    return raw[len(ENVELOPE_PREFIX):end]
