import re

NO_SUBJECT = "No Subject"

# Anchored and case-sensitive: a single leading prefix is removed per call.
RE_PREFIX = re.compile(r"^(Re|RE|FWD|Fwd|Fw|FW)(\[\d+\])?:\s*")
ANGLE_ADDRESS = re.compile(r"<([^>]+)>")


def normalize_subject(subject: str | None) -> str:
    if not subject:
        return NO_SUBJECT
    s = RE_PREFIX.sub("", subject).strip()
    return s or NO_SUBJECT


def extract_address(value: str | None) -> str:
    """Return the last ``<addr>`` in a header value, or the whole value."""
    if not value:
        return ""
    matches = ANGLE_ADDRESS.findall(value)
    return matches[-1] if matches else value
