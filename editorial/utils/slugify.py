import re
import uuid

from unidecode import unidecode


def slugify(text, fallback_prefix="item"):
    """ASCII slug for ``text``; scripts that transliterate to nothing get a random suffix."""
    text = unidecode(text or "").lower()
    text = re.sub(r"[^a-z0-9]+", "-", text).strip("-")
    if not text:
        text = f"{fallback_prefix}-{uuid.uuid4().hex[:8]}"
    return text
