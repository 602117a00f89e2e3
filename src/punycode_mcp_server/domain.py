"""Label-wise mapping of domain names and email addresses."""

import re
from collections.abc import Callable

# RFC 3490 section 3.1: full stop, ideographic full stop, fullwidth full stop
# and halfwidth ideographic full stop all separate labels.
SEPARATORS = ("\u002e", "\u3002", "\uff0e", "\uff61")

_SEPARATOR_RE = re.compile("[" + "".join(SEPARATORS) + "]")


def split_labels(domain: str) -> list[str]:
    """Split a domain on any of the label separators."""
    return _SEPARATOR_RE.sub(".", domain).split(".")


def map_domain(domain: str, label_transform: Callable[[str], str]) -> str:
    """Apply `label_transform` to every label of a domain name or email address.

    In email addresses only the domain part is mapped; everything up to and
    including the first `@` is kept as is. Labels are rejoined with U+002E
    whichever separator delimited them in the input.

    Args:
        domain (str): The domain name or email address.
        label_transform (Callable[[str], str]): Called once per label, in order.

    Returns:
        str: The mapped domain name or email address.
    """
    local_part, at, domain_part = domain.partition("@")
    if not at:
        local_part, domain_part = "", domain
    labels = [label_transform(label) for label in split_labels(domain_part)]
    return local_part + at + ".".join(labels)
