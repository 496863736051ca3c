import unicodedata

NAME_MAX_LENGTH = 50
NAME_SEPARATORS = " '.-"


def normalize_person_name(value: str, label: str) -> str:
    """Return the stripped, NFC-normalized name or raise ValueError naming the offending field.

    A name starts with a letter; after that it may hold letters, combining
    marks and the separators in NAME_SEPARATORS.
    """
    if not isinstance(value, str):
        raise ValueError(f"{label} must be a string")

    value = unicodedata.normalize("NFC", value.strip())
    if not value:
        raise ValueError(f"{label} cannot be empty")
    if len(value) > NAME_MAX_LENGTH:
        raise ValueError(f"{label} must be at most {NAME_MAX_LENGTH} characters")
    if not _is_person_name(value):
        raise ValueError(f"{label} contains invalid characters")
    return value


def _is_person_name(value: str) -> bool:
    if unicodedata.category(value[0])[0] != "L":
        return False
    previous = value[0]
    for ch in value[1:]:
        category = unicodedata.category(ch)[0]
        if category == "M":
            # combining marks only attach to a letter or another mark
            if unicodedata.category(previous)[0] not in "LM":
                return False
        elif category != "L" and ch not in NAME_SEPARATORS:
            return False
        previous = ch
    return True
