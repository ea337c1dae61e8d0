def capitalize(text: str) -> str:
    """Upper-case the first character, keep the rest as is."""
    return text[:1].upper() + text[1:]
