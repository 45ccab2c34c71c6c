def normalize_name(name: str) -> str:
    """Normalize species names into lookup keys.

    Converts names to lowercase, spells out gender symbols and removes all
    non-alphanumeric characters, so the same key is produced for the
    English and French spellings users type.

    Args:
        name: The name to normalize (e.g., "Farfetch'd", "Mr. Mime", "Nidoran♀")

    Returns:
        Normalized name with only lowercase alphanumeric characters

    Examples:
        >>> normalize_name("Farfetch'd")
        'farfetchd'
        >>> normalize_name("Mr. Mime")
        'mrmime'
        >>> normalize_name("Nidoran♀")
        'nidoranf'
    """
    name = name.replace("♀", "f").replace("♂", "m")
    return "".join(c for c in name.lower() if c.isalnum())
