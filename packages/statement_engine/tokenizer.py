from typing import List


def split_csv_line(line: str) -> List[str]:
    """
    Split one CSV line into trimmed fields.

    A double quote toggles quoted mode and is not copied into the field;
    commas inside quotes are kept as data. Doubled quotes ("") are not
    treated as an escaped quote, they simply toggle twice.
    """
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    # Last field has no trailing comma
    fields.append("".join(current).strip())
    return fields
