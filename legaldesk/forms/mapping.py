from legaldesk.forms.models import NameParts


def split_name(full_name: str | None) -> NameParts:
    """Split a full name on whitespace; the final token is taken as the last name.

    >>> split_name("Maria de la Cruz")
    NameParts(first='Maria', middle='de la', last='Cruz')
    """
    if not full_name:
        return NameParts(first="", middle="", last="")
    parts = str(full_name).split()
    if not parts:
        return NameParts(first="", middle="", last="")
    if len(parts) == 1:
        return NameParts(first=parts[0], middle="", last="")
    if len(parts) == 2:
        return NameParts(first=parts[0], middle="", last=parts[1])
    return NameParts(first=parts[0], middle=" ".join(parts[1:-1]), last=parts[-1])
