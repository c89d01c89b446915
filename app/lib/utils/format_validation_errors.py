from typing import Any, Iterable, Mapping


def format_validation_errors(errors: Iterable[Mapping[str, Any]]) -> str:
    """
    Flatten pydantic error dicts into "loc: msg; loc: msg".
    """
    messages = []
    for error in errors:
        loc = ".".join(str(part) for part in error.get("loc", ()) if part != "query")
        msg = error.get("msg", "invalid value")
        messages.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(messages)
