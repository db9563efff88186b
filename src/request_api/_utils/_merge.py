from typing import Any, Mapping, Optional


def extend(*mappings: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """Shallow-merge mappings into a new dict.

    Later mappings override the keys of earlier ones. ``None`` entries are
    skipped, so ``extend(defaults, None)`` is a plain copy of ``defaults``.

    Examples:
        >>> extend({"a": 1, "b": 1}, {"b": 2})
        {'a': 1, 'b': 2}
    """
    merged: dict[str, Any] = {}
    for mapping in mappings:
        if mapping:
            merged.update(mapping)
    return merged
