from typing import Any, Mapping, Sequence

PathLike = str | Sequence[str]


def split_path(path: PathLike, delimiter: str = ".") -> list[str]:
    """
    Normalize a path into a list of segments.
    The path is either a delimited string ("a.b.c") or a sequence of segments (["a", "b", "c"]).
    """
    if isinstance(path, str):
        segments = path.split(delimiter) if path else []
    else:
        segments = [str(segment) for segment in path]
    if not segments:
        raise ValueError("Path must contain at least one segment")
    return segments


def get_value_by_path(data: Mapping[str, Any] | None, path: PathLike, delimiter: str = ".") -> Any:
    """
    Get the value at this path in a nested mapping, or None if any segment is missing
    """
    value: Any = data
    for segment in split_path(path, delimiter):
        if not isinstance(value, Mapping) or segment not in value:
            return None
        value = value[segment]
    return value


def set_value_by_path(data: Mapping[str, Any] | None, path: PathLike, value: Any, delimiter: str = ".") -> dict:
    """
    Return a copy of data with the value at this path set, creating intermediate levels as needed.
    Intermediate values that are not mappings are replaced by a new level.
    """
    segments = split_path(path, delimiter)
    result = dict(data or {})
    head, rest = segments[0], segments[1:]
    if rest:
        current = result.get(head)
        result[head] = set_value_by_path(current if isinstance(current, Mapping) else None, rest, value)
    else:
        result[head] = value
    return result
