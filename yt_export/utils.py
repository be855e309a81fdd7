# yt_export/utils.py


def _deep_get(data, path: str, default=None):
    """
    Safely walks a nested structure of dicts and lists using a dotted path.

    Numeric path segments index into lists, e.g. ``"items.0.id.videoId"``.
    Returns `default` as soon as a segment is missing or the value at that
    point cannot be traversed.
    """
    current = data
    for key in path.split("."):
        if isinstance(current, dict):
            if key not in current:
                return default
            current = current[key]
        elif isinstance(current, list) and key.isdigit():
            index = int(key)
            if index >= len(current):
                return default
            current = current[index]
        else:
            return default
    return current
