"""Path joining helper."""


def concatenate_paths(left_path: str, right_path: str) -> str:
    """
    Concatenate two paths, making sure exactly one slash separates them.

    Args:
        left_path: Left path, e.g. a site URL
        right_path: Right path

    Returns:
        Joined path. If one side is empty the other one is returned as is.
    """
    if not left_path:
        return right_path
    if not right_path:
        return left_path

    left_ends_slash = left_path.endswith('/')
    right_starts_slash = right_path.startswith('/')

    if left_ends_slash and right_starts_slash:
        return left_path + right_path[1:]
    if not left_ends_slash and not right_starts_slash:
        return left_path + '/' + right_path

    return left_path + right_path
