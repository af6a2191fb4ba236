from typing import Any

# Fields shown after a successful repository creation.
RESPONSE_FIELDS: tuple[str, ...] = (
    'id',
    'clone_url',
    'full_name',
    'name',
    'owner.login',
    'ssh_url',
    'private',
    'default_branch',
)


def _build_tree(paths: tuple[str, ...] | list[str]) -> dict[str, Any]:
    """Turn dotted paths into a nested dict; ``None`` marks a kept leaf."""
    tree: dict[str, Any] = {}
    for path in paths:
        node = tree
        *parents, leaf = path.split('.')
        for part in parents:
            child = node.get(part)
            if child is None:
                if part in node:
                    # a shorter path already keeps the whole value
                    break
                child = node[part] = {}
            node = child
        else:
            node[leaf] = None
    return tree


def _apply(data: dict[str, Any], tree: dict[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in data.items():
        if key not in tree:
            continue
        subtree = tree[key]
        if subtree is None:
            result[key] = value
        elif isinstance(value, dict):
            result[key] = _apply(value, subtree)
    return result


def filter_fields(data: Any, paths: tuple[str, ...] | list[str]) -> Any:
    """Keep only the dotted ``paths`` of a JSON object.

    Keys keep their original order. ``owner.login`` keeps ``owner`` with only
    its ``login`` key, and only when ``owner`` is an object. Non-object input
    is returned unchanged.

    Examples:
        >>> filter_fields({'id': 1, 'x': 2, 'owner': {'login': 'a', 'id': 3}}, ['id', 'owner.login'])
        {'id': 1, 'owner': {'login': 'a'}}
    """
    if not isinstance(data, dict):
        return data
    return _apply(data, _build_tree(paths))
