def seq_repr(data: tuple[object, ...], max_items: int = 20) -> str:
    if len(data) <= max_items:
        return repr(data)[1:-1]
    return ", ".join(map(repr, data[:max_items])) + ", ..."
