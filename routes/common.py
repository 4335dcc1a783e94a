from flask import current_app, request


def get_store():
    return current_app.extensions['pokemon_store']


def get_importer():
    return current_app.extensions['pokemon_importer']


def int_arg(name: str, default: int) -> int:
    """Integer query parameter; anything unparsable falls back to default."""
    raw = (request.args.get(name) or '').strip()
    try:
        return int(raw)
    except ValueError:
        return default


def parse_id(value: str):
    """Digits-only path segment -> int, anything else -> None."""
    value = (value or '').strip()
    return int(value) if value.isascii() and value.isdigit() else None
