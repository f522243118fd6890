# Constants for the maximum number of colors and ranks
kMaxNumColors = 5
kMaxNumRanks = 5

kColorChars = "RYGWB"


def color_index_to_char(color: int) -> str:
    """Converts a color index into its corresponding character."""
    if 0 <= color < kMaxNumColors:
        return kColorChars[color]
    return "X"


def rank_index_to_char(value: int) -> str:
    """Converts a card value (1-based) into its corresponding character."""
    if 1 <= value <= kMaxNumRanks:
        return str(value)
    return "X"


def char_to_color_index(char: str) -> int:
    """Converts a color character (case-insensitive) back into its index."""
    index = kColorChars.find(char.upper()) if len(char) == 1 else -1
    if index < 0:
        raise ValueError(f"Unknown color character: {char!r}")
    return index


def parameter_value(params: dict, key: str, default_value):
    """
    Fetches a value associated with a key in the params dictionary
    and converts it to the type of the default value if present.
    Returns the default value otherwise.
    """
    if key not in params:
        return default_value
    value = params[key]

    # bool must be checked before int, it is a subclass
    try:
        if isinstance(default_value, bool):
            return str(value).lower() in ["1", "true", "yes"]
        elif isinstance(default_value, int):
            return int(value)
        elif isinstance(default_value, float):
            return float(value)
        elif isinstance(default_value, str):
            return str(value)
    except ValueError:
        raise ValueError(f"Invalid value for parameter {key!r}: {value!r}")

    return default_value


def require(expr: bool, message: str = "Input requirements failed!"):
    """
    Enforces a condition and raises an assertion error if the condition fails.
    A failed requirement means contradictory observations upstream, not bad user input.
    Unlike an assert statement, the check survives python -O.
    """
    if not expr:
        raise AssertionError(message)
