"""Number formatting shared by the display renderers."""


def format_number(value: float) -> str:
    """Shortest general form: 80.0 -> '80', 30.4 -> '30.4', 80.333... -> '80.3333'."""
    return f"{value:g}"
