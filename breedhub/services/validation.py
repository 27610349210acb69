class ValidationError(ValueError):
    pass


def require(condition: bool, message: str) -> None:
    if not condition:
        raise ValidationError(message)


def validate_range(minimum: float | None, maximum: float | None, field_name: str) -> None:
    if minimum is None or maximum is None:
        return
    require(minimum <= maximum, f"{field_name}_min must be <= {field_name}_max")
