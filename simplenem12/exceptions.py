class SimpleNem12Error(Exception): ...


class InputFileNotFoundError(SimpleNem12Error, FileNotFoundError): ...


class InputReadError(SimpleNem12Error): ...


class EnvelopeError(SimpleNem12Error): ...


class FieldValidationError(SimpleNem12Error, ValueError): ...


class DateParseError(FieldValidationError): ...


class MissingCurrentRecordError(SimpleNem12Error): ...


def require(
    condition: bool, message: str, exc: type[SimpleNem12Error] = SimpleNem12Error
):
    """Raise the given exception if condition is False."""
    if not condition:
        raise exc(message)
