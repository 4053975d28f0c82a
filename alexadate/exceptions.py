class AlexaDateError(ValueError):
    """Base class for errors raised while classifying or resolving a date string."""


class InvalidDateStringError(AlexaDateError):
    """The input matched none of the AMAZON.DATE categories."""

    def __init__(self, date_string):
        self.date_string = date_string
        super().__init__(f"{date_string} was not a valid date string.")


class DateStringFormatError(AlexaDateError):
    """A category-specific resolver could not make sense of its input."""


class SettingValidationError(AlexaDateError):
    pass
