"""Period Label Translation
-------------------------

Human-readable strings for period descriptions and error messages.

The package does not localize anything itself. It looks strings up by key
through a translator callable; by default that is the English catalog below.
An application with its own localization service installs it with
set_translator().

Examples:
  >>> translate("General_DateRangeFromTo", "2024-01-01", "2024-01-31")
  'From 2024-01-01 to 2024-01-31'

  >>> set_translator(lambda key, *args: key)
  >>> translate("General_Week", 3, 2024)
  'General_Week'
  >>> set_translator(None)
"""

from typing import Callable, Optional


DEFAULT_MESSAGES = {
    "General_DateRangeFromTo": "From {0} to {1}",
    "General_DateRangeInPeriodList": "{0} - {1}",
    "General_Week": "Week {0}, {1}",
    "General_ExceptionInvalidPeriod": (
        "The period '{0}' is not supported. Try any of the following instead: {1}"
    ),
    "General_ExceptionInvalidDateRange": (
        "The date range '{0}' is not valid. Use 'lastN', 'previousN' or 'YYYY-MM-DD,YYYY-MM-DD'"
    ),
    "General_ExceptionInvalidDate": "The date '{0}' is not a valid date",
    "General_ExceptionInvalidTimezone": "The timezone '{0}' is not a known timezone",
}

Translator = Callable[..., str]

_translator: Optional[Translator] = None


def default_translator(key: str, *args) -> str:
    """Format the English catalog entry for key. Unknown keys come back as-is."""
    template = DEFAULT_MESSAGES.get(key)
    if template is None:
        return key
    return template.format(*args)


def set_translator(translator: Optional[Translator]) -> None:
    """
    Install the translator used for all period strings.

    Args:
        translator: Callable taking (key, *args) and returning the rendered
            string, or None to restore the English catalog
    """
    global _translator
    _translator = translator


def translate(key: str, *args) -> str:
    if _translator is None:
        return default_translator(key, *args)
    return _translator(key, *args)


__all__ = [
    "DEFAULT_MESSAGES",
    "default_translator",
    "set_translator",
    "translate",
]
