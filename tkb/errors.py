from typing import Optional


class TKBError(Exception):
    """Base class for every failure raised while generating an object."""


class ConfigError(TKBError):
    pass


class UpstreamError(TKBError):
    """The Gemini call failed at the transport level or returned non-2xx."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class RateLimitedError(TKBError):
    """Gemini answered with a 429 code. Callers should try again later."""


class MalformedResponseError(TKBError):
    """The response envelope did not contain candidates[0].content.parts[0].text."""


class TemplateMismatchError(TKBError):
    """The generated text does not follow the expected object template."""

    def __init__(self, message: str, section: str, line_number: Optional[int] = None, line: Optional[str] = None):
        if line_number is not None:
            message = f"{message} (section={section}, line {line_number}: {line!r})"
        else:
            message = f"{message} (section={section})"
        super().__init__(message)
        self.section = section
        self.line_number = line_number
        self.line = line


class MalformedAttributeLineError(TemplateMismatchError):
    pass
