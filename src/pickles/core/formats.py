"""Output and test-result formats understood by Pickles.

Each member carries its canonical token (the spelling used on the
command line and in config files). Parsing is case-insensitive and also
accepts the member name, so ``"CucumberJson"`` and ``"cucumber_json"``
resolve to the same value.
"""

from __future__ import annotations

from enum import Enum

from .errors import InvalidArgumentError


class _TokenEnum(Enum):
    @property
    def token(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str):
        """Parse a token case-insensitively; raise InvalidArgumentError if unknown."""
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for member in cls:
            if normalized in (member.value.lower(), member.name.lower()):
                return member
        allowed = ", ".join(member.value for member in cls)
        raise InvalidArgumentError(
            f"Invalid {cls.__name__} {value!r}; expected one of: {allowed}"
        )


class DocumentationFormat(_TokenEnum):
    """Rendering format for generated living documentation."""

    HTML = "Html"
    DHTML = "Dhtml"
    WORD = "Word"
    EXCEL = "Excel"
    JSON = "JSON"
    CUCUMBER = "Cucumber"
    MARKDOWN = "Markdown"


class TestResultsFormat(_TokenEnum):
    """Format of the test-runner output used to annotate scenarios."""

    __test__ = False

    NUNIT = "NUnit"
    NUNIT3 = "NUnit3"
    XUNIT = "xUnit"
    XUNIT1 = "xUnit1"
    XUNIT2 = "xUnit2"
    MSTEST = "MsTest"
    CUCUMBER_JSON = "CucumberJson"
    SPECRUN = "SpecRun"
    VSTEST = "VsTest"
    CUCUMBER = "Cucumber"
