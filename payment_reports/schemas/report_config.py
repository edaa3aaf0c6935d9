"""
Report Configuration

Immutable configuration for payment report PDFs, built with a fluent builder:

    config = (
        ReportConfigBuilder()
        .with_title("Receipt")
        .with_theme("DARK")
        .with_format(PageFormat.LETTER)
        .build()
    )
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from ..exceptions import InvalidConfigurationError


class Theme(str, Enum):
    LIGHT = "LIGHT"
    DARK = "DARK"


class PageFormat(str, Enum):
    A4 = "A4"
    LETTER = "LETTER"


def _coerce(enum_cls, field: str, value):
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        name = value.strip()
        if name in enum_cls.__members__:
            return enum_cls[name]
    raise InvalidConfigurationError(field, value, enum_cls.__members__)


def parse_theme(value: Union[Theme, str]) -> Theme:
    return _coerce(Theme, "theme", value)


def parse_page_format(value: Union[PageFormat, str]) -> PageFormat:
    return _coerce(PageFormat, "format", value)


@dataclass(frozen=True)
class ReportConfig:
    """Display options for one generated report. Create through ReportConfigBuilder."""
    include_logo: bool = False
    title: str = "Payment Report"
    include_payment_details: bool = True
    include_user_info: bool = True
    theme: Theme = Theme.LIGHT
    include_timestamp: bool = True
    footer_message: str = ""
    format: PageFormat = PageFormat.A4

    def describe(self) -> str:
        return (
            "ReportConfig("
            f"include_logo={self.include_logo}, "
            f"title={self.title!r}, "
            f"include_payment_details={self.include_payment_details}, "
            f"include_user_info={self.include_user_info}, "
            f"theme={self.theme.value}, "
            f"include_timestamp={self.include_timestamp}, "
            f"footer_message={self.footer_message!r}, "
            f"format={self.format.value})"
        )


class ReportConfigBuilder:
    """
    Fluent accumulator for ReportConfig.

    Every setter overwrites one field and returns the builder. build() returns
    a new frozen snapshot; the builder can keep being used afterwards without
    affecting configs that were already built.
    """

    def __init__(self):
        self._include_logo = False
        self._title = "Payment Report"
        self._include_payment_details = True
        self._include_user_info = True
        self._theme = Theme.LIGHT
        self._include_timestamp = True
        self._footer_message = ""
        self._format = PageFormat.A4

    def with_logo(self, include_logo: bool) -> "ReportConfigBuilder":
        self._include_logo = bool(include_logo)
        return self

    def with_title(self, title: str) -> "ReportConfigBuilder":
        self._title = title
        return self

    def with_payment_details(self, include_payment_details: bool) -> "ReportConfigBuilder":
        self._include_payment_details = bool(include_payment_details)
        return self

    def with_user_info(self, include_user_info: bool) -> "ReportConfigBuilder":
        self._include_user_info = bool(include_user_info)
        return self

    def with_theme(self, theme: Union[Theme, str]) -> "ReportConfigBuilder":
        """Raises InvalidConfigurationError for an unknown theme name"""
        self._theme = parse_theme(theme)
        return self

    def with_timestamp(self, include_timestamp: bool) -> "ReportConfigBuilder":
        self._include_timestamp = bool(include_timestamp)
        return self

    def with_footer_message(self, footer_message: str) -> "ReportConfigBuilder":
        self._footer_message = footer_message or ""
        return self

    def with_format(self, page_format: Union[PageFormat, str]) -> "ReportConfigBuilder":
        """Raises InvalidConfigurationError for an unknown page format name"""
        self._format = parse_page_format(page_format)
        return self

    def build(self) -> ReportConfig:
        return ReportConfig(
            include_logo=self._include_logo,
            title=self._title,
            include_payment_details=self._include_payment_details,
            include_user_info=self._include_user_info,
            theme=self._theme,
            include_timestamp=self._include_timestamp,
            footer_message=self._footer_message,
            format=self._format,
        )
