"""Publication date value objects and their localized display."""

import calendar
from datetime import datetime
from enum import Enum, IntEnum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, RootModel, ValidationError, model_validator


class Language(str, Enum):
    """Languages the site is published in.

    The value doubles as the first segment of every generated path.
    """

    ENGLISH = "en"
    FRENCH = "fr"


class Month(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    def to_str(self, language: Language) -> str:
        return MONTH_NAMES[language][self]


MONTH_NAMES: dict[Language, dict[Month, str]] = {
    Language.ENGLISH: {
        Month.JANUARY: "January",
        Month.FEBRUARY: "February",
        Month.MARCH: "March",
        Month.APRIL: "April",
        Month.MAY: "May",
        Month.JUNE: "June",
        Month.JULY: "July",
        Month.AUGUST: "August",
        Month.SEPTEMBER: "September",
        Month.OCTOBER: "October",
        Month.NOVEMBER: "November",
        Month.DECEMBER: "December",
    },
    Language.FRENCH: {
        Month.JANUARY: "Janvier",
        Month.FEBRUARY: "Février",
        Month.MARCH: "Mars",
        Month.APRIL: "Avril",
        Month.MAY: "Mai",
        Month.JUNE: "Juin",
        Month.JULY: "Juillet",
        Month.AUGUST: "Août",
        Month.SEPTEMBER: "Septembre",
        Month.OCTOBER: "Octobre",
        Month.NOVEMBER: "Novembre",
        Month.DECEMBER: "Décembre",
    },
}


class Year(RootModel[Annotated[int, Field(ge=0, le=65535)]]):
    """Unsigned 16-bit year."""

    model_config = ConfigDict(frozen=True)

    @property
    def value(self) -> int:
        return self.root


class Day(RootModel[Annotated[int, Field(ge=1, le=31)]]):
    """Day of month in the 1-31 range.

    Whether the day exists in a given month is checked by PublishedDate.
    """

    model_config = ConfigDict(frozen=True)

    @classmethod
    def new(cls, day: int) -> "Day | None":
        try:
            return cls(day)
        except ValidationError:
            return None

    @property
    def value(self) -> int:
        return self.root


def days_in_month(year: int, month: Month) -> int:
    return calendar.mdays[month] + (month == Month.FEBRUARY and calendar.isleap(year))


class PublishedDate(BaseModel):
    """Calendar date an article was published on.

    Dates are totally ordered by year, then month, then day.

    Attributes:
        year: Publication year
        month: Publication month
        day: Publication day, valid for the month and year
    """

    model_config = ConfigDict(frozen=True)

    year: Year
    month: Month
    day: Day

    @model_validator(mode="after")
    def check_day_exists(self) -> "PublishedDate":
        last_day = days_in_month(self.year.value, self.month)
        if self.day.value > last_day:
            raise ValueError(
                f"{self.month.name.title()} {self.year.value} has only {last_day} days"
            )
        return self

    @classmethod
    def new(cls, year: Year, month: Month, day: Day) -> "PublishedDate | None":
        """Build a date, returning None when the day does not exist in that month."""
        try:
            return cls(year=year, month=month, day=day)
        except ValidationError:
            return None

    @classmethod
    def from_datetime(cls, moment: datetime) -> "PublishedDate":
        return cls(year=Year(moment.year), month=Month(moment.month), day=Day(moment.day))

    @property
    def sort_key(self) -> tuple[int, int, int]:
        return (self.year.value, int(self.month), self.day.value)

    def __lt__(self, other: "PublishedDate") -> bool:
        if not isinstance(other, PublishedDate):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __le__(self, other: "PublishedDate") -> bool:
        if not isinstance(other, PublishedDate):
            return NotImplemented
        return self.sort_key <= other.sort_key

    def __gt__(self, other: "PublishedDate") -> bool:
        if not isinstance(other, PublishedDate):
            return NotImplemented
        return self.sort_key > other.sort_key

    def __ge__(self, other: "PublishedDate") -> bool:
        if not isinstance(other, PublishedDate):
            return NotImplemented
        return self.sort_key >= other.sort_key

    def isoformat(self) -> str:
        return f"{self.year.value:04d}-{int(self.month):02d}-{self.day.value:02d}"

    def to_string(self, language: Language) -> str:
        """Format the date for display.

        Examples:
            >>> date = PublishedDate(year=2021, month=5, day=1)
            >>> date.to_string(Language.ENGLISH)
            'May 1, 2021'
            >>> date.to_string(Language.FRENCH)
            '1 mai 2021'
        """
        year = self.year.value
        month = self.month.to_str(language)
        day = self.day.value

        if language is Language.FRENCH:
            return f"{day} {month.lower()} {year}"
        return f"{month} {day}, {year}"
