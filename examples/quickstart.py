"""Quickstart example for ldmlformat.

This example demonstrates basic usage of ldmlformat.format() with the
default en-US locale data, custom options and the error types.

Note: Protected tokens (YYYY, D) log a warning unless the matching option
is set. Configure logging to see them.
"""

import logging
from datetime import UTC, datetime

import ldmlformat
from ldmlformat import CalendarValue, FormatOptions, UnknownDirectiveError

logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

moment = datetime(1986, 4, 4, 0, 32, 55, 123000, tzinfo=UTC)

# Example 1: Numeric fields
print("=" * 50)
print("Example 1: Numeric Fields")
print("=" * 50)

print(ldmlformat.format(moment, "yyyy-MM-dd'T'HH:mm:ss.SSSXXX"))
# Output: 1986-04-04T00:32:55.123Z

print(ldmlformat.format(moment, "d/M/yy"))
# Output: 4/4/86

# Example 2: Names and ordinals
print("\n" + "=" * 50)
print("Example 2: Names and Ordinals")
print("=" * 50)

print(ldmlformat.format(moment, "EEEE, MMMM do, y G"))
# Output: Friday, April 4th, 1986 AD

print(ldmlformat.format(moment, "QQQQ"))
# Output: 2nd quarter

# Example 3: Years outside datetime's range
print("\n" + "=" * 50)
print("Example 3: Historical Dates")
print("=" * 50)

ides = CalendarValue.from_fields(-43, 2, 15)
print(ldmlformat.format(ides, "MMMM d, y G (u)"))
# Output: March 15, 44 BC (-43)

print(ldmlformat.format("+012345-06-07", "yyyy-MM-dd"))
# Output: 12345-06-07

# Example 4: Week numbering
print("\n" + "=" * 50)
print("Example 4: Week Numbering")
print("=" * 50)

new_year = CalendarValue.from_fields(2005, 0, 1)
iso = FormatOptions(use_additional_week_year_token=True)
print(ldmlformat.format(new_year, "YYYY-'W'ww", iso))
# Output: 2004-W53

us = FormatOptions(
    week_starts_on=0, first_week_contains_date=1, use_additional_week_year_token=True
)
print(ldmlformat.format(new_year, "YYYY-'W'ww", us))
# Output: 2005-W01

# Example 5: Invalid input and errors
print("\n" + "=" * 50)
print("Example 5: Invalid Input")
print("=" * 50)

print(ldmlformat.format(float("nan"), "yyyy-MM-dd"))
# Output: Invalid Date

try:
    ldmlformat.format(moment, "yyyy-MM-dd from HH:mm")
except UnknownDirectiveError as e:
    print(f"Pattern rejected at offset {e.position}: {e.diagnostic}")
# Output: Pattern rejected at offset 11: Pattern contains an unescaped latin alphabet character 'f'
