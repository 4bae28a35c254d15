# pagekit/pagination/constants.py
import enum
import re

# Fallback bounds used whenever a page or paginator leaves its size unset.
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 50

# A shorthand sort spec only has to contain a match, e.g. "-created_at" passes.
SORT_SPEC_PATTERN = re.compile(r"-?([a-zA-Z0-9]+)")

DESCENDING_PREFIX = "-"
SORT_SPEC_SEPARATOR = ","


class SortOrder(str, enum.Enum):
    ASC = "ASC"
    DESC = "DESC"
