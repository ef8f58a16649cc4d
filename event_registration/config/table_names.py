from enum import Enum


class TableNames(str, Enum):
    REGISTRATIONS = "registrations"
