from enum import Enum, auto, unique


@unique
class Mode(Enum):
    KEY = auto()
    VALUE = auto()
    QUOTED = auto()
    ESCAPED = auto()
    ENTRY_DELIMITER = auto()
    EOL = auto()
