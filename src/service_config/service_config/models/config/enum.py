from enum import Enum
from typing import Optional


class Environment(str, Enum):
    """
    Runtime mode of the hosting process.
    """

    PRODUCTION = "production"
    DEVELOPMENT = "development"
    TEST = "test"

    @classmethod
    def classify(cls, raw: Optional[str]) -> "Environment":
        """Classify a raw environment string by prefix.

        ``prod*`` maps to production and ``test*`` to test, case-insensitively
        and ignoring surrounding whitespace. Anything else, including an unset
        or empty value, is development.
        """
        value = (raw or "").strip().lower()
        if value.startswith("prod"):
            return cls.PRODUCTION
        if value.startswith("test"):
            return cls.TEST
        return cls.DEVELOPMENT


class LogDestination(str, Enum):
    """
    Where an enabled logger section writes to.
    """

    CONSOLE = "console"
    FILE = "file"


class BrokerState(str, Enum):
    """
    Tag of a broker address list.
    """

    UNSET = "unset"
    EMPTY = "empty"
    LISTED = "listed"
