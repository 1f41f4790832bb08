"""spine-fp core -- optional and result containers plus their adapters.

Architecture::

    Layer 1 -- Errors
        errors.py          MissingCaseHandlerError, SpineFPError, describe_error

    Layer 2 -- Containers
        maybe.py           Maybe (Present / Absent / to_optional)
        result.py          Result (Success / Failure)

    Layer 3 -- Producers and consumers
        adapters.py        encase, encase_res, parse_date
        sequences.py       justs, oks, nothings, failures, collect/partition
        timestamps.py      Strict ISO 8601 grammar + UTC rendering

    Ambient
        logging.py         structlog configuration
        settings.py        pydantic-settings (SPINE_FP_ prefix)
"""

from spinefp.core.adapters import encase, encase_res, parse_date
from spinefp.core.errors import (
    ErrorCategory,
    MissingCaseHandlerError,
    SpineFPError,
    describe_error,
)
from spinefp.core.maybe import Absent, Maybe, Present, to_optional
from spinefp.core.result import Failure, Result, Success
from spinefp.core.sequences import (
    collect_results,
    failures,
    justs,
    nothings,
    oks,
    partition_results,
)
from spinefp.core.timestamps import to_iso8601

__all__ = [
    # errors
    "ErrorCategory",
    "MissingCaseHandlerError",
    "SpineFPError",
    "describe_error",
    # containers
    "Maybe",
    "Present",
    "Absent",
    "to_optional",
    "Result",
    "Success",
    "Failure",
    # adapters
    "encase",
    "encase_res",
    "parse_date",
    "to_iso8601",
    # sequences
    "justs",
    "nothings",
    "oks",
    "failures",
    "collect_results",
    "partition_results",
]
