from typing import Any, Mapping, Optional, Union

from prcheck.core.checks import ReportGenerator
from prcheck.core.ports.clock import Clock
from prcheck.core.ports.logger import Logger
from prcheck.core.schema import PRData, Report
from prcheck.infra import NullLogger, SystemClock


def generate_check_report(
    pr_data: Union[PRData, Mapping[str, Any]],
    *,
    logger: Optional[Logger] = None,
    clock: Optional[Clock] = None,
) -> Report:
    """Run the title, changed-lines and file-type checks, in that order.

    ``pr_data`` may be a :class:`PRData` or a mapping with the keys
    ``number``, ``title``, ``additions``, ``deletions`` and ``files``.
    Errors raised while computing a check are not caught; the call either
    returns a complete report or fails as a whole. Nothing is logged unless
    a ``logger`` is passed.
    """
    generator = ReportGenerator(
        logger=logger or NullLogger(),
        clock=clock or SystemClock(),
    )
    return generator.generate(pr_data)
