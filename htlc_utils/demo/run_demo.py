"""Print sample timelock timestamps."""

from __future__ import annotations

import logging
import os

from htlc_utils.utils.time import current_ts, delayed_ts, target_ts


def main() -> None:
    level = os.getenv("HTLC_UTILS_LOG_LEVEL")
    if level:
        logging.basicConfig(level=level.upper())

    print("Current Timestamp: ", current_ts())
    print("Target Timestamp", target_ts(2077, 7, 7, 7, 7, 7))
    print("Delayed Timestamp", delayed_ts("1h"))


if __name__ == "__main__":
    main()
