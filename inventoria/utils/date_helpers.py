from datetime import datetime, timezone
from typing import Optional


def utc_timestamp(moment: Optional[datetime] = None) -> str:
    if moment is None:
        moment = datetime.now(timezone.utc)
    elif moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)

    return moment.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"
