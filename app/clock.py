from datetime import datetime, timedelta, timezone


def utcnow():
    """Naive UTC now, the form stored in DateTime columns"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def next_timestamp(previous):
    """Current time, pushed past ``previous`` so updatedAt always advances"""
    now = utcnow()
    if previous is not None and now <= previous:
        return previous + timedelta(microseconds=1)
    return now
