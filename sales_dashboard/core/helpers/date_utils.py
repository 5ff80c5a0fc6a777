from datetime import date, datetime, time, timezone

DATE_FORMATS = ['%Y-%m-%d', '%Y-%m-%d %H:%M:%S', '%Y/%m/%d', '%m/%d/%Y']


def parse_date_string(date_string: str) -> datetime:
    """Parse date string and return timezone-aware datetime"""
    try:
        dt = datetime.fromisoformat(date_string.replace('Z', '+00:00'))
    except ValueError:
        for fmt in DATE_FORMATS:
            try:
                dt = datetime.strptime(date_string, fmt)
                break
            except ValueError:
                continue
        else:
            raise ValueError(f"Unable to parse date format: {date_string}")
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def parse_calendar_date(date_string: str) -> date:
    """Calendar day of a date string as written, ignoring any UTC offset"""
    return parse_date_string(date_string).date()


def start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


def end_of_day(day: date) -> datetime:
    return datetime.combine(day, time.max, tzinfo=timezone.utc)
